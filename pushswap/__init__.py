"""Two-stack sorting with a restricted instruction set, and an instruction checker."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "sorting", "cli", "checker"]