"""Two-stack sorting puzzle solver with a restricted instruction set."""

__version__ = "1.0.0"
__all__ = ["stack", "parsing", "costs", "sorter", "cli"]