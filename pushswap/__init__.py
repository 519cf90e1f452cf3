"""Two-stack integer sorting with a restricted set of moves."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorter", "stack"]