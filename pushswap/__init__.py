"""Sort integers with two stacks and a limited set of operations."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "small_sort", "sort", "stacks"]