"""Symbol table, parse-tree nodes, visitor and file helpers for the Letters language."""

__version__ = "0.1.0"
__all__ = ["cli", "symbols", "tree", "utils", "visitor"]