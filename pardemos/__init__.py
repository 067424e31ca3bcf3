"""Teaching demos: sorting, summary statistics, graph traversal and vector/matrix arithmetic."""

__version__ = "0.1.0"
__all__ = ["sorting", "stats", "graph", "linalg"]