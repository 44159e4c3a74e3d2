"""Graphs with list or matrix storage, cycle search, shortest paths and a menu shell."""

__version__ = "0.1.0"
__all__ = ["elements", "forms", "list_form", "matrix_form", "graph", "cycles", "paths", "cli"]