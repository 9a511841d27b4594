"""Classic algorithms and data structures: sorting, searching, heaps, trees,
graphs, shortest paths, spanning trees, flow, backtracking and more."""

__version__ = "0.1.0"