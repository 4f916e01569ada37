"""Graph traversals, a callback depth-first search, filtering and reversing adaptors, adjacency matrices and union-find."""

__version__ = "0.1.0"