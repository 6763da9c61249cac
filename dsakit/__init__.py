"""Algorithms for dynamic programming, union-find, greedy, string and binary tree problems."""

__version__ = "0.1.0"
__all__ = ["dp", "dsu", "greedy", "text", "tree", "paths"]