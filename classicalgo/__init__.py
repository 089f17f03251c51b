"""Classic sorting, searching, plane geometry, string matching and graph traversal algorithms."""

__version__ = "0.1.0"