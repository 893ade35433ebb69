"""Benchmarks comparing a sorted-list priority queue with a binary max-heap."""

__version__ = "0.1.0"
__all__ = ["__version__"]