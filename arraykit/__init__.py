"""Classify, transform, aggregate and search lists of integers, with a small command line."""

__version__ = "0.1.0"
__all__ = ["aggregate", "classify", "cli", "search", "transform"]