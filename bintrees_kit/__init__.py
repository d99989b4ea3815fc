"""Linked binary tree nodes with traversals, measurements, an ASCII renderer and demo scenarios."""

__version__ = "0.1.0"
__all__ = ["__version__"]