"""Linked binary tree nodes with traversals, measurements, shape checks, ASCII drawing and demo scenarios."""

__version__ = "0.1.0"
__all__ = ["node", "display", "demo"]