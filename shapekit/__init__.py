"""Composite 2D shapes with iterators, visitors, collision detection, a text parser and undoable drag-and-drop commands."""

__version__ = "0.1.0"

__all__ = ["__version__"]