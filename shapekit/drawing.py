"""A set of shapes that notifies canvases, and the canvas that redraws it."""

from __future__ import annotations

from typing import Iterable

from .canvas import Canvas
from .iterators import IteratorFactory
from .observer import Observer, Subject
from .shapes import Shape
from .visitors import ShapePrinter


class Drawing(Subject):
    """The shapes on screen; observers are told when they change."""

    def __init__(self, shapes: Iterable[Shape]) -> None:
        super().__init__()
        self._shapes = list(shapes)

    def shapes(self) -> list[Shape]:
        return list(self._shapes)


class RealCanvas(Observer):
    """Redraws every shape of a drawing, nested ones included, on a canvas."""

    def __init__(self, canvas: Canvas, drawing: Drawing) -> None:
        self._canvas = canvas
        self._drawing = drawing
        self._printer = ShapePrinter(canvas)

    def update(self) -> None:
        dfs = IteratorFactory.get_instance("DFS")
        for shape in self._drawing.shapes():
            shape.accept(self._printer)
            for item in shape.create_iterator(dfs):
                item.accept(self._printer)