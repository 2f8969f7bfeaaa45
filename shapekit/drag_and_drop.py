"""Picking up shapes of a drawing with the mouse and moving them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .geometry import Point, TwoDimensionalVector
from .shapes import Circle, Shape
from .visitors import CollisionDetector

if TYPE_CHECKING:
    from .drawing import Drawing


class DragError(Exception):
    """Raised when a shape is moved before one has been grabbed."""


class DragAndDrop:
    """Grabs the shape under a point, moves it with the pointer and drops it."""

    def __init__(self, drawing: Drawing) -> None:
        self._drawing = drawing
        self._target: Shape | None = None
        self._previous_x = 0.0
        self._previous_y = 0.0
        self._drawing.notify()

    @property
    def target(self) -> Shape | None:
        """The shape currently held, if any."""
        return self._target

    def grab(self, x: float, y: float) -> None:
        """Hold the first shape whose bounding box holds ``(x, y)``.

        If no shape is there, whatever was held before stays held.
        """
        mouse = Point(x, y)
        detector = CollisionDetector(Circle(TwoDimensionalVector(mouse, mouse)))
        for shape in self._drawing.shapes():
            shape.accept(detector)
        collided = detector.collided_shapes()
        if collided:
            self._target = collided[0]
        self._previous_x = x
        self._previous_y = y

    def move(self, x: float, y: float) -> None:
        """Move the held shape by the pointer's travel since the last call."""
        if self._target is None:
            raise DragError("The target shape is not specified yet.")
        self._target.move(x - self._previous_x, y - self._previous_y)
        self._previous_x = x
        self._previous_y = y
        self._drawing.notify()

    def drop(self, x: float, y: float) -> None:
        self._target = None