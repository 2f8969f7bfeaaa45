"""Visitors over shapes: collision detection and drawing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .bounding_box import BoundingBox
from .iterators import IteratorFactory
from .shapes import Circle, CompoundShape, Rectangle, Shape, Triangle


class ShapeVisitor(ABC):
    """Double-dispatch target for ``Shape.accept``."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None: ...

    @abstractmethod
    def visit_triangle(self, triangle: Triangle) -> None: ...

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> None: ...

    @abstractmethod
    def visit_compound_shape(self, compound_shape: CompoundShape) -> None: ...


class CollisionDetector(ShapeVisitor):
    """Collects the leaf shapes whose bounding boxes touch a target shape's box."""

    def __init__(self, shape: Shape) -> None:
        self._target = BoundingBox(shape.get_points())
        self._collided: list[Shape] = []

    def _touches(self, shape: Shape) -> bool:
        return BoundingBox(shape.get_points()).collide(self._target)

    def _collect(self, shape: Shape) -> None:
        if self._touches(shape):
            self._collided.append(shape)

    def visit_circle(self, circle: Circle) -> None:
        self._collect(circle)

    def visit_triangle(self, triangle: Triangle) -> None:
        self._collect(triangle)

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self._collect(rectangle)

    def visit_compound_shape(self, compound_shape: CompoundShape) -> None:
        if not self._touches(compound_shape):
            return
        for child in compound_shape.create_iterator(IteratorFactory.get_instance("List")):
            child.accept(self)

    def collided_shapes(self) -> list[Shape]:
        return list(self._collided)


class ShapePrinter(ShapeVisitor):
    """Draws leaf shapes on a canvas; compound shapes draw nothing themselves."""

    def __init__(self, canvas: Any) -> None:
        self._canvas = canvas

    def visit_circle(self, circle: Circle) -> None:
        self._canvas.draw_circle(circle)

    def visit_triangle(self, triangle: Triangle) -> None:
        self._canvas.draw_triangle(triangle)

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self._canvas.draw_rectangle(rectangle)

    def visit_compound_shape(self, compound_shape: CompoundShape) -> None:
        return None