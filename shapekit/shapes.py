"""Circles, triangles, rectangles and compound shapes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Iterable

from .geometry import Point, TwoDimensionalVector
from .iterators import Iterator, IteratorFactory

_CANNOT_ADD = "Only compoundshape can add shape"
_CANNOT_DELETE = "Only compoundshape can delete shape"


class ShapeError(Exception):
    """Raised for invalid shapes or operations a shape does not support."""


def _copy(vector: TwoDimensionalVector) -> TwoDimensionalVector:
    return TwoDimensionalVector(vector.a(), vector.b())


def _point_set(points: Iterable[Point]) -> list[Point]:
    """Distinct points in ascending (x, y) order."""
    unique: dict[tuple[float, float], Point] = {}
    for point in points:
        unique.setdefault((point.x(), point.y()), point)
    return [unique[key] for key in sorted(unique)]


def _split_at_common(
    v1: TwoDimensionalVector, v2: TwoDimensionalVector
) -> tuple[Point, Point, Point]:
    """The shared end point of two vectors and their two other end points."""
    if v1.a() == v2.a():
        return v1.a(), v1.b(), v2.b()
    if v1.a() == v2.b():
        return v1.a(), v1.b(), v2.a()
    if v1.b() == v2.a():
        return v1.b(), v1.a(), v2.b()
    return v1.b(), v1.a(), v2.a()


def _shares_a_point(v1: TwoDimensionalVector, v2: TwoDimensionalVector) -> bool:
    return any(p == q for p in (v1.a(), v1.b()) for q in (v2.a(), v2.b()))


class Shape(ABC):
    """A shape in the plane."""

    @abstractmethod
    def area(self) -> float: ...

    @abstractmethod
    def perimeter(self) -> float: ...

    @abstractmethod
    def info(self) -> str: ...

    @abstractmethod
    def create_iterator(self, factory: IteratorFactory) -> Iterator: ...

    @abstractmethod
    def get_points(self) -> list[Point]: ...

    @abstractmethod
    def accept(self, visitor: Any) -> None: ...

    @abstractmethod
    def add_shape(self, shape: Shape) -> None: ...

    @abstractmethod
    def delete_shape(self, shape: Shape) -> None: ...

    @abstractmethod
    def move(self, delta_x: float, delta_y: float) -> None: ...


class Circle(Shape):
    """A circle given by a vector from its centre to a point on its edge."""

    def __init__(self, radius_vec: TwoDimensionalVector) -> None:
        self._radius_vec = _copy(radius_vec)

    def radius(self) -> float:
        return self._radius_vec.length()

    def area(self) -> float:
        return self.radius() * self.radius() * math.pi

    def perimeter(self) -> float:
        return 2 * self.radius() * math.pi

    def info(self) -> str:
        return f"Circle ({self._radius_vec.info()})"

    def create_iterator(self, factory: IteratorFactory) -> Iterator:
        return factory.create_iterator()

    def get_points(self) -> list[Point]:
        centre = self._radius_vec.a()
        r = self.radius()
        return _point_set(
            [Point(centre.x() + r, centre.y() + r), Point(centre.x() - r, centre.y() - r)]
        )

    def accept(self, visitor: Any) -> None:
        visitor.visit_circle(self)

    def add_shape(self, shape: Shape) -> None:
        raise ShapeError(_CANNOT_ADD)

    def delete_shape(self, shape: Shape) -> None:
        raise ShapeError(_CANNOT_DELETE)

    def move(self, delta_x: float, delta_y: float) -> None:
        self._radius_vec.move(delta_x, delta_y)


class Triangle(Shape):
    """A triangle given by two non-parallel vectors sharing an end point."""

    def __init__(self, v1: TwoDimensionalVector, v2: TwoDimensionalVector) -> None:
        if not (_shares_a_point(v1, v2) and abs(v1.cross(v2)) > 0.001):
            raise ShapeError("It's not a Triangle")
        self._v1 = _copy(v1)
        self._v2 = _copy(v2)

    def area(self) -> float:
        return abs(self._v1.cross(self._v2)) / 2

    def perimeter(self) -> float:
        _, end1, end2 = _split_at_common(self._v1, self._v2)
        third = TwoDimensionalVector(end1, end2).length()
        return third + self._v1.length() + self._v2.length()

    def info(self) -> str:
        return f"Triangle ({self._v1.info()}, {self._v2.info()})"

    def create_iterator(self, factory: IteratorFactory) -> Iterator:
        return factory.create_iterator()

    def get_points(self) -> list[Point]:
        return _point_set([self._v1.a(), self._v1.b(), self._v2.a(), self._v2.b()])

    def accept(self, visitor: Any) -> None:
        visitor.visit_triangle(self)

    def add_shape(self, shape: Shape) -> None:
        raise ShapeError(_CANNOT_ADD)

    def delete_shape(self, shape: Shape) -> None:
        raise ShapeError(_CANNOT_DELETE)

    def move(self, delta_x: float, delta_y: float) -> None:
        self._v1.move(delta_x, delta_y)
        self._v2.move(delta_x, delta_y)


class Rectangle(Shape):
    """A rectangle given by two perpendicular vectors sharing an end point."""

    def __init__(self, length_vec: TwoDimensionalVector, width_vec: TwoDimensionalVector) -> None:
        if not (_shares_a_point(length_vec, width_vec) and abs(length_vec.dot(width_vec)) < 0.001):
            raise ShapeError("It's not a Rectangle")
        self._length_vec = _copy(length_vec)
        self._width_vec = _copy(width_vec)

    def length(self) -> float:
        return self._length_vec.length()

    def width(self) -> float:
        return self._width_vec.length()

    def area(self) -> float:
        return abs(self._length_vec.cross(self._width_vec))

    def perimeter(self) -> float:
        return 2 * (self.length() + self.width())

    def info(self) -> str:
        return f"Rectangle ({self._length_vec.info()}, {self._width_vec.info()})"

    def create_iterator(self, factory: IteratorFactory) -> Iterator:
        return factory.create_iterator()

    def get_points(self) -> list[Point]:
        common, end1, end2 = _split_at_common(self._length_vec, self._width_vec)
        opposite = Point(
            end1.x() + end2.x() - common.x(),
            end1.y() + end2.y() - common.y(),
        )
        return _point_set([common, end1, end2, opposite])

    def accept(self, visitor: Any) -> None:
        visitor.visit_rectangle(self)

    def add_shape(self, shape: Shape) -> None:
        raise ShapeError(_CANNOT_ADD)

    def delete_shape(self, shape: Shape) -> None:
        raise ShapeError(_CANNOT_DELETE)

    def move(self, delta_x: float, delta_y: float) -> None:
        self._length_vec.move(delta_x, delta_y)
        self._width_vec.move(delta_x, delta_y)


class CompoundShape(Shape):
    """A shape made of other shapes, possibly nested."""

    def __init__(self, shapes: Iterable[Shape] = ()) -> None:
        self._shapes: list[Shape] = list(shapes)

    def area(self) -> float:
        return sum((shape.area() for shape in self._shapes), 0.0)

    def perimeter(self) -> float:
        return sum((shape.perimeter() for shape in self._shapes), 0.0)

    def info(self) -> str:
        return "CompoundShape (" + ", ".join(shape.info() for shape in self._shapes) + ")"

    def add_shape(self, shape: Shape) -> None:
        self._shapes.append(shape)

    def delete_shape(self, shape: Shape) -> None:
        """Remove ``shape`` from this compound and from every nested compound."""
        self._shapes = [s for s in self._shapes if s is not shape]
        dfs = IteratorFactory.get_instance("DFS")
        for child in self._shapes:
            if not child.create_iterator(dfs).is_done():
                child.delete_shape(shape)

    def create_iterator(self, factory: IteratorFactory) -> Iterator:
        return factory.create_iterator(self._shapes)

    def get_points(self) -> list[Point]:
        """Points of every leaf shape in the tree."""
        dfs = IteratorFactory.get_instance("DFS")
        points: list[Point] = []
        for item in self.create_iterator(dfs):
            if item.create_iterator(dfs).is_done():
                points.extend(item.get_points())
        return _point_set(points)

    def accept(self, visitor: Any) -> None:
        visitor.visit_compound_shape(self)

    def move(self, delta_x: float, delta_y: float) -> None:
        for shape in self._shapes:
            shape.move(delta_x, delta_y)