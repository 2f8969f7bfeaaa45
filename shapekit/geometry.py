"""Points and two-dimensional vectors."""

from __future__ import annotations

import math

_TOLERANCE = 0.001


def _format_coordinate(value: float) -> str:
    rounded = math.floor(value * 100 + 0.5) / 100
    return f"{rounded:.2f}"


class Point:
    """A point in the plane; equality allows a small tolerance."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._x = float(x)
        self._y = float(y)

    def x(self) -> float:
        return self._x

    def y(self) -> float:
        return self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self._x - other._x) < _TOLERANCE and abs(self._y - other._y) < _TOLERANCE

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self._x, self._y) < (other._x, other._y)

    def move(self, delta_x: float, delta_y: float) -> None:
        self._x += delta_x
        self._y += delta_y

    def info(self) -> str:
        return f"({_format_coordinate(self._x)}, {_format_coordinate(self._y)})"

    def __repr__(self) -> str:
        return f"Point({self._x!r}, {self._y!r})"


class TwoDimensionalVector:
    """A vector from point ``a`` to point ``b``; it keeps its own copies of both."""

    __slots__ = ("_a", "_b")

    def __init__(self, a: Point, b: Point) -> None:
        self._a = Point(a.x(), a.y())
        self._b = Point(b.x(), b.y())

    def a(self) -> Point:
        return Point(self._a.x(), self._a.y())

    def b(self) -> Point:
        return Point(self._b.x(), self._b.y())

    def _dx(self) -> float:
        return self._b.x() - self._a.x()

    def _dy(self) -> float:
        return self._b.y() - self._a.y()

    def length(self) -> float:
        return math.sqrt(self._dx() * self._dx() + self._dy() * self._dy())

    def dot(self, other: TwoDimensionalVector) -> float:
        return self._dx() * other._dx() + self._dy() * other._dy()

    def cross(self, other: TwoDimensionalVector) -> float:
        return self._dx() * other._dy() - self._dy() * other._dx()

    def move(self, delta_x: float, delta_y: float) -> None:
        self._a.move(delta_x, delta_y)
        self._b.move(delta_x, delta_y)

    def info(self) -> str:
        return f"Vector ({self._a.info()}, {self._b.info()})"

    def __repr__(self) -> str:
        return f"TwoDimensionalVector({self._a!r}, {self._b!r})"