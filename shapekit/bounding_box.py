"""Axis-aligned bounding boxes around sets of points."""

from __future__ import annotations

from typing import Iterable

from .geometry import Point


def _require_points(points: Iterable[Point]) -> list[Point]:
    collected = list(points)
    if not collected:
        raise ValueError("No point in set")
    return collected


def maximum_point(points: Iterable[Point]) -> Point:
    """The point made of the largest x and the largest y among ``points``."""
    collected = _require_points(points)
    return Point(max(p.x() for p in collected), max(p.y() for p in collected))


def minimum_point(points: Iterable[Point]) -> Point:
    """The point made of the smallest x and the smallest y among ``points``."""
    collected = _require_points(points)
    return Point(min(p.x() for p in collected), min(p.y() for p in collected))


class BoundingBox:
    """The smallest axis-aligned box holding a non-empty set of points."""

    def __init__(self, points: Iterable[Point]) -> None:
        collected = _require_points(points)
        self._max = maximum_point(collected)
        self._min = minimum_point(collected)

    def max_point(self) -> Point:
        return Point(self._max.x(), self._max.y())

    def min_point(self) -> Point:
        return Point(self._min.x(), self._min.y())

    def collide(self, other: BoundingBox) -> bool:
        """True when the two boxes overlap or touch."""
        return not (
            self._max.x() < other._min.x()
            or self._min.x() > other._max.x()
            or self._max.y() < other._min.y()
            or self._min.y() > other._max.y()
        )

    def __repr__(self) -> str:
        return f"BoundingBox(min={self._min!r}, max={self._max!r})"