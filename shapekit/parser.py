"""Parses the textual shape description format into shapes."""

from __future__ import annotations

from .builder import ShapeBuilder
from .geometry import Point
from .scanner import Scanner
from .shapes import Shape, ShapeError


def _common_point_first(points: list[Point]) -> tuple[Point, Point, Point]:
    """Order two vectors' end points as (shared point, other end, other end)."""
    p0, p1, p2, p3 = points
    if p0 == p2:
        return p0, p1, p3
    if p0 == p3:
        return p0, p1, p2
    if p1 == p2:
        return p1, p0, p3
    if p1 == p3:
        return p1, p0, p2
    raise ShapeError("The two vectors share no point")


class ShapeParser:
    """Reads shape descriptions and builds the shapes they describe."""

    def __init__(self, text: str) -> None:
        self._scanner = Scanner(text)
        self._builder = ShapeBuilder()

    def _skip(self, count: int) -> None:
        for _ in range(count):
            self._scanner.next()

    def _read_point(self) -> Point:
        x = self._scanner.next_double()
        self._skip(1)
        y = self._scanner.next_double()
        return Point(x, y)

    def _read_vector(self) -> list[Point]:
        """Read ``((x, y), (x, y))`` following a ``Vector`` keyword."""
        self._skip(2)
        start = self._read_point()
        self._skip(3)
        end = self._read_point()
        self._skip(2)
        return [start, end]

    def _parse_circle(self) -> None:
        self._skip(2)
        center, to_radius = self._read_vector()
        self._skip(1)
        self._builder.build_circle(center, to_radius)

    def _read_two_vectors(self) -> tuple[Point, Point, Point]:
        self._skip(2)
        points = self._read_vector()
        self._skip(2)
        points += self._read_vector()
        self._skip(1)
        return _common_point_first(points)

    def parse(self) -> None:
        while not self._scanner.is_done():
            token = self._scanner.next()
            if token == "Circle":
                self._parse_circle()
            elif token == "Triangle":
                self._builder.build_triangle(*self._read_two_vectors())
            elif token == "Rectangle":
                self._builder.build_rectangle(*self._read_two_vectors())
            elif token == "CompoundShape":
                self._builder.build_compound_shape()
                self._scanner.next()
            elif token == ")":
                self._builder.build_compound_end()

    def result(self) -> list[Shape]:
        return self._builder.result()