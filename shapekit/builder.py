"""Assembles shapes, including nested compound shapes, step by step."""

from __future__ import annotations

from .geometry import Point, TwoDimensionalVector
from .shapes import Circle, CompoundShape, Rectangle, Shape, ShapeError, Triangle


class ShapeBuilder:
    """Builds shapes; those built between compound start and end go inside it."""

    def __init__(self) -> None:
        self._result: list[Shape] = []
        self._open_compounds: list[CompoundShape] = []

    def _place(self, shape: Shape) -> None:
        if self._open_compounds:
            self._open_compounds[-1].add_shape(shape)
        else:
            self._result.append(shape)

    def build_circle(self, center: Point, to_radius: Point) -> None:
        self._place(Circle(TwoDimensionalVector(center, to_radius)))

    def build_triangle(self, common_point: Point, v1_point: Point, v2_point: Point) -> None:
        self._place(
            Triangle(
                TwoDimensionalVector(common_point, v1_point),
                TwoDimensionalVector(common_point, v2_point),
            )
        )

    def build_rectangle(self, common_point: Point, v1_point: Point, v2_point: Point) -> None:
        self._place(
            Rectangle(
                TwoDimensionalVector(common_point, v1_point),
                TwoDimensionalVector(common_point, v2_point),
            )
        )

    def build_compound_shape(self) -> None:
        self._open_compounds.append(CompoundShape())

    def build_compound_end(self) -> None:
        if not self._open_compounds:
            raise ShapeError("No compound shape to end")
        self._place_finished(self._open_compounds.pop())

    def _place_finished(self, compound: CompoundShape) -> None:
        self._place(compound)

    def result(self) -> list[Shape]:
        return list(self._result)