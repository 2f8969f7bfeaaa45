"""The drawing surface that shapes are printed on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shapes import Circle, Rectangle, Triangle


class Canvas(ABC):
    """Something that can draw circles, triangles and rectangles and show them."""

    @abstractmethod
    def draw_circle(self, circle: Circle) -> None: ...

    @abstractmethod
    def draw_triangle(self, triangle: Triangle) -> None: ...

    @abstractmethod
    def draw_rectangle(self, rectangle: Rectangle) -> None: ...

    @abstractmethod
    def display(self) -> None: ...