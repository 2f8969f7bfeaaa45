"""A canvas that draws shapes through a low-level renderer."""

from __future__ import annotations

from .canvas import Canvas
from .renderer import Renderer
from .shapes import Circle, Rectangle, Triangle


class RendererAdapter(Canvas):
    """Turns shapes into the renderer's lines and circles."""

    def __init__(self, width: int, height: int, renderer: Renderer) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height should be greater than zero")
        renderer.init(width, height)
        self._renderer = renderer

    def draw_circle(self, circle: Circle) -> None:
        low, high = circle.get_points()
        self._renderer.render_draw_circle(
            (low.x() + high.x()) / 2,
            (low.y() + high.y()) / 2,
            circle.radius(),
        )

    def draw_triangle(self, triangle: Triangle) -> None:
        self._renderer.render_draw_lines(
            [coord for p in triangle.get_points() for coord in (p.x(), p.y())]
        )

    def draw_rectangle(self, rectangle: Rectangle) -> None:
        # Sorted corners with the last two swapped go round the rectangle in order.
        first, second, third, fourth = rectangle.get_points()
        corners = (first, second, fourth, third)
        self._renderer.render_draw_lines([coord for p in corners for coord in (p.x(), p.y())])

    def display(self) -> None:
        self._renderer.render_present()