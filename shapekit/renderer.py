"""Low-level renderers that a canvas adapter draws through."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class Renderer(ABC):
    """A primitive drawing back end working in plain coordinates."""

    @abstractmethod
    def init(self, width: int, height: int) -> None: ...

    @abstractmethod
    def render_draw_lines(self, points: Sequence[float]) -> None:
        """Draw a closed polyline from flat ``x0, y0, x1, y1, ...`` coordinates."""

    @abstractmethod
    def render_draw_circle(self, centre_x: float, centre_y: float, radius: float) -> None: ...

    @abstractmethod
    def render_present(self) -> None: ...

    @abstractmethod
    def destroy(self) -> None: ...


class RecordingRenderer(Renderer):
    """A renderer that draws nothing and remembers the last call of each kind."""

    def __init__(self) -> None:
        self.init_called = False
        self.width: int | None = None
        self.height: int | None = None
        self.present_called = False
        self.destroyed = False
        self.circle_args: tuple[float, float, float] | None = None
        self.lines_points: list[float] | None = None
        self.lines_size = 0

    def init(self, width: int, height: int) -> None:
        self.init_called = True
        self.width = width
        self.height = height

    def render_draw_lines(self, points: Sequence[float]) -> None:
        self.lines_points = list(points)
        self.lines_size = len(self.lines_points)

    def render_draw_circle(self, centre_x: float, centre_y: float, radius: float) -> None:
        self.circle_args = (centre_x, centre_y, radius)

    def render_present(self) -> None:
        self.present_called = True

    def destroy(self) -> None:
        self.destroyed = True