"""The last known mouse position, shared by the whole application."""

from __future__ import annotations

from typing import ClassVar


class MousePosition:
    """Single shared record of where the mouse pointer was last seen."""

    _instance: ClassVar[MousePosition | None] = None

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0

    @classmethod
    def instance(cls) -> MousePosition:
        """Return the shared position, creating it on first use."""
        if MousePosition._instance is None:
            MousePosition._instance = MousePosition()
        return MousePosition._instance

    def set_pos(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"MousePosition(x={self.x!r}, y={self.y!r})"