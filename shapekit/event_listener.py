"""Maps mouse events to the commands registered for them."""

from __future__ import annotations

from .commands import Command
from .mouse_position import MousePosition


class EventListener:
    """Records the mouse position of each event and runs its command."""

    def __init__(self) -> None:
        self._callbacks: dict[str, Command] = {}

    def _trigger(self, event_name: str, x: float, y: float) -> None:
        MousePosition.instance().set_pos(x, y)
        command = self._callbacks.get(event_name)
        if command is None:
            print(f"Event: {event_name}is not registered.")
            return
        command.execute()

    def on(self, event_name: str, callback: Command) -> None:
        """Register ``callback`` for ``event_name``, replacing any earlier one."""
        self._callbacks[event_name] = callback

    def left_mouse_move(self, x: float, y: float) -> None:
        self._trigger("Left_Mouse_Move", x, y)

    def left_mouse_down(self, x: float, y: float) -> None:
        self._trigger("Left_Mouse_Down", x, y)

    def right_mouse_down(self, x: float, y: float) -> None:
        self._trigger("Right_Mouse_Down", x, y)

    def left_mouse_up(self, x: float, y: float) -> None:
        self._trigger("Left_Mouse_Up", x, y)

    def refresh(self, x: float, y: float) -> None:
        self._trigger("Refresh", x, y)