"""Undoable commands for dragging shapes, and the history that records them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Iterable

from .canvas import Canvas
from .iterators import IteratorFactory
from .mouse_position import MousePosition
from .shapes import Shape
from .visitors import ShapePrinter


class CommandError(Exception):
    """Raised when a simple command is asked to act as a macro."""


class Command(ABC):
    """An action that can be carried out and undone."""

    @abstractmethod
    def execute(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...

    def add_command(self, command: Command) -> None:
        raise CommandError("cannot add command.")

    def commands(self) -> list[Command]:
        raise CommandError("cannot get commands.")


class MacroCommand(Command):
    """A sequence of commands run in order and undone in reverse."""

    def __init__(self) -> None:
        self._commands: list[Command] = []
        self._pending_undo: list[Command] = []

    def execute(self) -> None:
        for command in self._commands:
            command.execute()

    def undo(self) -> None:
        """Undo every added command, newest first; a second call does nothing."""
        while self._pending_undo:
            self._pending_undo.pop().undo()

    def add_command(self, command: Command) -> None:
        self._commands.append(command)
        self._pending_undo.append(command)

    def commands(self) -> list[Command]:
        return list(self._commands)


class CommandHistory:
    """Stack of executed commands; commands inside a macro are grouped."""

    def __init__(self) -> None:
        self._in_macro = False
        self._history: list[Command] = []
        self._undone: list[Command] = []

    def begin_macro_command(self) -> None:
        self._in_macro = True
        self._history.append(MacroCommand())

    def add_command(self, command: Command) -> None:
        if self._in_macro:
            self._history[-1].add_command(command)
        else:
            self._history.append(command)

    def end_macro_command(self) -> None:
        self._in_macro = False

    def undo(self) -> None:
        """Undo the newest recorded command, if there is one."""
        if not self._history:
            return
        latest = self._history[-1]
        self._undone.append(latest)
        latest.undo()
        self._history.pop()

    def history(self) -> list[Command]:
        """Recorded commands, oldest first."""
        return list(self._history)


class _PointerCommand(Command):
    """A drag command that acts at the mouse position seen when it ran."""

    def __init__(self, drag_and_drop: Any, command_history: CommandHistory) -> None:
        self._drag_and_drop = drag_and_drop
        self._command_history = command_history
        self.x = 0.0
        self.y = 0.0

    def _capture_position(self) -> None:
        position = MousePosition.instance()
        self.x = position.x
        self.y = position.y


class GrabCommand(_PointerCommand):
    """Grabs a shape and opens a macro in the history."""

    def __init__(self, drag_and_drop: Any, command_history: CommandHistory) -> None:
        super().__init__(drag_and_drop, command_history)

    def execute(self) -> None:
        self._capture_position()
        self._drag_and_drop.grab(self.x, self.y)
        self._command_history.begin_macro_command()
        self._command_history.add_command(copy.copy(self))

    def undo(self) -> None:
        self._drag_and_drop.move(self.x, self.y)
        self._drag_and_drop.drop(self.x, self.y)


class MoveCommand(_PointerCommand):
    """Moves the held shape to the mouse position."""

    def __init__(self, drag_and_drop: Any, command_history: CommandHistory) -> None:
        super().__init__(drag_and_drop, command_history)

    def execute(self) -> None:
        self._capture_position()
        self._drag_and_drop.move(self.x, self.y)

    def undo(self) -> None:
        self._drag_and_drop.move(self.x, self.y)


class DropCommand(_PointerCommand):
    """Drops the held shape and closes the open macro in the history."""

    def __init__(self, drag_and_drop: Any, command_history: CommandHistory) -> None:
        super().__init__(drag_and_drop, command_history)

    def execute(self) -> None:
        self._capture_position()
        self._drag_and_drop.drop(self.x, self.y)
        self._command_history.add_command(copy.copy(self))
        self._command_history.end_macro_command()

    def undo(self) -> None:
        self._drag_and_drop.grab(self.x, self.y)


class UndoCommand(Command):
    """Undoes the newest command in the history."""

    def __init__(self, drag_and_drop: Any, command_history: CommandHistory) -> None:
        self._drag_and_drop = drag_and_drop
        self._command_history = command_history

    def execute(self) -> None:
        self._command_history.undo()

    def undo(self) -> None:
        return None


class RefreshCommand(Command):
    """Draws a fixed list of shapes, nested ones included, on a canvas."""

    def __init__(self, canvas: Canvas, shapes: Iterable[Shape]) -> None:
        self._canvas = canvas
        self._shapes = list(shapes)
        self._printer = ShapePrinter(canvas)

    def execute(self) -> None:
        dfs = IteratorFactory.get_instance("DFS")
        for shape in self._shapes:
            shape.accept(self._printer)
            for item in shape.create_iterator(dfs):
                item.accept(self._printer)

    def undo(self) -> None:
        return None