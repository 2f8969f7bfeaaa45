"""Command that loads shapes from a file and wires up drag-and-drop editing."""

from __future__ import annotations

import sys
from typing import Sequence

from .adapter import RendererAdapter
from .commands import CommandHistory, DropCommand, GrabCommand, MoveCommand, UndoCommand
from .drag_and_drop import DragAndDrop
from .drawing import Drawing, RealCanvas
from .event_listener import EventListener
from .file_reader import FileReader
from .parser import ShapeParser
from .renderer import RecordingRenderer
from .scanner import ScanError
from .shapes import ShapeError

_WIDTH = 1024
_HEIGHT = 768


def main(argv: Sequence[str] | None = None) -> int:
    """Load the shapes file named by the first argument and show them."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Missing the path of input.txt", file=sys.stderr)
        return 1

    try:
        text = FileReader(args[0]).read()
        parser = ShapeParser(text)
        parser.parse()
    except OSError:
        print("Failed to open file.", file=sys.stderr)
        return 1
    except (ScanError, ShapeError) as error:
        print(f"Invalid input: {error}", file=sys.stderr)
        return 1

    event_listener = EventListener()
    renderer = RecordingRenderer()
    canvas = RendererAdapter(_WIDTH, _HEIGHT, renderer)

    drawing = Drawing(parser.result())
    drawing.attach(RealCanvas(canvas, drawing))

    drag_and_drop = DragAndDrop(drawing)
    history = CommandHistory()
    event_listener.on("Left_Mouse_Down", GrabCommand(drag_and_drop, history))
    event_listener.on("Left_Mouse_Move", MoveCommand(drag_and_drop, history))
    event_listener.on("Left_Mouse_Up", DropCommand(drag_and_drop, history))
    event_listener.on("Right_Mouse_Down", UndoCommand(drag_and_drop, history))
    canvas.display()
    renderer.destroy()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())