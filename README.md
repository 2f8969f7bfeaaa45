# shapekit

A small library for two-dimensional shapes: circles, triangles, rectangles and
compound shapes that hold other shapes, with iteration, visitors, collision
detection, a text format with a parser, and undoable drag-and-drop commands.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `shapekit.geometry` – `Point` (compares equal within 0.001, orders by x then y,
  `info()` gives `"(x.xx, y.yy)"`) and `TwoDimensionalVector` with `length()`,
  `dot()`, `cross()`, `move()` and `info()`.
- `shapekit.shapes` – `Circle`, `Triangle`, `Rectangle` and `CompoundShape`, all
  with `area()`, `perimeter()`, `info()`, `get_points()` (distinct corner points,
  sorted), `move()`, `accept()` and `create_iterator()`. `Triangle` and
  `Rectangle` raise `ShapeError` when their two vectors share no end point, or
  are parallel (triangle) or not perpendicular (rectangle). Only
  `CompoundShape` supports `add_shape()` and `delete_shape()`; the others raise
  `ShapeError`. `CompoundShape.delete_shape()` also removes the shape from
  nested compounds.
- `shapekit.iterators` – `NullIterator`, `ListCompoundIterator`,
  `DFSCompoundIterator` and `BFSCompoundIterator` with
  `first()` / `current_item()` / `next()` / `is_done()`, usable in a `for`
  loop too. Factories are registered under `"List"`, `"DFS"` and `"BFS"` and
  looked up with `IteratorFactory.get_instance(name)`. Going past the end
  raises `IteratorError`.
- `shapekit.bounding_box` – `maximum_point()`, `minimum_point()` and
  `BoundingBox` with `max_point()`, `min_point()` and `collide()`; an empty set
  of points raises `ValueError`.
- `shapekit.visitors` – `ShapeVisitor`, `CollisionDetector` (collects leaf
  shapes whose bounding boxes touch a target's) and `ShapePrinter` (draws leaf
  shapes on a canvas).
- `shapekit.scanner` – `Scanner` with `next()`, `next_double()` and `is_done()`;
  bad input raises `ScanError`.
- `shapekit.builder` – `ShapeBuilder`, building shapes and nested compounds.
- `shapekit.parser` – `ShapeParser`, reading the text format below.
- `shapekit.file_reader` – `FileReader`, reading a whole text file.
- `shapekit.canvas`, `shapekit.renderer`, `shapekit.adapter` – the `Canvas`
  interface, the `Renderer` interface, `RecordingRenderer` (draws nothing and
  remembers the last call of each kind) and `RendererAdapter`, a canvas that
  turns shapes into renderer lines and circles.
- `shapekit.observer` and `shapekit.drawing` – `Observer`, `Subject`,
  `Drawing` (a subject holding shapes) and `RealCanvas` (an observer that
  redraws every shape of a drawing, nested ones included).
- `shapekit.mouse_position`, `shapekit.drag_and_drop`, `shapekit.commands`,
  `shapekit.event_listener` – the shared `MousePosition`, `DragAndDrop`
  (`grab()`, `move()`, `drop()`; moving with nothing held raises `DragError`),
  the commands `GrabCommand`, `MoveCommand`, `DropCommand`, `UndoCommand`,
  `RefreshCommand` and `MacroCommand`, `CommandHistory`, and `EventListener`,
  which maps the events `Left_Mouse_Down`, `Left_Mouse_Move`, `Left_Mouse_Up`,
  `Right_Mouse_Down` and `Refresh` to registered commands.

## The text format

The parser reads the same text that `info()` writes:

```
CompoundShape (
    Circle (Vector ((0.00, 0.00), (0.00, 5.00))),
    Rectangle (
        Vector ((0.00, 0.00), (0.00, 5.00)),
        Vector ((0.00, 0.00), (5.00, 0.00))
    )
)
```

Several top-level shapes may follow one another in one text.

## Example

```python
from shapekit.geometry import Point, TwoDimensionalVector
from shapekit.shapes import Circle, Rectangle, CompoundShape
from shapekit.iterators import IteratorFactory
from shapekit.parser import ShapeParser
from shapekit.visitors import CollisionDetector

circle = Circle(TwoDimensionalVector(Point(0, 0), Point(3, 0)))
rect = Rectangle(
    TwoDimensionalVector(Point(0, 0), Point(5, 0)),
    TwoDimensionalVector(Point(0, 0), Point(0, 2)),
)
group = CompoundShape([circle, rect])

print(group.area())     # 9*pi + 10
print(group.info())

for shape in group.create_iterator(IteratorFactory.get_instance("DFS")):
    print(shape.info())

parser = ShapeParser(group.info())
parser.parse()
shapes = parser.result()

detector = CollisionDetector(circle)
group.accept(detector)
print(detector.collided_shapes())
```

## Command line

```
shapekit path/to/input.txt
```

reads and parses the shapes in the file, builds a drawing with a canvas
observing it, wires the mouse events to the grab, move, drop and undo commands,
and exits with status 0. Without a path, or when the file cannot be read or
parsed, it prints a message to standard error and exits with status 1.

## What it does not do

The package opens no window and draws nothing on screen. The command line uses
`RecordingRenderer`, which only records the calls made to it, and no mouse
events reach the event listener from outside; to see or drag shapes you would
supply your own `Renderer` and feed events to an `EventListener`.