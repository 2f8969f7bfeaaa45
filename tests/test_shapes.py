import math

import pytest

from shapekit.geometry import Point, TwoDimensionalVector
from shapekit.iterators import IteratorError, IteratorFactory
from shapekit.shapes import Circle, CompoundShape, Rectangle, ShapeError, Triangle


def V(ax, ay, bx, by):
    return TwoDimensionalVector(Point(ax, ay), Point(bx, by))


def approx(value):
    return pytest.approx(value, abs=0.001)


class RecordingVisitor:
    def __init__(self):
        self.calls = []

    def visit_circle(self, circle):
        self.calls.append(("circle", circle))

    def visit_triangle(self, triangle):
        self.calls.append(("triangle", triangle))

    def visit_rectangle(self, rectangle):
        self.calls.append(("rectangle", rectangle))

    def visit_compound_shape(self, compound_shape):
        self.calls.append(("compound", compound_shape))


def small_circle():
    return Circle(V(-4.284, 0.264, -4.827, 0.728))


def slanted_triangle():
    return Triangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5))


def axis_rectangle():
    return Rectangle(V(0, 0, 3, 0), V(3, 4, 3, 0))


# Circle

def test_circle_radius():
    assert Circle(V(-2, 1, -1.47, 4.5)).radius() == approx(3.5399)


@pytest.mark.parametrize(
    "vec, area",
    [(V(-4.284, 0.264, -4.827, 0.728), 1.6027), (V(0, 0, 3, 0), 28.2743), (V(-2, 1, -1.47, 4.5), 39.3669)],
)
def test_circle_area(vec, area):
    assert Circle(vec).area() == approx(area)


@pytest.mark.parametrize(
    "vec, perimeter",
    [(V(-4.284, 0.264, -4.827, 0.728), 4.4877), (V(0, 0, 3, 0), 18.8496), (V(-2, 1, -1.47, 4.5), 22.2419)],
)
def test_circle_perimeter(vec, perimeter):
    assert Circle(vec).perimeter() == approx(perimeter)


def test_circle_info():
    assert small_circle().info() == "Circle (Vector ((-4.28, 0.26), (-4.83, 0.73)))"


def test_circle_add_shape_raises():
    with pytest.raises(ShapeError):
        Circle(V(-2, 1, -1.47, 4.5)).add_shape(small_circle())


def test_circle_delete_shape_raises():
    with pytest.raises(ShapeError):
        Circle(V(-2, 1, -1.47, 4.5)).delete_shape(small_circle())


@pytest.mark.parametrize("name", ["DFS", "BFS"])
def test_circle_null_iterator(name):
    assert Circle(V(-2, 1, -1.47, 4.5)).create_iterator(IteratorFactory.get_instance(name)).is_done()


def test_circle_get_points():
    points = Circle(V(-2, 1, -1.47, 4.5)).get_points()
    assert points == [Point(-5.5399, -2.5399), Point(1.5399, 4.5399)]


def test_circle_keeps_own_vector():
    vec = V(0, 0, 0, 5)
    c = Circle(vec)
    vec.move(10, 10)
    c.move(1, 1)
    assert c.info() == "Circle (Vector ((1.00, 1.00), (1.00, 6.00)))"
    assert vec.a() == Point(10, 10)


def test_circle_accept():
    c = small_circle()
    visitor = RecordingVisitor()
    c.accept(visitor)
    assert visitor.calls == [("circle", c)]


# Triangle

def test_triangle_without_common_point_raises():
    with pytest.raises(ShapeError):
        Triangle(V(0, 0, 3, 0), V(1, 1, 3, 3))


def test_triangle_without_common_point_raises2():
    with pytest.raises(ShapeError):
        Triangle(V(4.1, 5.1, 8, 0), V(1, 1, 3, 3))


def test_triangle_valid():
    assert Triangle(V(0, 0, 3, 0), V(3, 4, 3, 0)).area() == approx(6)


def test_triangle_collinear_raises():
    with pytest.raises(ShapeError):
        Triangle(V(1, 1, 10, 10), V(1, 1, 3, 3))


def test_triangle_area2():
    assert slanted_triangle().area() == approx(6.2655)


def test_triangle_perimeter():
    assert Triangle(V(0, 0, 3, 0), V(3, 4, 3, 0)).perimeter() == approx(12)


def test_triangle_perimeter2():
    assert slanted_triangle().perimeter() == approx(12.0860)


def test_triangle_info():
    t = Triangle(V(0, 0, 3, 0), V(3, 4, 3, 0))
    assert t.info() == "Triangle (Vector ((0.00, 0.00), (3.00, 0.00)), Vector ((3.00, 4.00), (3.00, 0.00)))"


def test_triangle_add_and_delete_raise():
    t1 = Triangle(V(0, 0, 3, 0), V(3, 4, 3, 0))
    with pytest.raises(ShapeError):
        t1.add_shape(slanted_triangle())
    with pytest.raises(ShapeError):
        t1.delete_shape(slanted_triangle())


def test_triangle_null_iterator():
    t = Triangle(V(0, 0, 3, 0), V(3, 4, 3, 0))
    assert t.create_iterator(IteratorFactory.get_instance("DFS")).is_done()


def test_triangle_get_points():
    points = Triangle(V(0, 0, 3, 0), V(3, 4, 3, 0)).get_points()
    assert points == [Point(0, 0), Point(3, 0), Point(3, 4)]


def test_triangle_move():
    t = Triangle(V(0, 0, 3, 0), V(3, 4, 3, 0))
    t.move(1, -1)
    assert t.get_points() == [Point(1, -1), Point(4, -1), Point(4, 3)]


# Rectangle

def test_rectangle_valid():
    assert slanted_triangle() and Rectangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5)).area() == approx(12.5309)


def test_rectangle_valid2():
    assert axis_rectangle().area() == approx(12)


def test_rectangle_not_perpendicular_raises():
    with pytest.raises(ShapeError):
        Rectangle(V(0, 0, 3, 5), V(0, 0, 3, 0))


def test_rectangle_no_common_point_raises():
    with pytest.raises(ShapeError):
        Rectangle(V(0, 0, 0, 5), V(0, -1, 5.8, -1))


def test_rectangle_length_and_width():
    r = Rectangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5))
    assert r.length() == approx(3.5399)
    assert r.width() == approx(3.5399)


def test_rectangle_perimeter():
    assert axis_rectangle().perimeter() == approx(14)


def test_rectangle_perimeter2():
    assert Rectangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5)).perimeter() == approx(14.1596)


def test_rectangle_info():
    r = Rectangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5))
    assert r.info() == "Rectangle (Vector ((-2.00, 1.00), (1.50, 0.47)), Vector ((-2.00, 1.00), (-1.47, 4.50)))"


def test_rectangle_add_and_delete_raise():
    r = Rectangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5))
    with pytest.raises(ShapeError):
        r.add_shape(axis_rectangle())
    with pytest.raises(ShapeError):
        r.delete_shape(axis_rectangle())


@pytest.mark.parametrize("name", ["DFS", "BFS"])
def test_rectangle_null_iterator(name):
    r = Rectangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5))
    assert r.create_iterator(IteratorFactory.get_instance(name)).is_done()


def test_rectangle_get_points():
    r = Rectangle(V(1.5, 0.47, -2, 1), V(-2, 1, -1.47, 4.5))
    assert r.get_points() == [Point(-2, 1), Point(-1.47, 4.5), Point(1.5, 0.47), Point(2.03, 3.97)]


def test_rectangle_accept():
    r = axis_rectangle()
    visitor = RecordingVisitor()
    r.accept(visitor)
    assert visitor.calls == [("rectangle", r)]


# CompoundShape

def test_compound_area():
    cs = CompoundShape([
        Circle(V(1.3449, -1.999, 6.0, 7)),
        Rectangle(V(-3, 3, -1, 3), V(-1, 3, -1, -1)),
    ])
    assert cs.area() == approx(330.4906)


def test_compound_area_and_add_shape():
    cs = CompoundShape([
        Circle(V(1.3449, -1.999, 6.0, 7)),
        Rectangle(V(-3, 3, -1, 3), V(-1, 3, -1, -1)),
    ])
    cs2 = CompoundShape([
        slanted_triangle(),
        Rectangle(V(-2, 1, 1.5, 0.47), V(-2, 1, -1.47, 4.5)),
    ])
    cs.add_shape(cs2)
    assert cs.area() == approx(349.2870)


def test_compound_perimeter():
    cs = CompoundShape([axis_rectangle()])
    cs2 = CompoundShape([small_circle(), slanted_triangle(), cs])
    assert cs2.perimeter() == approx(30.5737)


def test_compound_perimeter_and_delete_shape():
    t1 = slanted_triangle()
    cs = CompoundShape([small_circle(), t1, axis_rectangle()])
    cs.delete_shape(t1)
    assert cs.perimeter() == approx(18.4877)


def test_compound_info():
    cs = CompoundShape([axis_rectangle()])
    cs2 = CompoundShape([small_circle(), slanted_triangle(), cs])
    assert cs2.info() == (
        "CompoundShape (Circle (Vector ((-4.28, 0.26), (-4.83, 0.73))), "
        "Triangle (Vector ((-2.00, 1.00), (1.50, 0.47)), Vector ((-2.00, 1.00), (-1.47, 4.50))), "
        "CompoundShape (Rectangle (Vector ((0.00, 0.00), (3.00, 0.00)), Vector ((3.00, 4.00), (3.00, 0.00)))))"
    )


def test_compound_get_points():
    c1 = Circle(V(-2, 1, -1.47, 4.5))
    t1 = Triangle(V(0, 0, 3, 0), V(3, 0, 3, 4))
    r1 = Rectangle(V(1.5, 0.47, -2, 1), V(-2, 1, -1.47, 4.5))
    cs1 = CompoundShape()
    cs1.add_shape(t1)
    cs1.add_shape(r1)
    cs2 = CompoundShape()
    cs2.add_shape(c1)
    cs2.add_shape(cs1)
    assert cs2.get_points() == [
        Point(-5.5399, -2.5399),
        Point(-2, 1),
        Point(-1.47, 4.5),
        Point(0, 0),
        Point(1.5, 0.47),
        Point(1.5399, 4.5399),
        Point(2.03, 3.97),
        Point(3, 0),
        Point(3, 4),
    ]


def test_compound_empty_points_and_area():
    cs = CompoundShape()
    assert cs.get_points() == []
    assert cs.area() == 0
    assert cs.info() == "CompoundShape ()"


def test_compound_move_moves_children():
    c = Circle(V(0, 0, 0, 1))
    cs = CompoundShape([CompoundShape([c])])
    cs.move(2, 3)
    assert c.info() == "Circle (Vector ((2.00, 3.00), (2.00, 4.00)))"


def test_compound_delete_missing_shape_keeps_children():
    c = small_circle()
    cs = CompoundShape([c])
    cs.delete_shape(axis_rectangle())
    assert list(cs.create_iterator(IteratorFactory.get_instance("List"))) == [c]


def test_compound_accept():
    cs = CompoundShape([small_circle()])
    visitor = RecordingVisitor()
    cs.accept(visitor)
    assert visitor.calls == [("compound", cs)]


# List iterator over a compound

@pytest.fixture
def list_iterator():
    vec1, vec2, vec3 = V(0, 0, 0, 5), V(0, 0, 5, 0), V(0, 0, 0, 3)
    cs1 = CompoundShape()
    cs1.add_shape(Circle(vec1))
    cs1.add_shape(Rectangle(vec1, vec2))
    cs2 = CompoundShape()
    cs2.add_shape(cs1)
    cs2.add_shape(Circle(vec3))
    cs2.add_shape(Rectangle(vec2, vec1))
    return cs2.create_iterator(IteratorFactory.get_instance("List"))


def test_list_current_item(list_iterator):
    assert list_iterator.current_item().area() == approx(5 * 5 * math.pi + 25)


def test_list_next(list_iterator):
    list_iterator.next()
    assert list_iterator.current_item().area() == approx(3 * 3 * math.pi)


def test_list_next2(list_iterator):
    list_iterator.next()
    list_iterator.next()
    assert list_iterator.current_item().area() == approx(25)


def test_list_done_and_errors(list_iterator):
    for _ in range(3):
        list_iterator.next()
    assert list_iterator.is_done()
    with pytest.raises(IteratorError):
        list_iterator.current_item()
    with pytest.raises(IteratorError):
        list_iterator.next()


# DFS iterator over a compound

@pytest.fixture
def dfs_iterator():
    vec1, vec2, vec3 = V(0, 0, 0, 5), V(0, 0, 5, 0), V(0, 0, 0, 3)
    cs1 = CompoundShape([Circle(vec1), Rectangle(vec1, vec2)])
    cs2 = CompoundShape([Circle(vec3), cs1])
    return cs2.create_iterator(IteratorFactory.get_instance("DFS"))


def test_dfs_current_item(dfs_iterator):
    assert dfs_iterator.current_item().area() == approx(3 * 3 * math.pi)


def test_dfs_next(dfs_iterator):
    dfs_iterator.next()
    assert dfs_iterator.current_item().area() == approx(5 * 5 * math.pi + 25)


def test_dfs_done_and_errors(dfs_iterator):
    for _ in range(4):
        dfs_iterator.next()
    assert dfs_iterator.is_done()
    with pytest.raises(IteratorError):
        dfs_iterator.next()
    with pytest.raises(IteratorError):
        dfs_iterator.current_item()


def test_dfs_no_children():
    it = CompoundShape([]).create_iterator(IteratorFactory.get_instance("DFS"))
    assert it.is_done()
    with pytest.raises(IteratorError):
        it.current_item()
    with pytest.raises(IteratorError):
        it.next()


def test_dfs_single_circle():
    cir = Circle(V(0, 0, 0, 5))
    it = CompoundShape([cir]).create_iterator(IteratorFactory.get_instance("DFS"))
    assert not it.is_done()
    assert it.current_item() is cir
    it.next()
    assert it.is_done()
    with pytest.raises(IteratorError):
        it.current_item()


def test_dfs_multiple_compound_shapes():
    cs1 = CompoundShape([])
    cs2 = CompoundShape([])
    cs3 = CompoundShape([cs2])
    cs4 = CompoundShape([cs3, cs1])
    order = list(cs4.create_iterator(IteratorFactory.get_instance("DFS")))
    assert len(order) == 3
    assert all(a is b for a, b in zip(order, [cs3, cs2, cs1]))


def test_dfs_complicated_tree():
    cir1 = Circle(V(0, 0, 0, 5))
    cir2 = Circle(V(0, 0, 5, 0))
    cir3 = Circle(V(0, 0, 0, 3))
    cir4 = Circle(V(0, 5, 5, 0))
    cs1 = CompoundShape([cir1])
    cs2 = CompoundShape([cs1, cir2])
    cs3 = CompoundShape([cir3, cs2])
    cs4 = CompoundShape([cs3, cir4])
    it = cs4.create_iterator(IteratorFactory.get_instance("DFS"))
    expected = [cs3, cir3, cs2, cs1, cir1, cir2, cir4]
    for shape in expected:
        assert not it.is_done()
        assert it.current_item() is shape
        it.next()
    assert it.is_done()
    with pytest.raises(IteratorError):
        it.next()
    with pytest.raises(IteratorError):
        it.current_item()


# BFS iterator over a compound

@pytest.fixture
def bfs_iterator():
    vec1, vec2, vec3 = V(0, 0, 0, 5), V(0, 0, 5, 0), V(0, 0, 0, 3)
    c1 = Circle(vec1)
    r1 = Rectangle(vec1, vec2)
    cs1 = CompoundShape()
    cs1.add_shape(c1)
    cs1.add_shape(r1)
    cs2 = CompoundShape()
    cs2.add_shape(cs1)
    cs2.add_shape(Circle(vec3))
    cs2.delete_shape(r1)
    return cs2.create_iterator(IteratorFactory.get_instance("BFS"))


def test_bfs_current_item(bfs_iterator):
    assert bfs_iterator.current_item().area() == approx(5 * 5 * math.pi)


def test_bfs_next(bfs_iterator):
    bfs_iterator.next()
    assert bfs_iterator.current_item().area() == approx(3 * 3 * math.pi)


def test_bfs_next2(bfs_iterator):
    bfs_iterator.next()
    bfs_iterator.next()
    assert bfs_iterator.current_item().area() == approx(5 * 5 * math.pi)


def test_bfs_done_and_errors(bfs_iterator):
    for _ in range(3):
        bfs_iterator.next()
    assert bfs_iterator.is_done()
    with pytest.raises(IteratorError):
        bfs_iterator.current_item()
    with pytest.raises(IteratorError):
        bfs_iterator.next()