"""Iterators over the children of shapes and the factories that make them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, ClassVar, Iterable, Iterator as _PyIterator

_NO_SHAPE = "No shape in list"


class IteratorError(Exception):
    """Raised when an iterator is asked for an item it does not have."""


class Iterator(ABC):
    """Cursor over shapes with an explicit first/next/is_done protocol."""

    @abstractmethod
    def first(self) -> None: ...

    @abstractmethod
    def current_item(self) -> Any: ...

    @abstractmethod
    def next(self) -> None: ...

    @abstractmethod
    def is_done(self) -> bool: ...

    def __iter__(self) -> _PyIterator[Any]:
        """Yield the remaining items, advancing the cursor."""
        while not self.is_done():
            yield self.current_item()
            self.next()


class NullIterator(Iterator):
    """Iterator of a shape that has no children."""

    def first(self) -> None:
        raise IteratorError(_NO_SHAPE)

    def current_item(self) -> Any:
        raise IteratorError(_NO_SHAPE)

    def next(self) -> None:
        raise IteratorError(_NO_SHAPE)

    def is_done(self) -> bool:
        return True


class ListCompoundIterator(Iterator):
    """Iterator over a fixed sequence of shapes."""

    def __init__(self, shapes: Iterable[Any]) -> None:
        self._shapes = list(shapes)
        self._index = 0

    def first(self) -> None:
        self._index = 0

    def current_item(self) -> Any:
        if self.is_done():
            raise IteratorError("No shape in the current iterator")
        return self._shapes[self._index]

    def next(self) -> None:
        if self.is_done():
            raise IteratorError("No shape in the next iterator")
        self._index += 1

    def is_done(self) -> bool:
        return self._index >= len(self._shapes)


class DFSCompoundIterator(ListCompoundIterator):
    """Depth-first, pre-order walk of the shapes and all their descendants."""

    def __init__(self, shapes: Iterable[Any]) -> None:
        factory = IteratorFactory.get_instance("DFS")
        order: list[Any] = []
        for shape in shapes:
            order.append(shape)
            order.extend(shape.create_iterator(factory))
        super().__init__(order)


class BFSCompoundIterator(ListCompoundIterator):
    """Breadth-first walk of the shapes and all their descendants."""

    def __init__(self, shapes: Iterable[Any]) -> None:
        factory = IteratorFactory.get_instance("BFS")
        queue: deque[Any] = deque(shapes)
        visited = {id(shape): False for shape in queue}

        order: list[Any] = []
        while queue:
            shape = queue.popleft()
            order.append(shape)
            for child in shape.create_iterator(factory):
                if not visited.get(id(child), False):
                    queue.append(child)
                    visited[id(child)] = True
        super().__init__(order)


class IteratorFactory(ABC):
    """Makes iterators; named factories are kept in a shared registry."""

    _registry: ClassVar[dict[str, IteratorFactory]] = {}

    @abstractmethod
    def create_iterator(self, shapes: Iterable[Any] | None = None) -> Iterator:
        """Return a null iterator when ``shapes`` is None, else a compound one."""

    @classmethod
    def get_instance(cls, name: str) -> IteratorFactory:
        try:
            return IteratorFactory._registry[name]
        except KeyError:
            raise KeyError(f"no iterator factory registered as {name!r}") from None

    @classmethod
    def register(cls, name: str, factory: IteratorFactory) -> None:
        IteratorFactory._registry[name] = factory


class DFSIteratorFactory(IteratorFactory):
    """Makes depth-first iterators."""

    def create_iterator(self, shapes: Iterable[Any] | None = None) -> Iterator:
        if shapes is None:
            return NullIterator()
        return DFSCompoundIterator(shapes)


class BFSIteratorFactory(IteratorFactory):
    """Makes breadth-first iterators."""

    def create_iterator(self, shapes: Iterable[Any] | None = None) -> Iterator:
        if shapes is None:
            return NullIterator()
        return BFSCompoundIterator(shapes)


class ListIteratorFactory(IteratorFactory):
    """Makes iterators over direct children only."""

    def create_iterator(self, shapes: Iterable[Any] | None = None) -> Iterator:
        if shapes is None:
            return NullIterator()
        return ListCompoundIterator(shapes)


for _name, _factory in (
    ("DFS", DFSIteratorFactory()),
    ("BFS", BFSIteratorFactory()),
    ("List", ListIteratorFactory()),
):
    IteratorFactory.register(_name, _factory)