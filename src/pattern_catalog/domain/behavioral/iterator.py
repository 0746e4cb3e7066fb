"""Iterator: traverse a collection without exposing its representation."""

from collections.abc import Iterator as PyIterator
from typing import Generic, TypeVar

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace

T = TypeVar("T")


class Container(Generic[T]):
    """Ordered collection that hands out restartable iterators."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def create_iterator(self) -> "ContainerIterator[T]":
        return ContainerIterator(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> PyIterator[T]:
        iterator = self.create_iterator()
        iterator.first()
        while not iterator.is_done():
            yield iterator.current()
            iterator.next()


class ContainerIterator(Generic[T]):
    """Cursor over a container's items. Never mutates the items."""

    def __init__(self, items: list[T]) -> None:
        self._items = items
        self._position = 0

    def first(self) -> None:
        self._position = 0

    def next(self) -> None:
        self._position += 1

    def is_done(self) -> bool:
        return self._position >= len(self._items)

    def current(self) -> T:
        if self.is_done():
            raise IndexError("Iterator is exhausted; call first() to restart.")
        return self._items[self._position]


class Data:
    """Custom element type, to show the container is generic."""

    def __init__(self, value: int = 0) -> None:
        self._value = value

    @property
    def data(self) -> int:
        return self._value


class IteratorExample(PatternExample):
    key = "iterator"
    name = "Iterator"
    category = PatternCategory.BEHAVIORAL
    summary = "Traverse elements of a collection without exposing its underlying representation."

    def demonstrate(self, trace: Trace) -> None:
        trace.emit("Iterator with int:")
        numbers: Container[int] = Container()
        for i in range(10):
            numbers.add(i)
        it1 = numbers.create_iterator()
        it1.first()
        while not it1.is_done():
            trace.emit(str(it1.current()))
            it1.next()

        trace.emit("Iterator with Data:")
        records: Container[Data] = Container()
        for value in (100, 1000, 10000):
            records.add(Data(value))
        it2 = records.create_iterator()
        it2.first()
        while not it2.is_done():
            trace.emit(str(it2.current().data))
            it2.next()
