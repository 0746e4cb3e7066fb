"""Unit tests for the Iterator example."""

import pytest

from pattern_catalog.domain.behavioral.iterator import Container, Data, IteratorExample


class TestContainerIterator:
    def test_visits_items_in_insertion_order(self) -> None:
        container: Container[int] = Container()
        for i in (3, 1, 2):
            container.add(i)
        it = container.create_iterator()
        it.first()
        seen = []
        while not it.is_done():
            seen.append(it.current())
            it.next()
        assert seen == [3, 1, 2]

    def test_empty_container_is_done_immediately(self) -> None:
        it = Container[int]().create_iterator()
        it.first()
        assert it.is_done()

    def test_current_past_the_end_raises(self) -> None:
        container: Container[str] = Container()
        container.add("only")
        it = container.create_iterator()
        it.next()
        with pytest.raises(IndexError):
            it.current()

    def test_first_restarts_traversal(self) -> None:
        container: Container[int] = Container()
        container.add(7)
        it = container.create_iterator()
        it.next()
        it.first()
        assert it.current() == 7

    def test_python_iteration_and_len(self) -> None:
        container: Container[Data] = Container()
        for value in (100, 1000):
            container.add(Data(value))
        assert len(container) == 2
        assert [d.data for d in container] == [100, 1000]


def test_example_output() -> None:
    lines = IteratorExample().run().lines
    assert lines == (
        "Iterator with int:",
        *[str(i) for i in range(10)],
        "Iterator with Data:",
        "100",
        "1000",
        "10000",
    )
