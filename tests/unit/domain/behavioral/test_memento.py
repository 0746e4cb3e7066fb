"""Unit tests for the Memento example."""

from pattern_catalog.domain.behavioral.memento import (
    Caretaker,
    Memento,
    MementoExample,
    Originator,
)
from pattern_catalog.domain.trace import Trace


class TestOriginator:
    def test_save_and_restore_round_trip(self) -> None:
        trace = Trace()
        originator = Originator("first", trace)
        snapshot = originator.save()
        originator.do_something("second")
        assert originator.restore(snapshot) is True
        assert originator.state == "first"

    def test_snapshot_metadata_previews_state(self) -> None:
        originator = Originator("a very long state", Trace())
        assert originator.save().metadata == "snapshot of (a very lo...)"

    def test_foreign_snapshot_is_rejected(self) -> None:
        trace = Trace()
        originator = Originator("kept", trace)
        assert originator.restore(Memento(metadata="someone else's")) is False
        assert originator.state == "kept"
        assert trace.lines[-1] == (
            "Originator: My state did not change, because the memento is not compatible.")


class TestCaretaker:
    def test_undo_restores_lifo(self) -> None:
        trace = Trace()
        originator = Originator("s0", trace)
        caretaker = Caretaker(originator, trace)
        caretaker.backup()
        originator.do_something("s1")
        caretaker.backup()
        originator.do_something("s2")
        caretaker.undo()
        assert originator.state == "s1"
        caretaker.undo()
        assert originator.state == "s0"

    def test_undo_on_empty_history_is_noop(self) -> None:
        trace = Trace()
        originator = Originator("s0", trace)
        caretaker = Caretaker(originator, trace)
        before = len(trace)
        assert caretaker.undo() is False
        assert len(trace) == before
        assert originator.state == "s0"

    def test_show_history_lists_in_save_order(self) -> None:
        trace = Trace()
        originator = Originator("one", trace)
        caretaker = Caretaker(originator, trace)
        caretaker.backup()
        originator.do_something("two")
        caretaker.backup()
        assert caretaker.show_history() == ["snapshot of (one)", "snapshot of (two)"]
        assert caretaker.history_size == 2


def test_example_ends_at_initial_state() -> None:
    lines = MementoExample().run().lines
    assert lines[0] == "Originator: My initial state is: initial state"
    assert lines[-1] == "Originator: My state has changed to: initial state"


def test_example_is_deterministic() -> None:
    assert MementoExample().run().lines == MementoExample().run().lines
