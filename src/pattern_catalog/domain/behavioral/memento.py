"""Memento: capture and restore an object's state without exposing it."""

from dataclasses import dataclass

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


@dataclass(frozen=True)
class Memento:
    """
    Opaque snapshot as seen by the caretaker.

    Only metadata is public; the captured state lives in the originator's own
    snapshot subclass.
    """
    metadata: str


@dataclass(frozen=True)
class OriginatorSnapshot(Memento):
    """The originator's private snapshot type, tagged by its class."""
    state: str = ""


class Originator:
    """Holds state that changes over time and can be saved and restored."""

    def __init__(self, state: str, trace: Trace) -> None:
        self._state = state
        self._trace = trace
        self._trace.emit(f"Originator: My initial state is: {self._state}")

    @property
    def state(self) -> str:
        return self._state

    def do_something(self, new_state: str = "random state") -> None:
        self._trace.emit("Originator: I'm doing something important.")
        self._state = new_state
        self._trace.emit(f"Originator: and my state has changed to: {self._state}")

    def save(self) -> Memento:
        """Return an opaque snapshot of the current state."""
        preview = self._state[:9] + ("..." if len(self._state) > 9 else "")
        return OriginatorSnapshot(metadata=f"snapshot of ({preview})", state=self._state)

    def restore(self, memento: Memento) -> bool:
        """Restore from ``memento``. Incompatible snapshots leave state unchanged."""
        if not isinstance(memento, OriginatorSnapshot):
            self._trace.emit(
                "Originator: My state did not change, because the memento is not compatible.")
            return False
        self._state = memento.state
        self._trace.emit(f"Originator: My state has changed to: {self._state}")
        return True


class Caretaker:
    """Keeps snapshots in LIFO order without looking inside them."""

    def __init__(self, originator: Originator, trace: Trace) -> None:
        self._originator = originator
        self._trace = trace
        self._mementos: list[Memento] = []

    @property
    def history_size(self) -> int:
        return len(self._mementos)

    def backup(self) -> None:
        self._trace.emit("Caretaker: Saving Originator's state...")
        self._mementos.append(self._originator.save())
        self._trace.emit(f"Caretaker: Memento's metadata: {self._mementos[-1].metadata}")

    def undo(self) -> bool:
        """Restore the most recent snapshot. No-op when history is empty."""
        if not self._mementos:
            return False
        memento = self._mementos.pop()
        self._trace.emit(f"Caretaker: Restoring state to: {memento.metadata}")
        return self._originator.restore(memento)

    def show_history(self) -> list[str]:
        """Narrate and return the metadata of stored snapshots, oldest first."""
        self._trace.emit("Caretaker: Here's the list of mementos:")
        entries = [memento.metadata for memento in self._mementos]
        for entry in entries:
            self._trace.emit(entry)
        return entries


class MementoExample(PatternExample):
    key = "memento"
    name = "Memento"
    category = PatternCategory.BEHAVIORAL
    summary = "Save and restore an object's previous state without revealing its implementation."

    def demonstrate(self, trace: Trace) -> None:
        originator = Originator("initial state", trace)
        caretaker = Caretaker(originator, trace)

        trace.emit()
        caretaker.backup()
        originator.do_something()
        trace.emit()
        caretaker.backup()
        originator.do_something("another state")
        trace.emit()
        caretaker.show_history()

        trace.emit()
        trace.emit("Client: Now, let's rollback!")
        trace.emit()
        caretaker.undo()
        trace.emit()
        trace.emit("Client: Once more!")
        trace.emit()
        caretaker.undo()
