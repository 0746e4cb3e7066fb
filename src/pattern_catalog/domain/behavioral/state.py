"""State: an object changes its behavior when its internal state changes."""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class State(ABC):
    """Base state with a non-owning back-reference to its context."""

    def __init__(self) -> None:
        self._context: Optional["Context"] = None

    @property
    def context(self) -> Optional["Context"]:
        return self._context

    def attach(self, context: "Context") -> None:
        self._context = context

    def release(self) -> None:
        """Drop the back-reference once the context replaces this state."""
        self._context = None

    @abstractmethod
    def handle1(self) -> None: ...

    @abstractmethod
    def handle2(self) -> None: ...

    def _require_context(self) -> "Context":
        if self._context is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to a context.")
        return self._context


class Context:
    """Owns exactly one active state and delegates requests to it."""

    def __init__(self, state: State, trace: Trace) -> None:
        self._trace = trace
        self._state: Optional[State] = None
        self.transition_to(state)

    @property
    def trace(self) -> Trace:
        return self._trace

    @property
    def state(self) -> State:
        if self._state is None:
            raise RuntimeError("Context has no active state.")
        return self._state

    def transition_to(self, state: State) -> None:
        self._trace.emit(f"Context: Transition to {type(state).__name__}.")
        previous = self._state
        self._state = state
        if previous is not None:
            previous.release()
        state.attach(self)

    def request1(self) -> None:
        self.state.handle1()

    def request2(self) -> None:
        self.state.handle2()


class ConcreteStateA(State):
    def handle1(self) -> None:
        trace = self._require_context().trace
        trace.emit("ConcreteStateA handles request1.")
        trace.emit("ConcreteStateA wants to change the state of the context.")
        self._require_context().transition_to(ConcreteStateB())

    def handle2(self) -> None:
        self._require_context().trace.emit("ConcreteStateA handles request2.")


class ConcreteStateB(State):
    def handle1(self) -> None:
        self._require_context().trace.emit("ConcreteStateB handles request1.")

    def handle2(self) -> None:
        trace = self._require_context().trace
        trace.emit("ConcreteStateB handles request2.")
        trace.emit("ConcreteStateB wants to change the state of the context.")
        self._require_context().transition_to(ConcreteStateA())


class StateExample(PatternExample):
    key = "state"
    name = "State"
    category = PatternCategory.BEHAVIORAL
    summary = "Let an object alter its behavior when its internal state changes."

    def demonstrate(self, trace: Trace) -> None:
        context = Context(ConcreteStateA(), trace)
        trace.emit()
        context.request1()
        trace.emit()
        context.request2()
