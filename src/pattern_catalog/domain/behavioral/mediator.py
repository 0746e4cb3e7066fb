"""Mediator: components talk to a coordinator instead of to each other."""

from typing import Optional, Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Mediator(Protocol):
    def notify(self, sender: object, event: str) -> None: ...


class BaseComponent:
    """Stores the (non-owning) mediator reference."""

    def __init__(self, trace: Trace, mediator: Optional[Mediator] = None) -> None:
        self._trace = trace
        self._mediator = mediator

    @property
    def mediator(self) -> Optional[Mediator]:
        return self._mediator

    def set_mediator(self, mediator: Mediator) -> None:
        self._mediator = mediator

    def _perform(self, message: str, event: str) -> None:
        self._trace.emit(message)
        if self._mediator is not None:
            self._mediator.notify(self, event)


class Component1(BaseComponent):
    def do_a(self) -> None:
        self._perform("Component 1 does A.", "A")

    def do_b(self) -> None:
        self._perform("Component 1 does B.", "B")


class Component2(BaseComponent):
    def do_c(self) -> None:
        self._perform("Component 2 does C.", "C")

    def do_d(self) -> None:
        self._perform("Component 2 does D.", "D")


class ConcreteMediator(Mediator):
    """Maps event tags to cross-component reactions."""

    def __init__(self, component1: Component1, component2: Component2, trace: Trace) -> None:
        self._component1 = component1
        self._component2 = component2
        self._trace = trace
        component1.set_mediator(self)
        component2.set_mediator(self)

    def notify(self, sender: object, event: str) -> None:
        if event == "A":
            self._trace.emit("Mediator reacts on A and triggers following operations:")
            self._component2.do_c()
        elif event == "D":
            self._trace.emit("Mediator reacts on D and triggers following operations:")
            self._component1.do_b()
            self._component2.do_c()


class MediatorExample(PatternExample):
    key = "mediator"
    name = "Mediator"
    category = PatternCategory.BEHAVIORAL
    summary = "Restrict direct communication between objects and route it through a mediator."

    def demonstrate(self, trace: Trace) -> None:
        c1 = Component1(trace)
        c2 = Component2(trace)
        ConcreteMediator(c1, c2, trace)

        trace.emit("Client triggers operation A.")
        c1.do_a()
        trace.emit()
        trace.emit("Client triggers operation D.")
        c2.do_d()
