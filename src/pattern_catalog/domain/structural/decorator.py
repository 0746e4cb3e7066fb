"""Decorator: attach behavior by wrapping objects in same-interface layers."""

from typing import Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Component(Protocol):
    def operation(self) -> str: ...


class ConcreteComponent(Component):
    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """Forwards to the wrapped component. Subclasses tag the result."""

    def __init__(self, component: Component) -> None:
        self._component = component

    @property
    def component(self) -> Component:
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecoratorA(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorA({super().operation()})"


class ConcreteDecoratorB(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorB({super().operation()})"


def client_code(component: Component) -> str:
    return f"RESULT: {component.operation()}"


class DecoratorExample(PatternExample):
    key = "decorator"
    name = "Decorator"
    category = PatternCategory.STRUCTURAL
    summary = "Attach new behaviors to objects by placing them inside wrapper objects."

    def demonstrate(self, trace: Trace) -> None:
        simple = ConcreteComponent()
        trace.emit("Client: I've got a simple component:")
        trace.emit(client_code(simple))
        trace.emit()

        decorator1 = ConcreteDecoratorA(simple)
        decorator2 = ConcreteDecoratorB(decorator1)
        trace.emit("Client: Now I've got a decorated component:")
        trace.emit(client_code(decorator2))
