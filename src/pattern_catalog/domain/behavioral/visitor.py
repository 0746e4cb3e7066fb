"""Visitor: add operations to a closed set of element classes via double dispatch."""

from typing import Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Visitor(Protocol):
    """One visiting method per concrete component class."""

    def visit_concrete_component_a(self, element: "ConcreteComponentA") -> str: ...
    def visit_concrete_component_b(self, element: "ConcreteComponentB") -> str: ...


class Component(Protocol):
    def accept(self, visitor: Visitor) -> str: ...


class ConcreteComponentA(Component):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"


class ConcreteVisitor1(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor1"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor1"


class ConcreteVisitor2(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor2"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor2"


class VisitorExample(PatternExample):
    key = "visitor"
    name = "Visitor"
    category = PatternCategory.BEHAVIORAL
    summary = "Separate algorithms from the objects they operate on."

    def client_code(self, components: list[Component], visitor: Visitor, trace: Trace) -> None:
        for component in components:
            trace.emit(component.accept(visitor))

    def demonstrate(self, trace: Trace) -> None:
        components: list[Component] = [ConcreteComponentA(), ConcreteComponentB()]
        trace.emit("The client code works with all visitors via the base Visitor interface:")
        self.client_code(components, ConcreteVisitor1(), trace)
        trace.emit()
        trace.emit("It allows the same client code to work with different types of visitors:")
        self.client_code(components, ConcreteVisitor2(), trace)
