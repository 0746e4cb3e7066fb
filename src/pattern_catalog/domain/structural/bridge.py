"""Bridge: split an abstraction from its implementation so both can vary."""

from typing import Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Implementation(Protocol):
    def operation_implementation(self) -> str: ...


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A."


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B."


class Abstraction:
    """The "control" side. Delegates the real work to its implementation."""

    def __init__(self, implementation: Implementation) -> None:
        self.implementation = implementation

    def operation(self) -> str:
        return ("Abstraction: Base operation with:\n"
                f"{self.implementation.operation_implementation()}")


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return ("ExtendedAbstraction: Extended operation with:\n"
                f"{self.implementation.operation_implementation()}")


class BridgeExample(PatternExample):
    key = "bridge"
    name = "Bridge"
    category = PatternCategory.STRUCTURAL
    summary = "Split a large class into abstraction and implementation hierarchies."

    def demonstrate(self, trace: Trace) -> None:
        trace.emit(Abstraction(ConcreteImplementationA()).operation())
        trace.emit()
        trace.emit(ExtendedAbstraction(ConcreteImplementationB()).operation())
