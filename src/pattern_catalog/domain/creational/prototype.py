"""Prototype: copy existing objects without depending on their classes."""

import copy
from enum import Enum

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class PrototypeKind(Enum):
    PROTOTYPE_1 = "PROTOTYPE_1"
    PROTOTYPE_2 = "PROTOTYPE_2"


class Prototype:
    """Cloneable object. ``clone`` returns an independent deep copy."""

    def __init__(self, name: str, field: float) -> None:
        self.name = name
        self.field = field
        self.field_history: list[float] = [field]

    def clone(self) -> "Prototype":
        return copy.deepcopy(self)

    def method(self, field: float) -> str:
        self.field = field
        self.field_history.append(field)
        return f"call method from {self.name} with field: {self.field:g}"


class ConcretePrototype1(Prototype):
    pass


class ConcretePrototype2(Prototype):
    pass


class PrototypeFactory:
    """Registry of pre-built prototypes; hands out clones, never the originals."""

    def __init__(self) -> None:
        self._prototypes: dict[PrototypeKind, Prototype] = {
            PrototypeKind.PROTOTYPE_1: ConcretePrototype1("PROTOTYPE_1", 50.0),
            PrototypeKind.PROTOTYPE_2: ConcretePrototype2("PROTOTYPE_2", 60.0),
        }

    def register(self, kind: PrototypeKind, prototype: Prototype) -> None:
        self._prototypes[kind] = prototype

    def create_prototype(self, kind: PrototypeKind) -> Prototype:
        return self._prototypes[kind].clone()


class PrototypeExample(PatternExample):
    key = "prototype"
    name = "Prototype"
    category = PatternCategory.CREATIONAL
    summary = "Copy existing objects without making code dependent on their classes."

    def demonstrate(self, trace: Trace) -> None:
        factory = PrototypeFactory()

        trace.emit("Let's create a Prototype 1")
        prototype = factory.create_prototype(PrototypeKind.PROTOTYPE_1)
        trace.emit(prototype.method(90))
        trace.emit()

        trace.emit("Let's create a Prototype 2")
        prototype = factory.create_prototype(PrototypeKind.PROTOTYPE_2)
        trace.emit(prototype.method(10))
