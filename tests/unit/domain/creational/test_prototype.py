"""Unit tests for the Prototype example."""

from pattern_catalog.domain.creational.prototype import (
    ConcretePrototype1,
    PrototypeExample,
    PrototypeFactory,
    PrototypeKind,
)


def test_factory_hands_out_clones() -> None:
    factory = PrototypeFactory()
    first = factory.create_prototype(PrototypeKind.PROTOTYPE_1)
    second = factory.create_prototype(PrototypeKind.PROTOTYPE_1)
    assert first is not second
    assert isinstance(first, ConcretePrototype1)
    assert first.field == 50.0


def test_mutating_clone_leaves_registered_prototype_untouched() -> None:
    factory = PrototypeFactory()
    clone = factory.create_prototype(PrototypeKind.PROTOTYPE_2)
    clone.method(10)
    fresh = factory.create_prototype(PrototypeKind.PROTOTYPE_2)
    assert fresh.field == 60.0
    assert fresh.field_history == [60.0]
    assert clone.field_history == [60.0, 10]


def test_register_replaces_prototype() -> None:
    factory = PrototypeFactory()
    factory.register(PrototypeKind.PROTOTYPE_1, ConcretePrototype1("custom", 1.5))
    assert factory.create_prototype(PrototypeKind.PROTOTYPE_1).name == "custom"


def test_example_output() -> None:
    lines = PrototypeExample().run().lines
    assert "call method from PROTOTYPE_1 with field: 90" in lines
    assert "call method from PROTOTYPE_2 with field: 10" in lines
