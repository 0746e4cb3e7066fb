"""Unit tests for the Visitor example."""

from pattern_catalog.domain.behavioral.visitor import (
    ConcreteComponentA,
    ConcreteComponentB,
    ConcreteVisitor1,
    ConcreteVisitor2,
    VisitorExample,
)


def test_double_dispatch_picks_matching_visit() -> None:
    assert ConcreteComponentA().accept(ConcreteVisitor1()) == "A + ConcreteVisitor1"
    assert ConcreteComponentB().accept(ConcreteVisitor1()) == "B + ConcreteVisitor1"
    assert ConcreteComponentA().accept(ConcreteVisitor2()) == "A + ConcreteVisitor2"
    assert ConcreteComponentB().accept(ConcreteVisitor2()) == "B + ConcreteVisitor2"


def test_example_visits_components_in_order() -> None:
    lines = VisitorExample().run().lines
    results = [line for line in lines if " + " in line]
    assert results == [
        "A + ConcreteVisitor1",
        "B + ConcreteVisitor1",
        "A + ConcreteVisitor2",
        "B + ConcreteVisitor2",
    ]
