"""Unit tests for the Facade example."""

import pytest

from pattern_catalog.domain.structural.facade import Facade, FacadeExample, Subsystem1, Subsystem2


def test_operation_sequences_subsystems() -> None:
    assert Facade().operation().split("\n") == [
        "Facade initializes subsystems:",
        "Subsystem1: Ready!",
        "Subsystem2: Get ready!",
        "Facade orders subsystems to perform the action:",
        "Subsystem1: Go!",
        "Subsystem2: Fire!",
    ]


def test_facade_owns_only_what_it_created() -> None:
    facade = Facade(subsystem1=Subsystem1())
    assert facade.owned_subsystems == ("Subsystem2",)
    assert facade.close() == ["Subsystem2"]


def test_caller_supplied_subsystems_are_never_released() -> None:
    facade = Facade(Subsystem1(), Subsystem2())
    assert facade.close() == []


def test_closed_facade_refuses_work() -> None:
    facade = Facade()
    assert facade.close() == ["Subsystem1", "Subsystem2"]
    with pytest.raises(RuntimeError):
        facade.operation()


def test_example_output() -> None:
    lines = FacadeExample().run().lines
    assert lines[0] == "Facade initializes subsystems:"
    assert lines[-1] == "Facade: Released owned subsystems: Subsystem2."
