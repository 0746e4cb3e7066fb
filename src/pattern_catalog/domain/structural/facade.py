"""Facade: one simple entry point in front of several subsystems."""

from typing import Optional

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Subsystem1:
    def operation1(self) -> str:
        return "Subsystem1: Ready!"

    def operation_n(self) -> str:
        return "Subsystem1: Go!"


class Subsystem2:
    def operation1(self) -> str:
        return "Subsystem2: Get ready!"

    def operation_z(self) -> str:
        return "Subsystem2: Fire!"


class Facade:
    """
    Sequences calls across its subsystems in a fixed order.

    Subsystems not supplied by the caller are created here and are the only
    ones ``close`` releases.
    """

    def __init__(self, subsystem1: Optional[Subsystem1] = None,
                 subsystem2: Optional[Subsystem2] = None) -> None:
        self._owned: list[str] = []
        if subsystem1 is None:
            subsystem1 = Subsystem1()
            self._owned.append("Subsystem1")
        if subsystem2 is None:
            subsystem2 = Subsystem2()
            self._owned.append("Subsystem2")
        self._subsystem1: Optional[Subsystem1] = subsystem1
        self._subsystem2: Optional[Subsystem2] = subsystem2

    @property
    def owned_subsystems(self) -> tuple[str, ...]:
        return tuple(self._owned)

    def operation(self) -> str:
        if self._subsystem1 is None or self._subsystem2 is None:
            raise RuntimeError("Facade is closed.")
        results = [
            "Facade initializes subsystems:",
            self._subsystem1.operation1(),
            self._subsystem2.operation1(),
            "Facade orders subsystems to perform the action:",
            self._subsystem1.operation_n(),
            self._subsystem2.operation_z(),
        ]
        return "\n".join(results)

    def close(self) -> list[str]:
        """Release the subsystems this facade created. Returns their names."""
        released = list(self._owned)
        self._owned.clear()
        self._subsystem1 = None
        self._subsystem2 = None
        return released


class FacadeExample(PatternExample):
    key = "facade"
    name = "Facade"
    category = PatternCategory.STRUCTURAL
    summary = "Provide a simplified interface to a complex set of subsystems."

    def demonstrate(self, trace: Trace) -> None:
        # The client may hand over subsystems it already has.
        subsystem1 = Subsystem1()
        facade = Facade(subsystem1=subsystem1)
        trace.emit(facade.operation())
        released = facade.close()
        trace.emit(f"Facade: Released owned subsystems: {', '.join(released) or 'none'}.")
