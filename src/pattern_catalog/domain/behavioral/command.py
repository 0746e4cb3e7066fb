"""Command: turn a request into a stand-alone object."""

from typing import Optional, Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Command(Protocol):
    def execute(self) -> None: ...


class SimpleCommand(Command):
    """Does its (simple) work on its own."""

    def __init__(self, payload: str, trace: Trace) -> None:
        self._payload = payload
        self._trace = trace

    def execute(self) -> None:
        self._trace.emit(
            f"SimpleCommand: See, I can do simple things like printing ({self._payload}).")


class Receiver:
    """Holds the business logic a complex command delegates to."""

    def __init__(self, trace: Trace) -> None:
        self._trace = trace

    def do_something(self, a: str) -> None:
        self._trace.emit(f"Receiver: Working on ({a}).")

    def do_something_else(self, b: str) -> None:
        self._trace.emit(f"Receiver: Also working on ({b}).")


class ComplexCommand(Command):
    """Forwards the real work to a receiver it does not own."""

    def __init__(self, receiver: Receiver, a: str, b: str, trace: Trace) -> None:
        self._receiver = receiver
        self._a = a
        self._b = b
        self._trace = trace

    def execute(self) -> None:
        self._trace.emit(
            "ComplexCommand: Complex stuff should be done by a receiver object.")
        self._receiver.do_something(self._a)
        self._receiver.do_something_else(self._b)


class Invoker:
    """Runs optional commands before and after its own fixed work."""

    def __init__(self, trace: Trace) -> None:
        self._trace = trace
        self._on_start: Optional[Command] = None
        self._on_finish: Optional[Command] = None

    def set_on_start(self, command: Optional[Command]) -> None:
        self._on_start = command

    def set_on_finish(self, command: Optional[Command]) -> None:
        self._on_finish = command

    def do_something_important(self) -> None:
        self._trace.emit("Invoker: Does anybody want something done before I begin?")
        if self._on_start is not None:
            self._on_start.execute()
        self._trace.emit("Invoker: ...doing something really important...")
        self._trace.emit("Invoker: Does anybody want something done after I finish?")
        if self._on_finish is not None:
            self._on_finish.execute()


class CommandExample(PatternExample):
    key = "command"
    name = "Command"
    category = PatternCategory.BEHAVIORAL
    summary = "Encapsulate a request as an object so invokers stay decoupled from receivers."

    def demonstrate(self, trace: Trace) -> None:
        invoker = Invoker(trace)
        invoker.set_on_start(SimpleCommand("Say Hi!", trace))
        receiver = Receiver(trace)
        invoker.set_on_finish(ComplexCommand(receiver, "Send email", "Save report", trace))
        invoker.do_something_important()
