"""Adapter: make an incompatible interface usable by existing client code.

Two variants are provided. The class adapter inherits from both the target
and the adaptee; the object adapter wraps an adaptee instance it is given.
Clients cannot tell them apart.
"""

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Target:
    """The interface client code already understands."""

    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    """Useful behavior behind an interface the client can't call directly."""

    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class ClassAdapter(Target, Adaptee):
    """Adapts by multiple inheritance."""

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self.specific_request()[::-1]}"


class ObjectAdapter(Target):
    """Adapts by holding the adaptee; the caller keeps ownership of it."""

    def __init__(self, adaptee: Adaptee) -> None:
        self._adaptee = adaptee

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self._adaptee.specific_request()[::-1]}"


def client_code(target: Target, trace: Trace) -> None:
    trace.emit(target.request())


def _demonstrate(adapter: Target, adaptee: Adaptee, trace: Trace) -> None:
    trace.emit("Client: I can work just fine with the Target objects:")
    client_code(Target(), trace)
    trace.emit()
    trace.emit("Client: The Adaptee class has a weird interface. See, I don't understand it:")
    trace.emit(f"Adaptee: {adaptee.specific_request()}")
    trace.emit()
    trace.emit("Client: But I can work with it via the Adapter:")
    client_code(adapter, trace)


class ClassAdapterExample(PatternExample):
    key = "class-adapter"
    name = "Adapter (class)"
    category = PatternCategory.STRUCTURAL
    summary = "Convert an interface into another one clients expect, via multiple inheritance."
    glossary_key = "adapter"

    def demonstrate(self, trace: Trace) -> None:
        _demonstrate(ClassAdapter(), Adaptee(), trace)


class ObjectAdapterExample(PatternExample):
    key = "object-adapter"
    name = "Adapter (object)"
    category = PatternCategory.STRUCTURAL
    summary = "Convert an interface into another one clients expect, via composition."
    glossary_key = "adapter"

    def demonstrate(self, trace: Trace) -> None:
        adaptee = Adaptee()
        _demonstrate(ObjectAdapter(adaptee), adaptee, trace)
