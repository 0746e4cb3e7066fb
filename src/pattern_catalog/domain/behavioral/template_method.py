"""Template Method: a fixed algorithm skeleton with overridable steps."""

from abc import ABC, abstractmethod

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class AbstractClass(ABC):
    """
    Defines the skeleton: base operations are fixed, required operations must
    be implemented, hooks default to doing nothing.
    """

    def __init__(self, trace: Trace) -> None:
        self._trace = trace

    def template_method(self) -> None:
        self.base_operation1()
        self.required_operations1()
        self.base_operation2()
        self.hook1()
        self.required_operation2()
        self.base_operation3()
        self.hook2()

    def base_operation1(self) -> None:
        self._trace.emit("AbstractClass says: I am doing the bulk of the work")

    def base_operation2(self) -> None:
        self._trace.emit("AbstractClass says: But I let subclasses override some operations")

    def base_operation3(self) -> None:
        self._trace.emit("AbstractClass says: But I am doing the bulk of the work anyway")

    @abstractmethod
    def required_operations1(self) -> None: ...

    @abstractmethod
    def required_operation2(self) -> None: ...

    def hook1(self) -> None:
        pass

    def hook2(self) -> None:
        pass


class ConcreteClass1(AbstractClass):
    def required_operations1(self) -> None:
        self._trace.emit("ConcreteClass1 says: Implemented Operation1")

    def required_operation2(self) -> None:
        self._trace.emit("ConcreteClass1 says: Implemented Operation2")


class ConcreteClass2(AbstractClass):
    """Overrides only a fraction of the steps."""

    def required_operations1(self) -> None:
        self._trace.emit("ConcreteClass2 says: Implemented Operation1")

    def required_operation2(self) -> None:
        self._trace.emit("ConcreteClass2 says: Implemented Operation2")

    def hook1(self) -> None:
        self._trace.emit("ConcreteClass2 says: Overridden Hook1")


class TemplateMethodExample(PatternExample):
    key = "template-method"
    name = "Template Method"
    category = PatternCategory.BEHAVIORAL
    summary = "Define an algorithm skeleton and let subclasses override specific steps."

    def demonstrate(self, trace: Trace) -> None:
        trace.emit("Same client code can work with different subclasses:")
        ConcreteClass1(trace).template_method()
        trace.emit()
        trace.emit("Same client code can work with different subclasses:")
        ConcreteClass2(trace).template_method()
