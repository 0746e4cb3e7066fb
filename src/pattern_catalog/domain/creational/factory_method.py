"""Factory Method: let subclasses decide which product to create."""

from abc import ABC, abstractmethod
from typing import Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Product(Protocol):
    def operation(self) -> str: ...


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"


class Creator(ABC):
    """The surrounding logic is fixed; only the creation step varies."""

    @abstractmethod
    def factory_method(self) -> Product: ...

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


class FactoryMethodExample(PatternExample):
    key = "factory-method"
    name = "Factory Method"
    category = PatternCategory.CREATIONAL
    summary = "Provide an interface for creating objects, letting subclasses alter the type."

    def client_code(self, creator: Creator, trace: Trace) -> None:
        trace.emit("Client: I'm not aware of the creator's class, but it still works.")
        trace.emit(creator.some_operation())

    def demonstrate(self, trace: Trace) -> None:
        trace.emit("App: Launched with the ConcreteCreator1.")
        self.client_code(ConcreteCreator1(), trace)
        trace.emit()
        trace.emit("App: Launched with the ConcreteCreator2.")
        self.client_code(ConcreteCreator2(), trace)
