"""Abstract Factory: produce families of related products without naming concrete classes."""

from typing import Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class AbstractProductA(Protocol):
    variant: int

    def useful_function_a(self) -> str: ...


class AbstractProductB(Protocol):
    """Products of one variant collaborate properly only with their own variant."""

    variant: int

    def useful_function_b(self) -> str: ...
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str: ...


class ConcreteProductA1(AbstractProductA):
    variant = 1

    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    variant = 2

    def useful_function_a(self) -> str:
        return "The result of the product A2."


class ConcreteProductB1(AbstractProductB):
    variant = 1

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    variant = 2

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"


class AbstractFactory(Protocol):
    def create_product_a(self) -> AbstractProductA: ...
    def create_product_b(self) -> AbstractProductB: ...


class ConcreteFactory1(AbstractFactory):
    """Always returns variant-1 products."""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """Always returns variant-2 products."""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


class AbstractFactoryExample(PatternExample):
    key = "abstract-factory"
    name = "Abstract Factory"
    category = PatternCategory.CREATIONAL
    summary = "Produce families of related objects without specifying their concrete classes."

    def client_code(self, factory: AbstractFactory, trace: Trace) -> None:
        product_a = factory.create_product_a()
        product_b = factory.create_product_b()
        trace.emit(product_b.useful_function_b())
        trace.emit(product_b.another_useful_function_b(product_a))

    def demonstrate(self, trace: Trace) -> None:
        trace.emit("Client: Testing client code with the first factory type:")
        self.client_code(ConcreteFactory1(), trace)
        trace.emit()
        trace.emit("Client: Testing the same client code with the second factory type:")
        self.client_code(ConcreteFactory2(), trace)
