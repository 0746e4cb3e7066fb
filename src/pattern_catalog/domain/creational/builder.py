"""Builder: construct complex objects step by step."""

from typing import Optional, Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Product1:
    """The product assembled by ConcreteBuilder1."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> str:
        return f"Product parts: {', '.join(self.parts)}"


class Builder(Protocol):
    def produce_part_a(self) -> None: ...
    def produce_part_b(self) -> None: ...
    def produce_part_c(self) -> None: ...


class ConcreteBuilder1(Builder):
    """Every step works on the same product until it is retrieved."""

    def __init__(self) -> None:
        self._product = Product1()

    def reset(self) -> None:
        self._product = Product1()

    @property
    def product(self) -> Product1:
        """Hand over the finished product and start a blank one."""
        product = self._product
        self.reset()
        return product

    def produce_part_a(self) -> None:
        self._product.add("PartA1")

    def produce_part_b(self) -> None:
        self._product.add("PartB1")

    def produce_part_c(self) -> None:
        self._product.add("PartC1")


class Director:
    """Optional: encodes fixed step sequences for any builder."""

    def __init__(self) -> None:
        self._builder: Optional[Builder] = None

    @property
    def builder(self) -> Builder:
        if self._builder is None:
            raise RuntimeError("Director has no builder; call set_builder() first.")
        return self._builder

    def set_builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        self.builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        self.builder.produce_part_a()
        self.builder.produce_part_b()
        self.builder.produce_part_c()


class BuilderExample(PatternExample):
    key = "builder"
    name = "Builder"
    category = PatternCategory.CREATIONAL
    summary = "Construct complex objects step by step, optionally guided by a director."

    def demonstrate(self, trace: Trace) -> None:
        director = Director()
        builder = ConcreteBuilder1()
        director.set_builder(builder)

        trace.emit("Standard basic product:")
        director.build_minimal_viable_product()
        trace.emit(builder.product.list_parts())
        trace.emit()

        trace.emit("Standard full featured product:")
        director.build_full_featured_product()
        trace.emit(builder.product.list_parts())
        trace.emit()

        # Without a director.
        trace.emit("Custom product:")
        builder.produce_part_a()
        builder.produce_part_c()
        trace.emit(builder.product.list_parts())
