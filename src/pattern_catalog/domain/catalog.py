"""Registry of every conceptual example. Pure domain, no I/O."""

from collections.abc import Iterable
from typing import Optional

from pattern_catalog.domain.behavioral.chain_of_responsibility import ChainOfResponsibilityExample
from pattern_catalog.domain.behavioral.command import CommandExample
from pattern_catalog.domain.behavioral.iterator import IteratorExample
from pattern_catalog.domain.behavioral.mediator import MediatorExample
from pattern_catalog.domain.behavioral.memento import MementoExample
from pattern_catalog.domain.behavioral.observer import ObserverExample
from pattern_catalog.domain.behavioral.state import StateExample
from pattern_catalog.domain.behavioral.strategy import StrategyExample
from pattern_catalog.domain.behavioral.template_method import TemplateMethodExample
from pattern_catalog.domain.behavioral.visitor import VisitorExample
from pattern_catalog.domain.creational.abstract_factory import AbstractFactoryExample
from pattern_catalog.domain.creational.builder import BuilderExample
from pattern_catalog.domain.creational.factory_method import FactoryMethodExample
from pattern_catalog.domain.creational.prototype import PrototypeExample
from pattern_catalog.domain.creational.singleton import SingletonExample
from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.exceptions import PatternCatalogError, UnknownPatternError
from pattern_catalog.domain.structural.adapter import ClassAdapterExample, ObjectAdapterExample
from pattern_catalog.domain.structural.bridge import BridgeExample
from pattern_catalog.domain.structural.composite import CompositeExample
from pattern_catalog.domain.structural.decorator import DecoratorExample
from pattern_catalog.domain.structural.facade import FacadeExample
from pattern_catalog.domain.structural.flyweight import FlyweightExample
from pattern_catalog.domain.structural.proxy import ProxyExample

BUILTIN_EXAMPLES: tuple[type[PatternExample], ...] = (
    # Behavioral
    ChainOfResponsibilityExample,
    CommandExample,
    IteratorExample,
    MediatorExample,
    MementoExample,
    ObserverExample,
    StateExample,
    StrategyExample,
    TemplateMethodExample,
    VisitorExample,
    # Creational
    AbstractFactoryExample,
    BuilderExample,
    FactoryMethodExample,
    PrototypeExample,
    SingletonExample,
    # Structural
    ClassAdapterExample,
    ObjectAdapterExample,
    BridgeExample,
    CompositeExample,
    DecoratorExample,
    FacadeExample,
    FlyweightExample,
    ProxyExample,
)


class ExampleCatalog:
    """
    Ordered, key-addressable collection of examples.

    Keys are kebab-case. Lookups accept any case and read spaces and
    underscores as hyphens, so ``"Template Method"`` finds ``template-method``.
    """

    def __init__(self, examples: Iterable[PatternExample]) -> None:
        self._examples: dict[str, PatternExample] = {}
        for example in examples:
            key = self.normalize_key(example.key)
            if key in self._examples:
                raise PatternCatalogError(f"Duplicate example key '{key}'.")
            self._examples[key] = example

    @staticmethod
    def normalize_key(raw: str) -> str:
        return raw.strip().lower().replace("_", "-").replace(" ", "-")

    @classmethod
    def default(cls) -> "ExampleCatalog":
        """Catalog of every built-in example, grouped by category."""
        return cls(example_cls() for example_cls in BUILTIN_EXAMPLES)

    def get(self, key: str) -> PatternExample:
        normalized = self.normalize_key(key)
        example = self._examples.get(normalized)
        if example is None:
            raise UnknownPatternError(key, self.keys())
        return example

    def examples(self, category: Optional[PatternCategory] = None) -> list[PatternExample]:
        if category is None:
            return list(self._examples.values())
        return [e for e in self._examples.values() if e.category is category]

    def keys(self) -> list[str]:
        return list(self._examples)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.normalize_key(key) in self._examples

    def __len__(self) -> int:
        return len(self._examples)
