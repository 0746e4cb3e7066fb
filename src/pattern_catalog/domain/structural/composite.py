"""Composite: treat single objects and trees of objects uniformly."""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Component(ABC):
    """
    Common node interface.

    Child management lives on the base class so clients can assemble trees
    without knowing concrete classes. On leaves it does nothing.
    """

    def __init__(self) -> None:
        self._parent: Optional["Component"] = None

    @property
    def parent(self) -> Optional["Component"]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional["Component"]) -> None:
        self._parent = parent

    def add(self, component: "Component") -> None:
        pass

    def remove(self, component: "Component") -> None:
        pass

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def operation(self) -> str: ...


class Leaf(Component):
    def operation(self) -> str:
        return "Leaf"


class Composite(Component):
    """Delegates to its children in insertion order and sums up their results."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[Component] = []

    @property
    def children(self) -> tuple[Component, ...]:
        return tuple(self._children)

    def add(self, component: Component) -> None:
        """Adopt ``component``, detaching it from any previous parent. Raises ValueError on cycles."""
        node: Optional[Component] = self
        while node is not None:
            if node is component:
                raise ValueError("A component cannot contain itself or one of its ancestors.")
            node = node.parent
        if component.parent is not None:
            component.parent.remove(component)
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        if component not in self._children:
            return
        self._children.remove(component)
        component.parent = None

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        results = [child.operation() for child in self._children]
        return f"Branch( {' + '.join(results)} )"


def client_code(component: Component) -> str:
    return f"RESULT: {component.operation()}"


def client_code2(component1: Component, component2: Component) -> str:
    if component1.is_composite():
        component1.add(component2)
    return f"RESULT: {component1.operation()}"


class CompositeExample(PatternExample):
    key = "composite"
    name = "Composite"
    category = PatternCategory.STRUCTURAL
    summary = "Compose objects into tree structures and work with them as single objects."

    def demonstrate(self, trace: Trace) -> None:
        simple = Leaf()
        trace.emit("Client: I've got a simple component:")
        trace.emit(client_code(simple))
        trace.emit()

        tree = Composite()
        branch1 = Composite()
        branch1.add(Leaf())
        branch1.add(Leaf())
        branch2 = Composite()
        branch2.add(Leaf())
        tree.add(branch1)
        tree.add(branch2)

        trace.emit("Client: Now I've got a composite tree:")
        trace.emit(client_code(tree))
        trace.emit()

        trace.emit("Client: I don't need to check the components classes even when managing the tree:")
        trace.emit(client_code2(tree, simple))
