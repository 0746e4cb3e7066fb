"""Chain of Responsibility: pass a request along a chain until a handler takes it."""

from typing import Optional, Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Handler(Protocol):
    """Builds the chain and handles requests."""

    def set_next(self, handler: "Handler") -> "Handler": ...
    def handle(self, request: str) -> Optional[str]: ...


class BaseHandler(Handler):
    """Default chaining: forward to the next link, or give up at the end."""

    def __init__(self) -> None:
        self._next_handler: Optional[Handler] = None

    def set_next(self, handler: Handler) -> Handler:
        """Link ``handler`` after this one. Returns it so links chain fluently."""
        self._next_handler = handler
        return handler

    def handle(self, request: str) -> Optional[str]:
        if self._next_handler is not None:
            return self._next_handler.handle(request)
        return None


class FoodHandler(BaseHandler):
    """Handler that eats exactly one kind of food."""

    animal: str = ""
    food: str = ""

    def handle(self, request: str) -> Optional[str]:
        if request == self.food:
            return f"{self.animal}: I'll eat the {request}."
        return super().handle(request)


class MonkeyHandler(FoodHandler):
    animal = "Monkey"
    food = "Banana"


class SquirrelHandler(FoodHandler):
    animal = "Squirrel"
    food = "Nut"


class DogHandler(FoodHandler):
    animal = "Dog"
    food = "MeatBall"


class ChainOfResponsibilityExample(PatternExample):
    key = "chain-of-responsibility"
    name = "Chain of Responsibility"
    category = PatternCategory.BEHAVIORAL
    summary = "Pass requests along a chain of handlers until one handles it."

    FOODS: tuple[str, ...] = ("Nut", "Banana", "Cup of coffee")

    def client_code(self, handler: Handler, trace: Trace) -> None:
        """The client only knows the first handler it was given."""
        for food in self.FOODS:
            trace.emit(f"Client: Who wants a {food}?")
            result = handler.handle(food)
            trace.emit(f"  {result}" if result else f"  {food} was left untouched.")

    def demonstrate(self, trace: Trace) -> None:
        monkey = MonkeyHandler()
        squirrel = SquirrelHandler()
        dog = DogHandler()
        monkey.set_next(squirrel).set_next(dog)

        trace.emit("Chain: Monkey > Squirrel > Dog")
        trace.emit()
        self.client_code(monkey, trace)
        trace.emit()
        trace.emit("Subchain: Squirrel > Dog")
        trace.emit()
        self.client_code(squirrel, trace)
