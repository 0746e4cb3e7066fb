"""Flyweight: share common (intrinsic) state between many objects."""

from dataclasses import dataclass
from typing import Iterable

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


@dataclass(frozen=True)
class Car:
    """Extrinsic state, unique per use. Passed in, never stored by a flyweight."""
    owner: str
    plates: str

    def __str__(self) -> str:
        return f"[ {self.owner} , {self.plates} ]"


@dataclass(frozen=True)
class Flyweight:
    """Intrinsic state shared by every car of the same brand, model and color."""
    brand: str
    model: str
    color: str

    def operation(self, car: Car) -> str:
        return f"Flyweight: Displaying shared ({self}) and unique ({car}) states."

    def __str__(self) -> str:
        return f"[ {self.brand} , {self.model} , {self.color} ]"


class FlyweightFactory:
    """Hands out canonical flyweights keyed by their (brand, model, color) triple."""

    def __init__(self, trace: Trace,
                 shared_states: Iterable[tuple[str, str, str]] = ()) -> None:
        self._trace = trace
        self._flyweights: dict[tuple[str, str, str], Flyweight] = {}
        for brand, model, color in shared_states:
            self._flyweights[(brand, model, color)] = Flyweight(brand, model, color)

    @staticmethod
    def get_key(brand: str, model: str, color: str) -> str:
        """Display name of a flyweight in listings."""
        return f"{brand}_{model}_{color}"

    def get_flyweight(self, brand: str, model: str, color: str) -> Flyweight:
        key = (brand, model, color)
        flyweight = self._flyweights.get(key)
        if flyweight is None:
            self._trace.emit("FlyweightFactory: Can't find a flyweight, creating new one.")
            flyweight = Flyweight(brand, model, color)
            self._flyweights[key] = flyweight
        else:
            self._trace.emit("FlyweightFactory: Reusing existing flyweight.")
        return flyweight

    def keys(self) -> list[str]:
        return [self.get_key(*triple) for triple in self._flyweights]

    def list_flyweights(self) -> None:
        self._trace.emit(f"FlyweightFactory: I have {len(self._flyweights)} flyweights:")
        for key in self.keys():
            self._trace.emit(key)

    def __len__(self) -> int:
        return len(self._flyweights)


def add_car_to_database(factory: FlyweightFactory, car: Car, brand: str, model: str,
                        color: str, trace: Trace) -> None:
    trace.emit("Client: Adding a car to database.")
    flyweight = factory.get_flyweight(brand, model, color)
    trace.emit(flyweight.operation(car))


class FlyweightExample(PatternExample):
    key = "flyweight"
    name = "Flyweight"
    category = PatternCategory.STRUCTURAL
    summary = "Fit more objects into memory by sharing common parts of state."

    SHARED_STATES = (
        ("Chevrolet", "Camaro2018", "pink"),
        ("Mercedes Benz", "C300", "black"),
        ("Mercedes Benz", "C500", "red"),
        ("BMW", "M5", "red"),
        ("BMW", "X6", "white"),
    )

    def demonstrate(self, trace: Trace) -> None:
        factory = FlyweightFactory(trace, self.SHARED_STATES)
        factory.list_flyweights()
        trace.emit()

        car = Car(owner="James Doe", plates="CL234IR")
        add_car_to_database(factory, car, "BMW", "M5", "red", trace)
        trace.emit()
        add_car_to_database(factory, car, "BMW", "X1", "red", trace)
        trace.emit()

        factory.list_flyweights()
