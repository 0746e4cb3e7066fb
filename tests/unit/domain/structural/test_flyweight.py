"""Unit tests for the Flyweight example."""

from pattern_catalog.domain.structural.flyweight import Car, FlyweightExample, FlyweightFactory
from pattern_catalog.domain.trace import Trace


def _factory(trace: Trace) -> FlyweightFactory:
    return FlyweightFactory(trace, [("BMW", "M5", "red"), ("BMW", "X6", "white")])


def test_key_is_brand_model_color() -> None:
    assert FlyweightFactory.get_key("Mercedes Benz", "C300", "black") == "Mercedes Benz_C300_black"


def test_hit_returns_shared_instance() -> None:
    trace = Trace()
    factory = _factory(trace)
    first = factory.get_flyweight("BMW", "M5", "red")
    second = factory.get_flyweight("BMW", "M5", "red")
    assert first is second
    assert len(factory) == 2
    assert trace.lines.count("FlyweightFactory: Reusing existing flyweight.") == 2


def test_miss_creates_and_registers() -> None:
    trace = Trace()
    factory = _factory(trace)
    created = factory.get_flyweight("BMW", "X1", "red")
    assert trace.lines[-1] == "FlyweightFactory: Can't find a flyweight, creating new one."
    assert len(factory) == 3
    assert factory.keys()[-1] == "BMW_X1_red"
    assert factory.get_flyweight("BMW", "X1", "red") is created


def test_extrinsic_state_is_passed_not_stored() -> None:
    flyweight = _factory(Trace()).get_flyweight("BMW", "M5", "red")
    message = flyweight.operation(Car(owner="James Doe", plates="CL234IR"))
    assert message == (
        "Flyweight: Displaying shared ([ BMW , M5 , red ]) and unique "
        "([ James Doe , CL234IR ]) states.")
    assert not hasattr(flyweight, "owner")


def test_listing_follows_insertion_order() -> None:
    trace = Trace()
    factory = _factory(trace)
    factory.list_flyweights()
    assert trace.lines == (
        "FlyweightFactory: I have 2 flyweights:",
        "BMW_M5_red",
        "BMW_X6_white",
    )


def test_example_grows_registry_by_one() -> None:
    lines = FlyweightExample().run().lines
    assert lines[0] == "FlyweightFactory: I have 5 flyweights:"
    assert "FlyweightFactory: I have 6 flyweights:" in lines
    assert lines[-1] == "BMW_X1_red"


def test_triples_with_matching_display_names_stay_distinct() -> None:
    factory = FlyweightFactory(Trace())
    first = factory.get_flyweight("A_B", "C", "D")
    second = factory.get_flyweight("A", "B_C", "D")
    assert first is not second
    assert second.brand == "A"
    assert len(factory) == 2
