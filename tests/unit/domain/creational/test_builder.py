"""Unit tests for the Builder example."""

import pytest

from pattern_catalog.domain.creational.builder import BuilderExample, ConcreteBuilder1, Director


def test_director_builds_minimal_and_full_products() -> None:
    builder = ConcreteBuilder1()
    director = Director()
    director.set_builder(builder)

    director.build_minimal_viable_product()
    assert builder.product.parts == ["PartA1"]

    director.build_full_featured_product()
    assert builder.product.list_parts() == "Product parts: PartA1, PartB1, PartC1"


def test_retrieving_product_resets_builder() -> None:
    builder = ConcreteBuilder1()
    builder.produce_part_b()
    first = builder.product
    second = builder.product
    assert first.parts == ["PartB1"]
    assert second.parts == []
    assert first is not second


def test_director_without_builder_raises() -> None:
    with pytest.raises(RuntimeError):
        Director().build_minimal_viable_product()


def test_example_custom_product() -> None:
    lines = BuilderExample().run().lines
    assert lines[-1] == "Product parts: PartA1, PartC1"
