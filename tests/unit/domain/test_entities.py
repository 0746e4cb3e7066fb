"""Unit tests for domain entities and value objects."""

import dataclasses

import pytest

from pattern_catalog.domain.entities import ExampleRun, OutputFormat, PatternCategory
from pattern_catalog.domain.patterns import PatternDefinition, PatternDescription


class TestEnums:
    def test_category_parse_is_case_insensitive(self) -> None:
        assert PatternCategory.parse(" Structural ") is PatternCategory.STRUCTURAL

    def test_category_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown category 'misc'"):
            PatternCategory.parse("misc")

    def test_output_format_parse(self) -> None:
        assert OutputFormat.parse("JSON") is OutputFormat.JSON
        with pytest.raises(ValueError, match="Unknown format"):
            OutputFormat.parse("xml")


class TestExampleRun:
    def test_text_and_dict(self) -> None:
        run = ExampleRun("strategy", "Strategy", PatternCategory.BEHAVIORAL, ("a", "b"))
        assert run.text == "a\nb"
        assert run.to_dict() == {
            "key": "strategy",
            "name": "Strategy",
            "category": "behavioral",
            "lines": ["a", "b"],
        }

    def test_is_frozen(self) -> None:
        run = ExampleRun("k", "n", PatternCategory.CREATIONAL)
        with pytest.raises(dataclasses.FrozenInstanceError):
            run.key = "other"  # type: ignore[misc]


class TestPatternDescription:
    def test_to_dict_without_definition(self) -> None:
        description = PatternDescription("proxy", "Proxy", PatternCategory.STRUCTURAL, "summary")
        assert description.to_dict()["definition"] is None

    def test_to_dict_with_definition(self) -> None:
        definition = PatternDefinition(
            key="proxy",
            name="Proxy",
            category=PatternCategory.STRUCTURAL,
            intent="Control access.",
            eli5="A receptionist.",
            participants=("Proxy",),
            references=("https://refactoring.guru/design-patterns/proxy",),
        )
        description = PatternDescription(
            "proxy", "Proxy", PatternCategory.STRUCTURAL, "summary", definition)
        payload = description.to_dict()["definition"]
        assert isinstance(payload, dict)
        assert payload["participants"] == ["Proxy"]
        assert payload["category"] == "structural"
