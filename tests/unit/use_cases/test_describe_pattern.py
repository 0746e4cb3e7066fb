"""Unit tests for DescribePatternUseCase and ListExamplesUseCase."""

from unittest.mock import MagicMock

import pytest

from pattern_catalog.domain.catalog import ExampleCatalog
from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.exceptions import UnknownPatternError
from pattern_catalog.domain.patterns import PatternDefinition
from pattern_catalog.use_cases.describe_pattern import DescribePatternUseCase, ListExamplesUseCase

ADAPTER = PatternDefinition(
    key="adapter",
    name="Adapter",
    category=PatternCategory.STRUCTURAL,
    intent="Let incompatible interfaces collaborate.",
    eli5="A travel plug.",
)


def test_describe_joins_glossary_entry() -> None:
    glossary = MagicMock()
    glossary.get_definition.return_value = ADAPTER
    telemetry = MagicMock()
    use_case = DescribePatternUseCase(ExampleCatalog.default(), glossary, telemetry)

    description = use_case.execute("object_adapter")

    glossary.get_definition.assert_called_once_with("adapter")
    assert description.key == "object-adapter"
    assert description.definition is ADAPTER
    telemetry.warning.assert_not_called()


def test_describe_without_glossary_entry_warns() -> None:
    glossary = MagicMock()
    glossary.get_definition.return_value = None
    telemetry = MagicMock()
    description = DescribePatternUseCase(
        ExampleCatalog.default(), glossary, telemetry).execute("bridge")
    assert description.definition is None
    telemetry.warning.assert_called_once()


def test_describe_unknown_key_raises() -> None:
    use_case = DescribePatternUseCase(ExampleCatalog.default(), MagicMock(), MagicMock())
    with pytest.raises(UnknownPatternError):
        use_case.execute("monostate")


def test_list_examples_filters_by_category() -> None:
    use_case = ListExamplesUseCase(ExampleCatalog.default())
    assert len(use_case.execute()) == 23
    keys = [e.key for e in use_case.execute(PatternCategory.STRUCTURAL)]
    assert keys[:2] == ["class-adapter", "object-adapter"]
