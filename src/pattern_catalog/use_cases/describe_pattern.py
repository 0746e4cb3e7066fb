"""Use Cases: Describe one pattern, list the catalog."""

from typing import Optional

from pattern_catalog.domain.catalog import ExampleCatalog
from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.patterns import PatternDescription
from pattern_catalog.domain.protocols import GlossaryServiceProtocol, TelemetryPort


class DescribePatternUseCase:
    """Join a catalog example with its glossary definition."""

    def __init__(
        self,
        catalog: ExampleCatalog,
        glossary_service: GlossaryServiceProtocol,
        telemetry: TelemetryPort,
    ) -> None:
        self.catalog = catalog
        self.glossary_service = glossary_service
        self.telemetry = telemetry

    def execute(self, key: str) -> PatternDescription:
        """Describe one example. Raises UnknownPatternError for unknown keys."""
        example = self.catalog.get(key)
        definition = self.glossary_service.get_definition(example.glossary_entry)
        if definition is None:
            self.telemetry.warning(f"No glossary entry for '{example.glossary_entry}'.")
        return PatternDescription(
            key=example.key,
            name=example.name,
            category=example.category,
            summary=example.summary,
            definition=definition,
        )


class ListExamplesUseCase:
    """List catalog examples, optionally for one category."""

    def __init__(self, catalog: ExampleCatalog) -> None:
        self.catalog = catalog

    def execute(self, category: Optional[PatternCategory] = None) -> list[PatternExample]:
        return self.catalog.examples(category)
