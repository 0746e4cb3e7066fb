"""Protocol for catalog reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import ExampleRun, OutputFormat
    from pattern_catalog.domain.example import PatternExample
    from pattern_catalog.domain.patterns import PatternDescription


class CatalogReporter(Protocol):
    """Protocol for rendering listings, traces and descriptions to the user."""

    def report_examples(
        self, examples: list["PatternExample"], output_format: "OutputFormat"
    ) -> None:
        """Render the catalog listing: key, name, category, summary."""
        ...

    def report_runs(
        self, runs: list["ExampleRun"], output_format: "OutputFormat"
    ) -> None:
        """Render the narration of one or more example runs."""
        ...

    def report_description(
        self, description: "PatternDescription", output_format: "OutputFormat"
    ) -> None:
        """Render one pattern's glossary entry and participants."""
        ...
