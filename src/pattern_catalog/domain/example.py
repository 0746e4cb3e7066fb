"""Base class shared by every catalog example."""

from abc import ABC, abstractmethod
from typing import ClassVar

from pattern_catalog.domain.entities import ExampleRun, PatternCategory
from pattern_catalog.domain.trace import Trace


class PatternExample(ABC):
    """
    One conceptual example: the client driver of a single pattern.

    Subclasses build their participants inside ``demonstrate`` so that each
    run starts from fresh objects and nothing leaks between runs.
    """

    key: ClassVar[str]
    name: ClassVar[str]
    category: ClassVar[PatternCategory]
    summary: ClassVar[str] = ""
    glossary_key: ClassVar[str] = ""

    @abstractmethod
    def demonstrate(self, trace: Trace) -> None:
        """Wire the participants and narrate the run into ``trace``."""

    @property
    def glossary_entry(self) -> str:
        """Glossary key of the pattern this example illustrates."""
        return self.glossary_key or self.key

    def run(self) -> Trace:
        """Run the example against a fresh trace."""
        trace = Trace()
        self.demonstrate(trace)
        return trace

    def execute(self) -> ExampleRun:
        """Run the example and package the result."""
        trace = self.run()
        return ExampleRun(
            key=self.key,
            name=self.name,
            category=self.category,
            lines=trace.lines,
        )
