from dataclasses import dataclass, field
from enum import Enum


class PatternCategory(Enum):
    """Catalog section a pattern belongs to."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"

    @classmethod
    def parse(cls, raw: str) -> "PatternCategory":
        """Resolve a category from user input (case-insensitive). Raises ValueError."""
        normalized = raw.strip().lower()
        for category in cls:
            if category.value == normalized:
                return category
        allowed = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown category '{raw}'. Expected one of: {allowed}.")


class OutputFormat(Enum):
    """How the CLI renders catalog listings and traces."""
    TERMINAL = "terminal"  # rich tables and panels
    PLAIN = "plain"        # bare lines, e.g. for piping
    JSON = "json"
    MARKDOWN = "markdown"

    @classmethod
    def parse(cls, raw: str) -> "OutputFormat":
        """Resolve an output format from user input (case-insensitive). Raises ValueError."""
        normalized = raw.strip().lower()
        for fmt in cls:
            if fmt.value == normalized:
                return fmt
        allowed = ", ".join(f.value for f in cls)
        raise ValueError(f"Unknown format '{raw}'. Expected one of: {allowed}.")


@dataclass(frozen=True)
class ExampleRun:
    """Result of running one catalog example."""
    key: str
    name: str
    category: PatternCategory
    lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """Narration joined into one string."""
        return "\n".join(self.lines)

    def to_dict(self) -> dict[str, object]:
        """Serializable form for JSON output."""
        return {
            "key": self.key,
            "name": self.name,
            "category": self.category.value,
            "lines": list(self.lines),
        }
