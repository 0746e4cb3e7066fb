"""Design pattern glossary entities for docs and ELI5 mode. Pure domain data, no I/O."""

from dataclasses import dataclass, field

from pattern_catalog.domain.entities import PatternCategory


@dataclass(frozen=True)
class PatternDefinition:
    """Structured explanation of a design pattern, loaded from the glossary resource."""
    key: str
    name: str
    category: PatternCategory
    intent: str
    eli5: str
    participants: tuple[str, ...] = field(default_factory=tuple)
    references: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "key": self.key,
            "name": self.name,
            "category": self.category.value,
            "intent": self.intent,
            "eli5": self.eli5,
            "participants": list(self.participants),
            "references": list(self.references),
        }


@dataclass(frozen=True)
class PatternDescription:
    """A catalog example together with its glossary definition, when one exists."""
    key: str
    name: str
    category: PatternCategory
    summary: str
    definition: "PatternDefinition | None" = None

    def to_dict(self) -> dict[str, object]:
        return {
            "key": self.key,
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
            "definition": self.definition.to_dict() if self.definition else None,
        }
