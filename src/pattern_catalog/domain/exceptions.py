"""Domain exceptions for the pattern catalog."""


class PatternCatalogError(Exception):
    """Base class for catalog errors surfaced to the CLI."""


class UnknownPatternError(PatternCatalogError, ValueError):
    """Raised when a key does not name any registered example."""

    def __init__(self, key: str, known_keys: list[str]) -> None:
        self.key = key
        self.known_keys = known_keys
        super().__init__(
            f"Example '{key}' not registered. Known examples: {', '.join(known_keys)}."
        )


class TraceArchiveError(PatternCatalogError):
    """Raised when a run cannot be appended to the trace archive."""
