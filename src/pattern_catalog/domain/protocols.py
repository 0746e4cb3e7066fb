from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import ExampleRun
    from pattern_catalog.domain.patterns import PatternDefinition


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class GlossaryServiceProtocol(Protocol):
    """Protocol for the pattern glossary. Implemented by GlossaryService in infrastructure."""

    def get_definition(self, key: str) -> Optional["PatternDefinition"]:
        """Return the definition for a glossary key, or None."""
        ...

    def get_glossary(self) -> dict[str, "PatternDefinition"]:
        """Return a shallow copy of every loaded definition."""
        ...


class TraceArchiveProtocol(Protocol):
    """Protocol for persisting example runs."""

    def archive(self, run: "ExampleRun") -> str:
        """Append the run to the archive. Returns the path written."""
        ...
