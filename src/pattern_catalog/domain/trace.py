"""Ordered narration log produced by example runs. Pure domain data, no I/O."""

from collections.abc import Iterable, Iterator


class Trace:
    """
    Ordered log of the lines an example narrates while it runs.

    Pattern participants receive the trace they should narrate into instead of
    writing to stdout, so every run is an assertable value.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def emit(self, line: str = "") -> None:
        """Append one line. Embedded newlines become separate entries."""
        self._lines.extend(line.split("\n"))

    def extend(self, lines: Iterable[str]) -> None:
        """Append several lines in order."""
        for line in lines:
            self.emit(line)

    @property
    def lines(self) -> tuple[str, ...]:
        """Snapshot of the narrated lines."""
        return tuple(self._lines)

    def render(self) -> str:
        """Return the narration as a single newline-joined string."""
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    def __repr__(self) -> str:
        return f"Trace(lines={len(self._lines)})"
