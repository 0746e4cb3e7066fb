"""Trace archive - append example runs to <archive_dir>/<key>.log."""

import logging
import os
from datetime import datetime, timezone

from pattern_catalog.domain.constants import DEFAULT_ARCHIVE_DIR
from pattern_catalog.domain.entities import ExampleRun
from pattern_catalog.domain.exceptions import TraceArchiveError
from pattern_catalog.domain.protocols import TraceArchiveProtocol

logger = logging.getLogger(__name__)


class TraceArchiveService(TraceArchiveProtocol):
    """Append each run's narration to a per-example log with a UTC run header."""

    def __init__(self, archive_dir: str = DEFAULT_ARCHIVE_DIR) -> None:
        self._archive_dir = archive_dir

    @property
    def archive_dir(self) -> str:
        return self._archive_dir

    def archive(self, run: ExampleRun) -> str:
        """Append the run and return the log path. Raises TraceArchiveError on I/O failure."""
        log_path = os.path.join(self._archive_dir, f"{run.key}.log")
        now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        try:
            os.makedirs(self._archive_dir, exist_ok=True)
            with open(log_path, "a", encoding="utf-8") as f:
                f.write(f"\n{'='*60}\n[{now}] {run.name} ({run.category.value})\n{'='*60}\n")
                for line in run.lines:
                    f.write(line)
                    f.write("\n")
        except OSError as exc:
            raise TraceArchiveError(f"Could not archive trace to {log_path}: {exc}") from exc
        logger.debug("Archived %d line(s) to %s", len(run.lines), log_path)
        return log_path
