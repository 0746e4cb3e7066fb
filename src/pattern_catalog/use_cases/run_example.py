"""Use Case: Run catalog examples and optionally archive their traces."""

from typing import Optional

from pattern_catalog.domain.catalog import ExampleCatalog
from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.domain.entities import ExampleRun, PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.protocols import TelemetryPort, TraceArchiveProtocol


class RunExampleUseCase:
    """Resolve examples through the catalog, run them, archive when configured."""

    def __init__(
        self,
        catalog: ExampleCatalog,
        telemetry: TelemetryPort,
        config_loader: ConfigurationLoader,
        trace_archive: Optional[TraceArchiveProtocol] = None,
    ) -> None:
        self.catalog = catalog
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.trace_archive = trace_archive

    def execute(self, key: str) -> ExampleRun:
        """Run one example. Raises UnknownPatternError, or TraceArchiveError when archiving fails."""
        example = self.catalog.get(key)
        return self._run(example)

    def execute_all(self, category: Optional[PatternCategory] = None) -> list[ExampleRun]:
        """Run every example not excluded by configuration, in catalog order."""
        excluded = {ExampleCatalog.normalize_key(k) for k in self.config_loader.excluded_examples}
        runs: list[ExampleRun] = []
        for example in self.catalog.examples(category):
            if example.key in excluded:
                self.telemetry.debug(f"Skipping excluded example: {example.key}")
                continue
            runs.append(self._run(example))
        self.telemetry.step(f"Ran {len(runs)} example(s).")
        return runs

    def _run(self, example: PatternExample) -> ExampleRun:
        self.telemetry.debug(f"Running example: {example.key}")
        run = example.execute()
        if self.config_loader.archive_traces and self.trace_archive is not None:
            path = self.trace_archive.archive(run)
            self.telemetry.debug(f"Archived trace for {run.key} to {path}")
        return run
