"""CLI entry points for the pattern catalog - Thin Controller using Typer."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

import typer

from pattern_catalog.domain.catalog import ExampleCatalog
from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.domain.entities import OutputFormat, PatternCategory
from pattern_catalog.domain.exceptions import PatternCatalogError
from pattern_catalog.domain.protocols import (
    GlossaryServiceProtocol,
    TelemetryPort,
    TraceArchiveProtocol,
)
from pattern_catalog.interface.reporters import CatalogReporter
from pattern_catalog.use_cases.describe_pattern import DescribePatternUseCase, ListExamplesUseCase
from pattern_catalog.use_cases.run_example import RunExampleUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    catalog: ExampleCatalog
    glossary_service: GlossaryServiceProtocol
    trace_archive: TraceArchiveProtocol
    reporter: CatalogReporter
    configure_logging: Optional[Callable[[bool], None]] = None


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_format(raw: Optional[str], config_loader: ConfigurationLoader) -> OutputFormat:
        """Explicit --format wins, else the configured default. Raises ValueError."""
        if raw is None:
            return config_loader.output_format
        return OutputFormat.parse(raw)

    @staticmethod
    def resolve_category(raw: Optional[str]) -> Optional[PatternCategory]:
        """Parse --category. Raises ValueError."""
        if raw is None:
            return None
        return PatternCategory.parse(raw)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="pattern-catalog",
            help="Pattern Catalog: run and explore conceptual design-pattern examples.",
            add_completion=False,
            no_args_is_help=True,
        )

        def _fail(message: str) -> typer.Exit:
            deps.telemetry.error(message)
            return typer.Exit(code=1)

        def _session_start(output_format: OutputFormat) -> None:
            """Banner and handshake go to stderr, and only for terminal output."""
            if output_format is OutputFormat.TERMINAL:
                deps.telemetry.handshake()

        def _options(fmt: Optional[str], category: Optional[str] = None) -> tuple[OutputFormat, Optional[PatternCategory]]:
            try:
                return (
                    CLIAppFactory.resolve_format(fmt, deps.config_loader),
                    CLIAppFactory.resolve_category(category),
                )
            except ValueError as exc:
                raise _fail(str(exc)) from exc

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
        ) -> None:
            """Pattern Catalog: run and explore conceptual design-pattern examples."""
            if deps.configure_logging is not None:
                deps.configure_logging(verbose)

        @app.command("list")
        def list_examples(
            category: Optional[str] = typer.Option(
                None, "--category", "-c", help="behavioral, creational or structural"),
            fmt: Optional[str] = typer.Option(
                None, "--format", "-f", help="terminal, plain, json or markdown"),
        ) -> None:
            """List the examples in the catalog."""
            output_format, parsed_category = _options(fmt, category)
            examples = ListExamplesUseCase(deps.catalog).execute(parsed_category)
            deps.reporter.report_examples(examples, output_format)

        @app.command()
        def run(
            key: str = typer.Argument(..., help="Example key, e.g. chain-of-responsibility"),
            fmt: Optional[str] = typer.Option(
                None, "--format", "-f", help="terminal, plain, json or markdown"),
        ) -> None:
            """Run one example and show its narration."""
            output_format, _ = _options(fmt)
            _session_start(output_format)
            use_case = RunExampleUseCase(
                catalog=deps.catalog,
                telemetry=deps.telemetry,
                config_loader=deps.config_loader,
                trace_archive=deps.trace_archive,
            )
            try:
                example_run = use_case.execute(key)
            except PatternCatalogError as exc:
                raise _fail(str(exc)) from exc
            deps.reporter.report_runs([example_run], output_format)

        @app.command("run-all")
        def run_all(
            category: Optional[str] = typer.Option(
                None, "--category", "-c", help="behavioral, creational or structural"),
            fmt: Optional[str] = typer.Option(
                None, "--format", "-f", help="terminal, plain, json or markdown"),
        ) -> None:
            """Run every example (minus configured exclusions) in catalog order."""
            output_format, parsed_category = _options(fmt, category)
            _session_start(output_format)
            use_case = RunExampleUseCase(
                catalog=deps.catalog,
                telemetry=deps.telemetry,
                config_loader=deps.config_loader,
                trace_archive=deps.trace_archive,
            )
            try:
                runs = use_case.execute_all(parsed_category)
            except PatternCatalogError as exc:
                raise _fail(str(exc)) from exc
            deps.reporter.report_runs(runs, output_format)

        @app.command()
        def describe(
            key: str = typer.Argument(..., help="Example key, e.g. strategy"),
            fmt: Optional[str] = typer.Option(
                None, "--format", "-f", help="terminal, plain, json or markdown"),
        ) -> None:
            """Show a pattern's intent, ELI5 explanation and participants."""
            output_format, _ = _options(fmt)
            use_case = DescribePatternUseCase(
                catalog=deps.catalog,
                glossary_service=deps.glossary_service,
                telemetry=deps.telemetry,
            )
            try:
                description = use_case.execute(key)
            except PatternCatalogError as exc:
                raise _fail(str(exc)) from exc
            deps.reporter.report_description(description, output_format)

        return app
