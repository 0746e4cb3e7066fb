"""Unit tests for TerminalCatalogReporter."""

import io
import json

from rich.console import Console

from pattern_catalog.domain.catalog import ExampleCatalog
from pattern_catalog.domain.entities import ExampleRun, OutputFormat, PatternCategory
from pattern_catalog.domain.patterns import PatternDefinition, PatternDescription
from pattern_catalog.infrastructure.reporters import TerminalCatalogReporter


def _reporter() -> tuple[TerminalCatalogReporter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return TerminalCatalogReporter(console=console), buffer


RUNS = [
    ExampleRun("strategy", "Strategy", PatternCategory.BEHAVIORAL, ("abcde", "edcba")),
    ExampleRun("proxy", "Proxy", PatternCategory.STRUCTURAL, ("[not markup]",)),
]

DESCRIPTION = PatternDescription(
    key="strategy",
    name="Strategy",
    category=PatternCategory.BEHAVIORAL,
    summary="Swap algorithms at runtime.",
    definition=PatternDefinition(
        key="strategy",
        name="Strategy",
        category=PatternCategory.BEHAVIORAL,
        intent="Make algorithms interchangeable.",
        eli5="Choose how to get to school.",
        participants=("Context", "Strategy"),
    ),
)


class TestReportExamples:
    def test_json_lists_every_example(self) -> None:
        reporter, buffer = _reporter()
        examples = ExampleCatalog.default().examples()
        reporter.report_examples(examples, OutputFormat.JSON)
        rows = json.loads(buffer.getvalue())
        assert [r["key"] for r in rows] == [e.key for e in examples]
        assert rows[0]["category"] == "behavioral"

    def test_plain_is_tab_separated(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_examples(ExampleCatalog.default().examples(), OutputFormat.PLAIN)
        lines = buffer.getvalue().splitlines()
        assert len(lines) == 23
        assert lines[0].split("\t")[:3] == [
            "chain-of-responsibility", "Chain of Responsibility", "behavioral"]

    def test_markdown_table(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_examples(ExampleCatalog.default().examples(), OutputFormat.MARKDOWN)
        lines = buffer.getvalue().splitlines()
        assert lines[0] == "| Key | Name | Category | Summary |"
        assert len(lines) == 25

    def test_terminal_table_mentions_keys(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_examples(ExampleCatalog.default().examples(), OutputFormat.TERMINAL)
        assert "Pattern Catalog" in buffer.getvalue()


class TestReportRuns:
    def test_json_single_run_is_object(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_runs(RUNS[:1], OutputFormat.JSON)
        assert json.loads(buffer.getvalue()) == {
            "key": "strategy",
            "name": "Strategy",
            "category": "behavioral",
            "lines": ["abcde", "edcba"],
        }

    def test_json_many_runs_is_list(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_runs(RUNS, OutputFormat.JSON)
        assert [r["key"] for r in json.loads(buffer.getvalue())] == ["strategy", "proxy"]

    def test_plain_single_run_is_verbatim(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_runs(RUNS[:1], OutputFormat.PLAIN)
        assert buffer.getvalue() == "abcde\nedcba\n"

    def test_plain_many_runs_have_headers(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_runs(RUNS, OutputFormat.PLAIN)
        assert buffer.getvalue() == (
            "=== Strategy ===\nabcde\nedcba\n\n=== Proxy ===\n[not markup]\n")

    def test_markdown_fences_narration(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_runs(RUNS[:1], OutputFormat.MARKDOWN)
        assert "## Strategy\n\n```text\nabcde\nedcba\n```" in buffer.getvalue()

    def test_terminal_keeps_brackets(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_runs(RUNS[1:], OutputFormat.TERMINAL)
        assert "[not markup]" in buffer.getvalue()


class TestReportDescription:
    def test_json(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_description(DESCRIPTION, OutputFormat.JSON)
        payload = json.loads(buffer.getvalue())
        assert payload["key"] == "strategy"
        assert payload["definition"]["participants"] == ["Context", "Strategy"]

    def test_plain(self) -> None:
        reporter, buffer = _reporter()
        reporter.report_description(DESCRIPTION, OutputFormat.PLAIN)
        lines = buffer.getvalue().splitlines()
        assert lines[0] == "Strategy [behavioral] (strategy)"
        assert "Intent: Make algorithms interchangeable." in lines
        assert "  - Context" in lines

    def test_markdown_without_definition(self) -> None:
        reporter, buffer = _reporter()
        bare = PatternDescription("bridge", "Bridge", PatternCategory.STRUCTURAL, "Split it.")
        reporter.report_description(bare, OutputFormat.MARKDOWN)
        output = buffer.getvalue()
        assert output.startswith("## Bridge\n")
        assert "**Intent**" not in output
