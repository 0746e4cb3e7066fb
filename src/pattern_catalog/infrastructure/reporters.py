"""Reporter implementation - renders to stdout in terminal (rich), plain, json or markdown."""

import json
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pattern_catalog.domain.entities import ExampleRun, OutputFormat
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.patterns import PatternDescription
from pattern_catalog.interface.reporters import CatalogReporter

CATEGORY_STYLES: dict[str, str] = {
    "behavioral": "#00EEFF",
    "creational": "#C41E3A",
    "structural": "bold #007BFF",
}


class TerminalCatalogReporter(CatalogReporter):
    """Renders catalog data. Everything goes to stdout; status lines belong to telemetry."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def _out(self, text: str = "") -> None:
        # Raw write: Console.print would expand the tabs of plain listings.
        self.console.file.write(text + "\n")

    def _json(self, payload: object) -> None:
        self._out(json.dumps(payload, indent=2))

    # Listing

    def report_examples(
        self, examples: list[PatternExample], output_format: OutputFormat
    ) -> None:
        rows = [
            {
                "key": e.key,
                "name": e.name,
                "category": e.category.value,
                "summary": e.summary,
            }
            for e in examples
        ]
        if output_format is OutputFormat.JSON:
            self._json(rows)
            return
        if output_format is OutputFormat.MARKDOWN:
            self._out("| Key | Name | Category | Summary |")
            self._out("|-----|------|----------|---------|")
            for r in rows:
                summary = r["summary"].replace("|", ",")
                self._out(f"| {r['key']} | {r['name']} | {r['category']} | {summary} |")
            return
        if output_format is OutputFormat.PLAIN:
            for r in rows:
                self._out(f"{r['key']}\t{r['name']}\t{r['category']}\t{r['summary']}")
            return
        table = Table(title="Pattern Catalog", header_style="bold #007BFF")
        table.add_column("Key", style="#00EEFF", no_wrap=True)
        table.add_column("Name")
        table.add_column("Category")
        table.add_column("Summary")
        for r in rows:
            style = CATEGORY_STYLES.get(r["category"], "")
            table.add_row(r["key"], r["name"], f"[{style}]{r['category']}[/]", r["summary"])
        self.console.print(table)

    # Runs

    def report_runs(
        self, runs: list[ExampleRun], output_format: OutputFormat
    ) -> None:
        if output_format is OutputFormat.JSON:
            payload: object = runs[0].to_dict() if len(runs) == 1 else [r.to_dict() for r in runs]
            self._json(payload)
            return
        for index, run in enumerate(runs):
            if output_format is OutputFormat.MARKDOWN:
                self._out(f"## {run.name}")
                self._out()
                self._out("```text")
                self._out(run.text)
                self._out("```")
                self._out()
            elif output_format is OutputFormat.PLAIN:
                if len(runs) > 1:
                    self._out(f"=== {run.name} ===")
                self._out(run.text)
                if index < len(runs) - 1:
                    self._out()
            else:
                style = CATEGORY_STYLES.get(run.category.value, "white")
                self.console.print(Panel(
                    Text(run.text),
                    title=f"[bold]{run.name}[/] ({run.category.value})",
                    border_style=style,
                    expand=False,
                ))

    # Description

    def report_description(
        self, description: PatternDescription, output_format: OutputFormat
    ) -> None:
        if output_format is OutputFormat.JSON:
            self._json(description.to_dict())
            return
        definition = description.definition
        if output_format is OutputFormat.MARKDOWN:
            self._out(f"## {description.name}")
            self._out(f"*{description.category.value}* | `{description.key}`")
            self._out()
            self._out(description.summary)
            if definition is not None:
                self._out()
                self._out(f"**Intent**: {definition.intent}")
                self._out()
                self._out(f"**ELI5**: {definition.eli5}")
                if definition.participants:
                    self._out()
                    self._out("### Participants")
                    for participant in definition.participants:
                        self._out(f"- {participant}")
                if definition.references:
                    self._out()
                    self._out("### References")
                    for ref in definition.references:
                        self._out(f"- {ref}")
            return
        lines = [
            f"{description.name} [{description.category.value}] ({description.key})",
            description.summary,
        ]
        if definition is not None:
            lines.extend(["", f"Intent: {definition.intent}", f"ELI5: {definition.eli5}"])
            if definition.participants:
                lines.append("Participants:")
                lines.extend(f"  - {p}" for p in definition.participants)
            if definition.references:
                lines.append("References:")
                lines.extend(f"  - {r}" for r in definition.references)
        if output_format is OutputFormat.PLAIN:
            for line in lines:
                self._out(line)
            return
        style = CATEGORY_STYLES.get(description.category.value, "white")
        self.console.print(Panel(
            Text("\n".join(lines[1:])),
            title=description.name,
            subtitle=description.key,
            border_style=style,
            expand=False,
        ))
