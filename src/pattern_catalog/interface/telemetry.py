"""Console telemetry: status lines on stderr, mirrored to the package logger."""

import logging

from rich.console import Console
from rich.markup import escape

from pattern_catalog.domain.constants import CATALOG_BANNER
from pattern_catalog.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Implements TelemetryPort with a rich Console on stderr so stdout stays clean for output."""

    def __init__(self, project_name: str, color: str, welcome: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = Console(stderr=True)
        self.logger = logging.getLogger("pattern_catalog.telemetry")

    def handshake(self) -> None:
        self.console.print(CATALOG_BANNER, markup=False, highlight=False)
        self.console.print(f"[bold {self.color}]{escape(self.project_name)}[/] {escape(self.welcome)}")
        self.logger.info("%s: %s", self.project_name, self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}")
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/] {escape(message)}")
        self.logger.error(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/] {escape(message)}")
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
