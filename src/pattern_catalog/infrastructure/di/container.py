import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, cast

from pattern_catalog.domain.catalog import ExampleCatalog
from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.infrastructure.config_file_loader import ConfigFileLoader
from pattern_catalog.infrastructure.reporters import TerminalCatalogReporter
from pattern_catalog.infrastructure.services.glossary_service import GlossaryService
from pattern_catalog.infrastructure.services.trace_archive import TraceArchiveService
from pattern_catalog.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from pattern_catalog.domain.protocols import (
        GlossaryServiceProtocol,
        TelemetryPort,
        TraceArchiveProtocol,
    )
    from pattern_catalog.interface.reporters import CatalogReporter

logger = logging.getLogger(__name__)


class CatalogContainer:
    """Dependency Injection Container for the pattern catalog."""

    def __init__(self, project_root: Optional[Path] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._project_root = project_root
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_loader = ConfigurationLoader(
            ConfigFileLoader.load_config_from_fs(self._project_root))
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry(
            "PATTERN CATALOG", "cyan", "23 conceptual examples ready")
        self.register_singleton("TelemetryPort", telemetry)

        self.register_singleton("ExampleCatalog", ExampleCatalog.default())
        self.register_singleton("GlossaryService", GlossaryService())
        self.register_singleton(
            "TraceArchiveService",
            TraceArchiveService(archive_dir=config_loader.archive_dir),
        )

        # Interface
        self.register_singleton("CatalogReporter", TerminalCatalogReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_catalog(self) -> ExampleCatalog:
        return cast(ExampleCatalog, self.get("ExampleCatalog"))

    def get_glossary_service(self) -> "GlossaryServiceProtocol":
        """Return the glossary service (protocol)."""
        return cast("GlossaryServiceProtocol", self.get("GlossaryService"))

    def get_trace_archive(self) -> "TraceArchiveProtocol":
        """Return the trace archive (protocol)."""
        return cast("TraceArchiveProtocol", self.get("TraceArchiveService"))

    def get_reporter(self) -> "CatalogReporter":
        """Return the catalog reporter."""
        return cast("CatalogReporter", self.get("CatalogReporter"))

    def log_config_warnings(self) -> None:
        """Log configuration problems. Call once logging is configured."""
        for message in self.get_config_loader().warnings:
            logger.warning(message)
