"""Configuration loader for catalog settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

from pattern_catalog.domain.constants import (
    DEFAULT_ARCHIVE_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    LOG_LEVELS,
)
from pattern_catalog.domain.entities import OutputFormat


class ConfigurationLoader:
    """
    Immutable configuration for catalog settings.

    Created by Infrastructure from the [tool.pattern-catalog] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.

    Invalid values fall back to their defaults. The problems found are kept in
    ``warnings`` so the composition root can log them.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable class or instance state after init."""
        self._warnings: list[str] = []
        if not isinstance(config_dict, dict):
            self._warnings.append(
                "Configuration Warning: [tool.pattern-catalog] must be a table. Using defaults.")
            config_dict = {}
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

        self._output_format = self._resolve_output_format()
        self._archive_traces = self._resolve_bool("archive_traces", False)
        self._archive_dir = self._resolve_str("archive_dir", DEFAULT_ARCHIVE_DIR)
        self._log_level = self._resolve_log_level()
        self._excluded_examples = self._resolve_excluded()

    def validate_config(self, config: dict[str, object]) -> None:
        """Record unknown keys in the configuration section."""
        known = {"output_format", "archive_traces", "archive_dir", "log_level", "excluded_examples"}
        for key in config:
            if key not in known:
                self._warnings.append(f"Configuration Warning: unknown option '{key}' is ignored.")

    def _resolve_output_format(self) -> OutputFormat:
        raw = self._config.get("output_format", DEFAULT_OUTPUT_FORMAT)
        try:
            return OutputFormat.parse(str(raw))
        except ValueError as exc:
            self._warnings.append(f"Configuration Warning: {exc} Using '{DEFAULT_OUTPUT_FORMAT}'.")
            return OutputFormat.parse(DEFAULT_OUTPUT_FORMAT)

    def _resolve_bool(self, key: str, default: bool) -> bool:
        raw = self._config.get(key, default)
        if isinstance(raw, bool):
            return raw
        self._warnings.append(f"Configuration Warning: '{key}' must be a boolean. Using {default}.")
        return default

    def _resolve_str(self, key: str, default: str) -> str:
        raw = self._config.get(key, default)
        if isinstance(raw, str) and raw.strip():
            return raw
        self._warnings.append(f"Configuration Warning: '{key}' must be a non-empty string. Using '{default}'.")
        return default

    def _resolve_log_level(self) -> str:
        raw = self._config.get("log_level", DEFAULT_LOG_LEVEL)
        level = str(raw).upper()
        if level in LOG_LEVELS:
            return level
        self._warnings.append(
            f"Configuration Warning: unknown log_level '{raw}'. Using '{DEFAULT_LOG_LEVEL}'.")
        return DEFAULT_LOG_LEVEL

    def _resolve_excluded(self) -> tuple[str, ...]:
        raw = self._config.get("excluded_examples", [])
        if isinstance(raw, list):
            return tuple(str(x) for x in raw if isinstance(x, str))
        self._warnings.append("Configuration Warning: 'excluded_examples' must be a list of keys.")
        return ()

    @property
    def warnings(self) -> tuple[str, ...]:
        """Problems found while reading the configuration."""
        return tuple(self._warnings)

    @property
    def output_format(self) -> OutputFormat:
        """Default rendering for CLI commands given no --format."""
        return self._output_format

    @property
    def archive_traces(self) -> bool:
        """Whether every run is appended to the trace archive."""
        return self._archive_traces

    @property
    def archive_dir(self) -> str:
        return self._archive_dir

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def excluded_examples(self) -> tuple[str, ...]:
        """Example keys skipped by run-all."""
        return self._excluded_examples
