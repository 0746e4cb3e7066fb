"""Load [tool.pattern-catalog] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

from pattern_catalog.domain.constants import CONFIG_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from the start directory.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Load [tool.pattern-catalog]. Unreadable files and non-table sections yield {}."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logger.warning("Could not read %s: %s", config_file, exc)
                return {}
            tool_section = data.get("tool", {})
            if not isinstance(tool_section, dict):
                logger.warning("Ignoring [tool] in %s: expected a table.", config_file)
                return {}
            config_dict = tool_section.get(CONFIG_SECTION, {})
            if not isinstance(config_dict, dict):
                logger.warning(
                    "Ignoring [tool.%s] in %s: expected a table.", CONFIG_SECTION, config_file)
                return {}
            logger.debug("Loaded configuration from %s", config_file)
            return config_dict
        return {}
