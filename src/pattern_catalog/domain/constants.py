"""
Pattern Catalog: shared constants.
"""

_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_CATALOG_ART: str = r"""
    ____        __  __                     ______      __        __
   / __ \____ _/ /_/ /____  _________     / ____/___ _/ /_____ _/ /___  ____ _
  / /_/ / __ `/ __/ __/ _ \/ ___/ __ \   / /   / __ `/ __/ __ `/ / __ \/ __ `/
 / ____/ /_/ / /_/ /_/  __/ /  / / / /  / /___/ /_/ / /_/ /_/ / / /_/ / /_/ /
/_/    \__,_/\__/\__/\___/_/  /_/ /_/   \____/\__,_/\__/\__,_/_/\____/\__, /
                                                                     /____/
"""
CATALOG_BANNER = _CYAN + _CATALOG_ART + _RESET

# [tool.pattern-catalog] in pyproject.toml
CONFIG_SECTION: str = "pattern-catalog"

DEFAULT_OUTPUT_FORMAT: str = "terminal"
DEFAULT_ARCHIVE_DIR: str = ".pattern-catalog/traces"
DEFAULT_LOG_LEVEL: str = "WARNING"

LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

GLOSSARY_RESOURCE: str = "pattern_glossary.yaml"
