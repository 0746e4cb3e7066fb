"""Process-wide logging setup. Standard library logging rendered by rich."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from pattern_catalog.domain.constants import DEFAULT_LOG_LEVEL

ROOT_LOGGER_NAME = "pattern_catalog"


class LoggingConfigurator:
    """Attach a single RichHandler (stderr) to the package logger."""

    @staticmethod
    def configure(level: str = DEFAULT_LOG_LEVEL, verbose: bool = False) -> logging.Logger:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(logging.DEBUG if verbose else level.upper())
        for handler in list(logger.handlers):
            if isinstance(handler, RichHandler):
                logger.removeHandler(handler)
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False
        return logger
