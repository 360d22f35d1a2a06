"""Logging utilities for advisory-shield."""

import logging
import sys
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_PREFIX = "advisory_shield"

# Level chosen by the last setup_logging call
_configured_level = logging.INFO
# File handler shared by every advisory_shield logger, set by setup_logging
_file_handler: Optional[logging.Handler] = None


class AdvisoryShieldLogger:
    """Logger wrapper writing through a themed rich console."""

    def __init__(self, name: str, level: Optional[int] = None) -> None:
        self.logger = logging.getLogger(f"{LOGGER_PREFIX}.{name}")
        if level is None:
            level = _configured_level
        self.logger.setLevel(level)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Attach a single rich handler, logging to stderr."""
        console = Console(stderr=True, theme=Theme({
            "info": "cyan",
            "warning": "yellow",
            "error": "red",
            "critical": "red bold",
            "debug": "dim",
        }))

        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s", datefmt="[%X]"))

        # get_logger may be called repeatedly for the same name
        self.logger.handlers.clear()
        self.logger.addHandler(handler)
        if _file_handler is not None:
            self.logger.addHandler(_file_handler)
        self.logger.propagate = False

    def info(self, msg: str, **kwargs: Any) -> None:
        self.logger.info(msg, extra=kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self.logger.warning(msg, extra=kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self.logger.error(msg, extra=kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self.logger.debug(msg, extra=kwargs)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    verbose: bool = False
) -> None:
    """Setup logging configuration for advisory-shield.

    Args:
        level: Logging level
        log_file: Optional log file path
        verbose: Enable verbose logging
    """
    global _configured_level, _file_handler

    if verbose:
        level = logging.DEBUG
    _configured_level = level

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    previous = _file_handler
    _file_handler = None
    if log_file:
        _file_handler = logging.FileHandler(log_file, encoding="utf-8")
        _file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))

    # Loggers created through get_logger do not propagate, so configure them directly
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith(LOGGER_PREFIX) and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            if previous is not None:
                logger.removeHandler(previous)
            if _file_handler is not None:
                logger.addHandler(_file_handler)

    if previous is not None:
        previous.close()


def get_logger(name: str) -> AdvisoryShieldLogger:
    """Get an advisory-shield logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return AdvisoryShieldLogger(name)
