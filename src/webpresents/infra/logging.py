"""Logging setup for presentations and rehearsals.

Loggers are named by layer (``deck.*`` for the slideshow core, ``services.*``,
``ui.*`` for the Qt layer, ``app.*`` for the entry points), so a deck file can
turn a single layer up or down::

    logging:
      level: INFO
      levels: {deck: DEBUG, ui.qt: ERROR}
"""

from __future__ import annotations

import logging
import logging.handlers
from typing import Callable, Dict, List, Mapping, Optional

from webpresents.config.models import LoggingConfig

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QT_LOGGER = "ui.qt"


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root handlers with a rotating log file and, optionally, the console."""

    root_level = _parse_level(config.level, "logging.level")
    overrides = _parse_overrides(config.levels)
    logging.captureWarnings(True)

    handlers: List[logging.Handler] = [_file_handler(config)]
    if config.console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    # Handlers pass everything; levels are decided per logger.
    logging.basicConfig(level=root_level, handlers=handlers, force=True)
    for name, level in overrides.items():
        logging.getLogger(name).setLevel(level)


def route_qt_messages(logger_name: str = QT_LOGGER) -> Optional[Callable]:
    """Send Qt's own warnings (qWarning, qCritical, ...) to ``logger_name``.

    Returns the previously installed Qt message handler.
    """
    from PyQt5 import QtCore

    levels = {
        QtCore.QtDebugMsg: logging.DEBUG,
        QtCore.QtInfoMsg: logging.INFO,
        QtCore.QtWarningMsg: logging.WARNING,
        QtCore.QtCriticalMsg: logging.ERROR,
        QtCore.QtFatalMsg: logging.CRITICAL,
    }
    qt_logger = logging.getLogger(logger_name)

    def _handler(msg_type, context, message) -> None:
        qt_logger.log(levels.get(msg_type, logging.WARNING), "%s", message)

    return QtCore.qInstallMessageHandler(_handler)


def _file_handler(config: LoggingConfig) -> logging.Handler:
    log_path = config.resolved_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        filename=log_path,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding="utf-8",
    )


def _parse_level(name: str, where: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level {name!r} in {where}")
    return level


def _parse_overrides(levels: Mapping[str, str]) -> Dict[str, int]:
    if not isinstance(levels, Mapping):
        raise ConfigurationError("logging.levels must map logger names to levels")
    return {str(name): _parse_level(level, f"logging.levels.{name}") for name, level in levels.items()}
