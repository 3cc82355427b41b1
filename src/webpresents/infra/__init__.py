"""Infrastructure helpers: logging setup and error types."""

from .exceptions import (
    ConfigurationError,
    LifecycleError,
    UnknownTransitionError,
    WebPresentsError,
    install_exception_hook,
)
from .logging import configure_logging, route_qt_messages

__all__ = [
    "ConfigurationError",
    "LifecycleError",
    "UnknownTransitionError",
    "WebPresentsError",
    "configure_logging",
    "install_exception_hook",
    "route_qt_messages",
]
