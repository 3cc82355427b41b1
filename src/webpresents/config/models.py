"""Dataclass definitions for presentation configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Literal, Mapping, Optional, Tuple, Union

TransitionRef = Union[str, Callable[..., Any], None]


@dataclass(frozen=True)
class SlideshowOptions:
    """Navigation options for a deck.

    ``transition`` is the default transition used when leaving any slide. It may
    be a registered transition name, a transition function, or empty for an
    instant switch. Slides carrying a ``transition`` attribute override it.
    """

    full_screen: bool = False
    transition: TransitionRef = ""
    loop: bool = False


@dataclass(frozen=True)
class WindowConfig:
    """Presentation window configuration. Width and height are the design size."""

    title: str = "webPresents"
    width: int = 1024
    height: int = 768
    background: str = "#000000"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    filepath: Path = Path("logs/webpresents.log")
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5
    console: bool = True
    # Per-logger overrides, e.g. {"deck": "DEBUG"}.
    levels: Mapping[str, str] = field(default_factory=dict)

    def resolved_path(self) -> Path:
        return self.filepath.expanduser().resolve()


@dataclass(frozen=True)
class SlideDefinition:
    """Content and declarative attributes for one slide."""

    name: Optional[str] = None
    title: str = ""
    body: str = ""
    image: Optional[Path] = None
    background: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Config:
    """Root configuration object."""

    deck: SlideshowOptions = field(default_factory=SlideshowOptions)
    window: WindowConfig = field(default_factory=WindowConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    slides: Tuple[SlideDefinition, ...] = ()
