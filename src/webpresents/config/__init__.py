"""Configuration package for webPresents decks."""

from .models import Config, LoggingConfig, SlideDefinition, SlideshowOptions, WindowConfig
from .loader import load_config

__all__ = [
    "Config",
    "LoggingConfig",
    "SlideDefinition",
    "SlideshowOptions",
    "WindowConfig",
    "load_config",
]
