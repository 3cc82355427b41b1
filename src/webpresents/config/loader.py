"""Configuration loader utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from webpresents.infra.exceptions import ConfigurationError

from .models import Config, LoggingConfig, SlideDefinition, SlideshowOptions, WindowConfig

# Attribute payloads that name files on disk.
PATH_ATTRIBUTES = frozenset({"video", "fullvideo"})


def _normalize_path(path: Path | str) -> Path:
    return path if isinstance(path, Path) else Path(path)


def _load_raw_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    suffix = config_path.suffix.lower()
    with config_path.open("r", encoding="utf-8") as stream:
        if suffix in {".yaml", ".yml"}:
            raw = yaml.safe_load(stream) or {}
        elif suffix == ".json":
            raw = json.load(stream)
        else:
            raise ConfigurationError(f"Unsupported config format: {suffix}")

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config root must be a mapping, got {type(raw).__name__}")
    return raw


def load_config(config_path: Path | str) -> Config:
    """Load a deck file and construct the Config dataclass."""

    config_path = _normalize_path(config_path)
    raw = _load_raw_config(config_path)
    base_dir = config_path.parent

    deck = _build(SlideshowOptions, raw.get("deck"), "deck")
    window = _build(WindowConfig, raw.get("window"), "window")

    logging_raw = dict(_section(raw.get("logging"), "logging"))
    log_path = logging_raw.get("filepath")
    if log_path:
        logging_raw["filepath"] = (base_dir / log_path).resolve()
    logging = _build(LoggingConfig, logging_raw, "logging")

    slides_raw = raw.get("slides") or []
    if not isinstance(slides_raw, list):
        raise ConfigurationError("'slides' must be a list of slide definitions.")
    slides = tuple(_load_slide(entry, index, base_dir) for index, entry in enumerate(slides_raw))

    return Config(deck=deck, window=window, logging=logging, slides=slides)


def normalize_attribute(value: Any) -> str:
    """Render a config value as the declarative string payload of an attribute."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _load_slide(raw_slide: Any, index: int, base_dir: Path) -> SlideDefinition:
    section = f"slides[{index}]"
    slide_raw = dict(_section(raw_slide, section))

    attributes_raw = _section(slide_raw.pop("attributes", None), f"{section}.attributes")
    attributes: Dict[str, str] = {}
    for name, value in attributes_raw.items():
        text = normalize_attribute(value)
        if name in PATH_ATTRIBUTES and text and "://" not in text:
            text = str((base_dir / text).resolve())
        attributes[str(name)] = text

    image = slide_raw.get("image")
    if image:
        slide_raw["image"] = (base_dir / image).resolve()

    name = slide_raw.get("name")
    if name is not None:
        slide_raw["name"] = str(name)

    return _build(SlideDefinition, dict(slide_raw, attributes=attributes), section)


def _section(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return value


def _build(cls, raw: Any, name: str):
    try:
        return cls(**_section(raw, name))
    except TypeError as exc:
        raise ConfigurationError(f"Invalid '{name}' section: {exc}") from exc
