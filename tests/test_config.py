"""Tests for deck file loading."""

import json
from pathlib import Path

import pytest

from webpresents.config import load_config
from webpresents.config.loader import normalize_attribute
from webpresents.infra.exceptions import ConfigurationError

DECK_YAML = """
deck:
  transition: fadeToBlack
  loop: true
window:
  title: Demo
  width: 800
  height: 600
logging:
  level: DEBUG
  filepath: logs/demo.log
  levels:
    ui.qt: ERROR
slides:
  - name: intro
    title: Hello
    image: media/logo.png
  - name: clip
    attributes:
      fullvideo: media/clip.mp4
      duration: 3000
      fadeelements:
  - attributes:
      video: https://example.org/clip.mp4
      autoplay: true
"""


@pytest.fixture
def deck_file(tmp_path):
    path = tmp_path / "deck.yaml"
    path.write_text(DECK_YAML, encoding="utf-8")
    return path


class TestLoadConfig:
    """YAML and JSON deck files."""

    def test_sections_are_parsed(self, deck_file):
        config = load_config(deck_file)

        assert config.deck.transition == "fadeToBlack"
        assert config.deck.loop is True
        assert config.deck.full_screen is False
        assert config.window.title == "Demo"
        assert (config.window.width, config.window.height) == (800, 600)
        assert config.logging.level == "DEBUG"
        assert config.logging.levels == {"ui.qt": "ERROR"}
        assert [slide.name for slide in config.slides] == ["intro", "clip", None]

    def test_attributes_are_strings(self, deck_file):
        clip = load_config(deck_file).slides[1]

        assert clip.attributes["duration"] == "3000"
        assert clip.attributes["fadeelements"] == ""
        assert load_config(deck_file).slides[2].attributes["autoplay"] == "true"

    def test_paths_are_relative_to_deck_file(self, deck_file, tmp_path):
        config = load_config(deck_file)

        assert config.logging.filepath == (tmp_path / "logs/demo.log").resolve()
        assert config.slides[0].image == (tmp_path / "media/logo.png").resolve()
        assert config.slides[1].attributes["fullvideo"] == str((tmp_path / "media/clip.mp4").resolve())

    def test_urls_are_left_alone(self, deck_file):
        assert load_config(deck_file).slides[2].attributes["video"] == "https://example.org/clip.mp4"

    def test_json_deck(self, tmp_path):
        path = tmp_path / "deck.json"
        path.write_text(json.dumps({"slides": [{"name": "only", "attributes": {"duration": 500}}]}), encoding="utf-8")

        config = load_config(str(path))

        assert config.slides[0].attributes == {"duration": "500"}
        assert config.deck.transition == ""

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        config = load_config(path)

        assert config.slides == ()
        assert config.window.width == 1024

    def test_bundled_deck_loads(self):
        deck = Path(__file__).resolve().parents[1] / "config" / "deck.yaml"

        config = load_config(deck)

        assert len(config.slides) == 4


class TestLoadConfigErrors:
    """Bad deck files are reported as configuration errors."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "deck.toml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)

    @pytest.mark.parametrize(
        "text",
        [
            "- just\n- a list\n",
            "slides: {name: x}\n",
            "deck: [1, 2]\n",
            "deck:\n  speed: 3\n",
            "slides:\n  - colour: red\n",
            "slides:\n  - attributes: [1]\n",
        ],
    )
    def test_malformed_sections(self, tmp_path, text):
        path = tmp_path / "deck.yaml"
        path.write_text(text, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)


class TestNormalizeAttribute:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, ""), (True, "true"), (False, "false"), (3000, "3000"), (1.5, "1.5"), ("slideFade", "slideFade")],
    )
    def test_values(self, value, expected):
        assert normalize_attribute(value) == expected
