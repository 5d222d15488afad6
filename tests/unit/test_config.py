"""Tests for manifest loading and configuration."""

import logging
from pathlib import Path

import pytest

from dynui import ConfigError, Engine, RendererConfig, configure_logging, load_config, load_manifest

MANIFEST = """
[renderer]
use_24h_clock = true
root_style_lookup = true
log_level = "debug"

[variables."@env"]
api = "https://example.com"

[variables."@state"]
greeting = "Hello"

[styles.colors]
primary = "#0066cc"
"""


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "dynui.toml"
    path.write_text(MANIFEST)
    return path


class TestLoadManifest:
    def test_full_manifest(self, manifest_path: Path) -> None:
        manifest = load_manifest(manifest_path)
        assert manifest.config == RendererConfig(
            use_24h_clock=True, root_style_lookup=True, log_level="DEBUG"
        )
        assert manifest.variables["@env"] == {"api": "https://example.com"}
        assert manifest.styles == {"colors": {"primary": "#0066cc"}}

    def test_defaults_without_renderer_table(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.toml"
        path.write_text("")
        manifest = load_manifest(path)
        assert manifest.config == RendererConfig()
        assert manifest.variables == {}
        assert load_config(path) == RendererConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_manifest(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[renderer\nuse_24h_clock = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_manifest(path)

    def test_registry_table_must_be_table(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("styles = 3\n")
        with pytest.raises(ConfigError, match=r"\[styles\]"):
            load_manifest(path)


class TestEngineFromManifest:
    def test_seeded_engine(self, manifest_path: Path) -> None:
        engine = Engine.from_manifest(manifest_path)
        assert engine.config.use_24h_clock is True
        assert engine.config.root_style_lookup is True
        assert engine.parse_dyn_variable([{"root": "@env", "keys": "api"}]) == "https://example.com"
        assert engine.parse_dyn_style({"c": {"root": "colors", "keys": "primary"}}) == {
            "c": "#0066cc"
        }
        assert logging.getLogger("dynui").level == logging.DEBUG
        configure_logging("WARNING")


class TestConfigureLogging:
    def test_sets_package_level(self) -> None:
        configure_logging("ERROR")
        assert logging.getLogger("dynui").level == logging.ERROR
        configure_logging(logging.WARNING)
        assert logging.getLogger("dynui").level == logging.WARNING
