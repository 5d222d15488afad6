"""
Renderer configuration loaded from a TOML manifest.

Example ``dynui.toml``::

    [renderer]
    use_24h_clock = true
    log_level = "DEBUG"

    [variables."@env"]
    api_url = "https://example.com"

    [styles.colors]
    primary = "#0066cc"
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dynui.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class RendererConfig:
    """Engine behaviour switches."""

    use_24h_clock: bool = False  # "time" format renders HH:MM instead of H:MM AM/PM
    root_style_lookup: bool = False  # index styles by selector root
    log_level: str = "WARNING"


@dataclass
class Manifest:
    """Parsed manifest: config plus initial registry contents."""

    config: RendererConfig = field(default_factory=RendererConfig)
    variables: dict[str, Any] = field(default_factory=dict)
    styles: dict[str, Any] = field(default_factory=dict)


def _read_toml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Renderer manifest not found: {path}")
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _table(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] in {path} must be a table")
    return value


def parse_config(data: dict[str, Any]) -> RendererConfig:
    """Build a RendererConfig from a ``[renderer]`` table."""
    return RendererConfig(
        use_24h_clock=bool(data.get("use_24h_clock", False)),
        root_style_lookup=bool(data.get("root_style_lookup", False)),
        log_level=str(data.get("log_level", "WARNING")).upper(),
    )


def load_manifest(path: str | Path) -> Manifest:
    """
    Load a renderer manifest.

    Args:
        path: Path to the TOML file.

    Returns:
        Manifest with config, variables and styles.

    Raises:
        ConfigError: If the file is missing or malformed.
    """
    path = Path(path)
    data = _read_toml(path)
    manifest = Manifest(
        config=parse_config(_table(data, "renderer", path)),
        variables=_table(data, "variables", path),
        styles=_table(data, "styles", path),
    )
    logger.info(
        "Loaded renderer manifest %s (%d variable namespaces, %d style categories)",
        path,
        len(manifest.variables),
        len(manifest.styles),
    )
    return manifest


def load_config(path: str | Path) -> RendererConfig:
    """Load only the ``[renderer]`` table of a manifest."""
    return load_manifest(path).config


def configure_logging(level: str | int = "WARNING") -> None:
    """Set the level of the ``dynui`` logger hierarchy."""
    logging.getLogger("dynui").setLevel(level)
