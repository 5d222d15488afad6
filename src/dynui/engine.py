"""
Resolution engine.

An ``Engine`` owns one set of registries and binds the variable, style,
action and state resolvers and the tree renderer to them. Engines are
independent of each other.

Usage:
    from dynui import ComponentEntry, Engine, TransformResult

    engine = Engine()
    engine.setup(
        components={"Text": ComponentEntry(element="span")},
        variables={"@state": {"name": "Ada"}},
    )
    node = engine.render({"type": "Text", "text": [{"root": "@state", "keys": "name"}]})
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from dynui import actions, styles, variables
from dynui.config import RendererConfig, configure_logging, load_manifest
from dynui.registries import ActionFactory, Registries
from dynui.renderer import RenderedNode, render_component
from dynui.state import resolve_state

logger = logging.getLogger(__name__)


class Engine:
    """Resolvers and renderer bound to one set of registries."""

    def __init__(
        self,
        registries: Registries | None = None,
        config: RendererConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.registries = registries if registries is not None else Registries()
        self.config = config if config is not None else RendererConfig()
        self.clock = clock
        logger.debug("Engine created with config %s", self.config)

    @classmethod
    def from_manifest(cls, path: str | Path, **kwargs: Any) -> Engine:
        """Create an engine configured and seeded from a TOML manifest."""
        manifest = load_manifest(path)
        configure_logging(manifest.config.log_level)
        engine = cls(config=manifest.config, **kwargs)
        engine.setup(variables=manifest.variables, styles=manifest.styles)
        return engine

    def setup(
        self,
        *,
        components: Mapping[str, Any] | None = None,
        variables: Mapping[str, Any] | None = None,
        actions: Mapping[str, ActionFactory] | None = None,
        styles: Mapping[str, Any] | None = None,
    ) -> None:
        """Merge entries into the registries."""
        self.registries.merge(
            variables=variables, styles=styles, actions=actions, components=components
        )

    @property
    def is_initialized(self) -> bool:
        return self.registries.is_initialized

    # -------------------------------------------------------------------------
    # Resolvers
    # -------------------------------------------------------------------------

    def parse_dyn_variable(self, dynamic_variable: Any) -> Any:
        return variables.parse_dyn_variable(
            dynamic_variable,
            self.registries.variables,
            use_24h_clock=self.config.use_24h_clock,
            now=self.clock() if self.clock else None,
        )

    def parse_dyn_style(self, dynamic_style: Any) -> dict[str, Any]:
        return styles.parse_dyn_style(
            dynamic_style,
            self.registries.styles,
            by_root=self.config.root_style_lookup,
        )

    def parse_dyn_action(self, dynamic_action: Any) -> Callable[..., Any]:
        return actions.parse_dyn_action(
            dynamic_action,
            self.registries.actions,
            parse_dyn_variable=self.parse_dyn_variable,
            resolve_action=self.parse_dyn_action,
        )

    def resolve_state(self, state: Mapping[str, Any] | None) -> dict[str, Any]:
        return resolve_state(state, self.parse_dyn_variable)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, component: Any, key: Any = None) -> RenderedNode | None:
        """Render a component tree; None when the root type is not registered."""
        return render_component(
            component,
            key,
            components=self.registries.components,
            parse_dyn_action=self.parse_dyn_action,
            parse_dyn_variable=self.parse_dyn_variable,
            parse_dyn_style=self.parse_dyn_style,
            renderer=self.render,
        )
