"""
Process-wide default engine and the setup entry points.

Hosts that only ever need one engine can use these functions instead of
passing an ``Engine`` around:

    setup_renderer({"Text": ComponentEntry(element="span")})
    handle = use_renderer(variable_map={"@state": state}, action_map=ACTIONS)
    if handle.error:
        ...
    node = handle.renderer(document)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from dynui.engine import Engine
from dynui.registries import ActionFactory
from dynui.renderer import RenderedNode

NOT_INITIALIZED_ERROR = "You must call setup_renderer() before using the renderer."

# Module-level singleton
_engine: Engine | None = None


def get_default_engine() -> Engine:
    """Get the shared engine (lazy singleton)."""
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


def reset_default_engine(engine: Engine | None = None) -> Engine:
    """Replace the shared engine, by default with a fresh empty one."""
    global _engine
    _engine = engine if engine is not None else Engine()
    return _engine


@dataclass
class RendererHandle:
    """Result of ``use_renderer``: either an error message or a render callable."""

    error: str | None = None
    renderer: Callable[..., RenderedNode | None] | None = None


def setup_renderer(component_map: Mapping[str, Any]) -> None:
    """Install component types into the shared engine."""
    get_default_engine().setup(components=component_map)


def use_renderer(
    variable_map: Mapping[str, Any] | None = None,
    action_map: Mapping[str, ActionFactory] | None = None,
    style_map: Mapping[str, Any] | None = None,
) -> RendererHandle:
    """
    Merge the data registries and hand out the shared renderer.

    Reports an error instead of raising when ``setup_renderer`` has not
    installed any component type yet.
    """
    engine = get_default_engine()
    if not engine.is_initialized:
        return RendererHandle(error=NOT_INITIALIZED_ERROR)

    engine.setup(variables=variable_map, actions=action_map, styles=style_map)
    return RendererHandle(renderer=engine.render)


def parse_dyn_variable(dynamic_variable: Any) -> Any:
    return get_default_engine().parse_dyn_variable(dynamic_variable)


def parse_dyn_style(dynamic_style: Any) -> dict[str, Any]:
    return get_default_engine().parse_dyn_style(dynamic_style)


def parse_dyn_action(dynamic_action: Any) -> Callable[..., Any]:
    return get_default_engine().parse_dyn_action(dynamic_action)


def resolve_state(state: Mapping[str, Any] | None) -> dict[str, Any]:
    return get_default_engine().resolve_state(state)


use_state_resolver = resolve_state


def renderer(component: Any, key: Any = None) -> RenderedNode | None:
    return get_default_engine().render(component, key)
