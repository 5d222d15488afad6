"""
dynui - declarative UI interpreter.

Resolves serialized, data-only UI descriptions against live data:

- Selectors / dynamic variables: symbolic references into state, props,
  variables and environment namespaces
- Dynamic styles: style properties resolved from style categories
- Dynamic actions: action descriptors turned into callables
- Tree renderer: component descriptions turned into RenderedNode trees
  through per-type transforms
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from dynui.config import RendererConfig, configure_logging, load_config, load_manifest
from dynui.engine import Engine
from dynui.errors import ConfigError, DynUIError, SelectorError
from dynui.paths import get
from dynui.registries import (
    ActionContext,
    ComponentEntry,
    Registries,
    TransformContext,
    TransformResult,
)
from dynui.renderer import RenderedNode
from dynui.runtime import (
    RendererHandle,
    get_default_engine,
    parse_dyn_action,
    parse_dyn_style,
    parse_dyn_variable,
    renderer,
    reset_default_engine,
    resolve_state,
    setup_renderer,
    use_renderer,
    use_state_resolver,
)
from dynui.specs import ActionDescriptor, ComponentNode, Selector, dynamic_variable
from dynui.variables import instance_of_selector, is_dynamic_variable

try:
    __version__ = _metadata_version("dynui")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # Engine
    "Engine",
    "Registries",
    "ComponentEntry",
    "ActionContext",
    "TransformContext",
    "TransformResult",
    "RenderedNode",
    # Default engine
    "RendererHandle",
    "get_default_engine",
    "reset_default_engine",
    "setup_renderer",
    "use_renderer",
    "parse_dyn_variable",
    "parse_dyn_style",
    "parse_dyn_action",
    "resolve_state",
    "use_state_resolver",
    "renderer",
    # Descriptors
    "Selector",
    "ActionDescriptor",
    "ComponentNode",
    "dynamic_variable",
    "instance_of_selector",
    "is_dynamic_variable",
    "get",
    # Config and errors
    "RendererConfig",
    "load_config",
    "load_manifest",
    "configure_logging",
    "DynUIError",
    "SelectorError",
    "ConfigError",
]
