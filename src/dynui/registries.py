"""
Capability registries consulted by the engine.

Four independent key -> capability tables:

- variables: namespace id (``@state``, ``@props``, ...) -> data tree
- styles: style category id (``colors``, ``fonts``, ...) -> data tree
- actions: action name -> factory ``(ActionContext) -> callable``
- components: component type -> ``ComponentEntry``

Registries are filled by setup code and only ever grow: ``merge`` adds new
keys and overwrites existing ones, it never removes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionContext:
    """Services handed to an action factory."""

    dynamic_action: dict[str, Any]
    parse_dyn_variable: Callable[[Any], Any]
    parse_dyn_action: Callable[[Any], Callable[..., Any]]

    @property
    def payload(self) -> dict[str, Any]:
        """The action's payload, or an empty dict."""
        return self.dynamic_action.get("payload") or {}

    @property
    def on_success(self) -> dict[str, Any] | None:
        return self.dynamic_action.get("onSuccess")


@dataclass(frozen=True)
class TransformContext:
    """Services handed to a component transform."""

    props: dict[str, Any]
    component: dict[str, Any]
    parse_dyn_action: Callable[[Any], Callable[..., Any]]
    parse_dyn_variable: Callable[[Any], Any]
    parse_dyn_style: Callable[[Any], dict[str, Any]]
    renderer: Callable[..., Any]


@dataclass
class TransformResult:
    """
    What a transform returns: props to merge over the originals.

    ``use_style`` is accepted for compatibility with existing transforms and
    ignored by the renderer; the node's style is always resolved.
    """

    parsed_props: dict[str, Any] = field(default_factory=dict)
    use_style: bool | None = None


ActionFactory = Callable[[ActionContext], Callable[..., Any]]
Transform = Callable[[TransformContext], "TransformResult | Mapping[str, Any]"]


def _identity_transform(context: TransformContext) -> TransformResult:
    return TransformResult()


@dataclass
class ComponentEntry:
    """
    Registry entry for one component type.

    ``element`` is whatever the host renders (a tag name, a class, a
    callable). ``transform`` converts raw props to final props.
    """

    element: Any
    transform: Transform = _identity_transform

    @classmethod
    def coerce(cls, value: Any) -> ComponentEntry:
        """Accept a ComponentEntry or a mapping with ``element``/``transform``."""
        if isinstance(value, ComponentEntry):
            return value
        if isinstance(value, Mapping):
            return cls(
                element=value.get("element"),
                transform=value.get("transform") or _identity_transform,
            )
        raise TypeError(f"Cannot use {value!r} as a component registry entry")


def parsed_props_of(result: Any) -> dict[str, Any]:
    """Extract ``parsed_props`` from a transform result (object or mapping)."""
    if isinstance(result, TransformResult):
        return dict(result.parsed_props)
    if isinstance(result, Mapping):
        props = result.get("parsed_props", result.get("parsedProps"))
        return dict(props or {})
    return {}


@dataclass
class Registries:
    """The four capability tables owned by one engine."""

    variables: dict[str, Any] = field(default_factory=dict)
    styles: dict[str, Any] = field(default_factory=dict)
    actions: dict[str, ActionFactory] = field(default_factory=dict)
    components: dict[str, ComponentEntry] = field(default_factory=dict)

    def merge(
        self,
        *,
        variables: Mapping[str, Any] | None = None,
        styles: Mapping[str, Any] | None = None,
        actions: Mapping[str, ActionFactory] | None = None,
        components: Mapping[str, Any] | None = None,
    ) -> None:
        """Add entries to the registries, overwriting existing keys."""
        if variables:
            self.variables.update(variables)
        if styles:
            self.styles.update(styles)
        if actions:
            self.actions.update(actions)
        if components:
            self.components.update(
                {name: ComponentEntry.coerce(entry) for name, entry in components.items()}
            )
        logger.debug(
            "Registries merged: %d variables, %d styles, %d actions, %d components",
            len(self.variables),
            len(self.styles),
            len(self.actions),
            len(self.components),
        )

    @property
    def is_initialized(self) -> bool:
        """True once at least one component type is registered."""
        return bool(self.components)
