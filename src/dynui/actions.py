"""
Dynamic action resolution.

Looks up an action descriptor's name in the action registry and lets the
registered factory build the callable. Factories receive the variable
resolver and the action resolver itself so they can resolve their payload
and chain into ``onSuccess``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from dynui.registries import ActionContext, ActionFactory
from dynui.specs import as_wire

logger = logging.getLogger(__name__)


def noop(*args: Any, **kwargs: Any) -> None:
    """Handler for unknown actions: accepts anything, does nothing."""
    return None


def parse_dyn_action(
    dynamic_action: Any,
    actions: Mapping[str, ActionFactory],
    *,
    parse_dyn_variable: Callable[[Any], Any],
    resolve_action: Callable[[Any], Callable[..., Any]] | None = None,
) -> Callable[..., Any]:
    """
    Build the callable for an action descriptor.

    Args:
        dynamic_action: ``{"name": ..., "payload": ..., "onSuccess": ...}``
            (or an ActionDescriptor).
        actions: Action registry, name -> factory.
        parse_dyn_variable: Variable resolver handed to the factory.
        resolve_action: Action resolver handed to the factory; defaults to
            this function bound to the same registry.

    Returns:
        The factory's callable, or ``noop`` when the name is not registered.
    """
    descriptor = as_wire(dynamic_action)
    if not isinstance(descriptor, Mapping):
        return noop

    name = descriptor.get("name")
    try:
        factory = actions.get(name)
    except TypeError:
        return noop
    if factory is None:
        return noop

    if resolve_action is None:
        resolve_action = partial(
            parse_dyn_action, actions=actions, parse_dyn_variable=parse_dyn_variable
        )

    context = ActionContext(
        dynamic_action=dict(descriptor),
        parse_dyn_variable=parse_dyn_variable,
        parse_dyn_action=resolve_action,
    )
    try:
        handler = factory(context)
    except Exception:
        logger.exception("Action factory for %r failed, falling back to no-op", name)
        return noop

    if not callable(handler):
        logger.debug("Action factory for %r returned non-callable %r", name, handler)
        return noop
    return handler
