"""
Dynamic variable resolution.

A dynamic variable is a non-empty list of selectors. Each selector level
resolves to a body; bodies are folded through a two-state accumulator:

- ``Collecting``: primitive bodies are appended to the result list.
- ``Pending``: an object body is held so the next level's body indexes
  into it instead of being appended.

The final value is the single result unwrapped, several results joined
as text, or None when nothing resolved.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from dynui.errors import SelectorError
from dynui.formatting import format_value, to_string
from dynui.paths import get
from dynui.specs import Selector, as_wire


def instance_of_selector(value: Any) -> bool:
    """True for a selector model or a mapping carrying both ``root`` and ``keys``."""
    if isinstance(value, Selector):
        return True
    return isinstance(value, Mapping) and "root" in value and "keys" in value


def is_dynamic_variable(value: Any) -> bool:
    """True for a non-empty list whose every element is a selector."""
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and all(instance_of_selector(level) for level in value)
    )


def _is_object(value: Any) -> bool:
    return value is not None and not isinstance(value, (str, int, float, bool))


def _is_text_or_number(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


# =============================================================================
# Accumulator
# =============================================================================


@dataclass(frozen=True)
class Collecting:
    results: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Pending:
    results: tuple[Any, ...]
    pending: Any


AccumulatorState = Collecting | Pending


def step(state: AccumulatorState, body: Any) -> AccumulatorState:
    """Fold one resolved level body into the accumulator."""
    if body is None:
        return state

    if _is_object(body):
        return Pending(state.results, body)

    if isinstance(state, Pending):
        found = get(state.pending, body, state.pending)
        if _is_object(found):
            return Pending(state.results, found)
        if found:
            return Collecting(state.results + (found,))
        return state

    return Collecting(state.results + (body,))


def finish(state: AccumulatorState) -> Any:
    """Combine the accumulated results into the final value."""
    results = state.results
    if isinstance(state, Pending):
        results = results + (state.pending,)

    if len(results) > 1:
        return "".join(to_string(result) for result in results)
    if results:
        return results[0]
    return None


# =============================================================================
# Levels
# =============================================================================


def resolve_level_body(level: Mapping[str, Any], variables: Mapping[str, Any]) -> Any:
    """Resolve the raw body of one selector level against the variable registry."""
    root = level.get("root")
    default = level.get("default")

    if isinstance(root, str) and root in variables:
        if "keys" in level:
            found = get(variables[root], level["keys"], default)
            return default if found is None else found
        if default:
            return default
        return variables[root]

    if root is None:
        return level.get("keys")

    return None


def apply_level_format(
    level: Mapping[str, Any],
    body: Any,
    *,
    use_24h_clock: bool = False,
    now: datetime | None = None,
) -> Any:
    """Apply ``format`` then ``prefix``/``suffix`` to a text or number body."""
    if not _is_text_or_number(body):
        return body

    if level.get("format"):
        body = format_value(body, level["format"], use_24h_clock=use_24h_clock, now=now)
        if not _is_text_or_number(body):
            return body

    if level.get("prefix"):
        body = to_string(level["prefix"]) + to_string(body)
    if level.get("suffix"):
        body = to_string(body) + to_string(level["suffix"])
    return body


def parse_dyn_variable(
    dynamic_variable: Any,
    variables: Mapping[str, Any],
    *,
    use_24h_clock: bool = False,
    now: datetime | None = None,
) -> Any:
    """
    Resolve a dynamic variable to a concrete value.

    Anything that is not a list of selectors is returned unchanged, so
    callers can pass literal values and dynamic variables alike.

    Args:
        dynamic_variable: List of selector levels (dicts or Selector models).
        variables: Variable registry, namespace id -> data tree.
        use_24h_clock: Clock style for the ``time`` format.
        now: Reference time for ``time``/``timeago`` formats.

    Returns:
        The resolved value.

    Raises:
        SelectorError: If a list mixes selectors with non-selector levels.
    """
    levels = as_wire(dynamic_variable)
    if not isinstance(levels, (list, tuple)) or not levels:
        return dynamic_variable
    if not any(instance_of_selector(level) for level in levels):
        return dynamic_variable

    state: AccumulatorState = Collecting()
    for level in levels:
        if not instance_of_selector(level):
            raise SelectorError(level, context=levels)
        body = resolve_level_body(level, variables)
        body = apply_level_format(level, body, use_24h_clock=use_24h_clock, now=now)
        state = step(state, body)

    return finish(state)
