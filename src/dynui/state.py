"""State maps whose values may be dynamic variables."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from dynui.specs import as_wire
from dynui.variables import is_dynamic_variable


def resolve_state(
    state: Mapping[str, Any] | None,
    parse_dyn_variable: Callable[[Any], Any],
) -> dict[str, Any]:
    """Resolve every dynamic-variable value in ``state``; copy the rest as-is."""
    if not state:
        return {}

    final_state: dict[str, Any] = {}
    for key, value in state.items():
        if is_dynamic_variable(as_wire(value)):
            final_state[key] = parse_dyn_variable(value)
        else:
            final_state[key] = value
    return final_state
