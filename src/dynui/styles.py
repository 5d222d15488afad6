"""
Dynamic style resolution.

A dynamic style maps style properties to selectors. Each selector starts
from its default (or the selector itself when it has none). When its root
names a style category, the style registry is consulted: by default the
registry is indexed with that provisional body; with ``by_root`` it is
indexed with the root. Literal (non-selector) entries are not carried into
the resolved style.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dynui.paths import get
from dynui.specs import as_wire
from dynui.variables import instance_of_selector


def _category(styles: Mapping[str, Any], name: Any) -> Any:
    try:
        return styles.get(name)
    except TypeError:
        return None


def parse_dyn_style(
    dynamic_style: Any,
    styles: Mapping[str, Any],
    *,
    by_root: bool = False,
) -> dict[str, Any]:
    """
    Resolve a dynamic style map into a flat property -> value map.

    Args:
        dynamic_style: Mapping of property name to selector (or literal).
        styles: Style registry, category id -> data tree.
        by_root: Index the registry by the selector's root (falling back to
            its default) instead of by the provisional body.

    Returns:
        Resolved style for every selector-valued property.
    """
    dynamic_style = as_wire(dynamic_style)
    if not isinstance(dynamic_style, Mapping):
        return {}

    final_style: dict[str, Any] = {}
    for prop, value in dynamic_style.items():
        value = as_wire(value)
        if not instance_of_selector(value):
            continue

        default = value.get("default")
        body = default if default is not None else value
        root = value.get("root")

        if isinstance(root, str) and root in styles:
            if by_root:
                found = get(styles[root], value.get("keys"), default)
                body = default if found is None else found
            else:
                body = get(_category(styles, body), value.get("keys"))

        final_style[prop] = body

    return final_style
