"""
Static HTML preview of rendered trees.

Serializes a ``RenderedNode`` tree to escaped markup for debugging and
snapshot tests. String elements become tags; callable elements are called
with ``(props, children_markup)`` and their return value is inserted
(escaped unless it is already ``Markup``).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from markupsafe import Markup, escape

from dynui.formatting import to_string
from dynui.renderer import RenderedNode

VOID_ELEMENTS = frozenset({"area", "br", "col", "hr", "img", "input", "link", "meta", "source"})

_SKIPPED_PROPS = frozenset({"key", "children"})

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def kebab_case(name: str) -> str:
    """``backgroundColor`` / ``background_color`` -> ``background-color``."""
    return _CAMEL_RE.sub("-", name).replace("_", "-").lower()


def style_to_css(style: Mapping[str, Any]) -> str:
    """Inline CSS for a resolved style dict; None values are skipped."""
    return "; ".join(
        f"{kebab_case(name)}: {to_string(value)}"
        for name, value in style.items()
        if value is not None
    )


def _attributes(props: Mapping[str, Any]) -> Markup:
    parts: list[Markup] = []
    for name, value in props.items():
        if name in _SKIPPED_PROPS or value is None or value is False or callable(value):
            continue
        if name == "className":
            name = "class"
        if name == "style" and isinstance(value, Mapping):
            value = style_to_css(value)
        if value is True:
            parts.append(escape(name))
        else:
            parts.append(Markup('{}="{}"').format(name, to_string(value)))
    return Markup(" ").join(parts)


def render_html(node: RenderedNode | None) -> Markup:
    """Render a node (and its children) to HTML."""
    if node is None:
        return Markup("")

    if node.children is not None:
        inner = Markup("").join(render_html(child) for child in node.children)
    else:
        # Without a child list the props may carry text content
        inner = escape(to_string(node.props.get("children")))

    element = node.element
    if callable(element):
        return escape(element(node.props, inner))

    tag = to_string(element) or "div"
    attrs = _attributes(node.props)
    opening = Markup("<{} {}>").format(tag, attrs) if attrs else Markup("<{}>").format(tag)
    if tag in VOID_ELEMENTS:
        return opening
    return opening + inner + Markup("</{}>").format(tag)
