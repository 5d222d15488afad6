"""
Tree renderer.

Walks a component description, resolves its style, hands the props to the
registered transform for its type and produces a ``RenderedNode`` tree.
Unknown component types render nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from dynui.registries import ComponentEntry, TransformContext, parsed_props_of
from dynui.specs import as_wire

RESERVED_FIELDS = ("type", "style", "children")


@dataclass
class RenderedNode:
    """One resolved component, ready for the host to draw."""

    element: Any
    props: dict[str, Any]
    children: list[RenderedNode] | None = None

    @property
    def key(self) -> Any:
        return self.props.get("key")

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view of the tree; callables are shown by name."""
        return {
            "element": _describe(self.element),
            "props": {name: _describe(value) for name, value in self.props.items()},
            "children": (
                None if self.children is None else [child.to_dict() for child in self.children]
            ),
        }


def _describe(value: Any) -> Any:
    if callable(value):
        return getattr(value, "__name__", repr(value))
    return value


def _lookup(components: Mapping[str, Any], component_type: Any) -> ComponentEntry | None:
    try:
        entry = components.get(component_type)
    except TypeError:
        return None
    if entry is None:
        return None
    return ComponentEntry.coerce(entry)


def render_component(
    component: Any,
    key: Any = None,
    *,
    components: Mapping[str, Any],
    parse_dyn_action: Callable[[Any], Callable[..., Any]],
    parse_dyn_variable: Callable[[Any], Any],
    parse_dyn_style: Callable[[Any], dict[str, Any]],
    renderer: Callable[..., RenderedNode | None],
) -> RenderedNode | None:
    """
    Render one component and, through ``renderer``, its children.

    Props are merged in order: original props, resolved style (under
    ``style``), the transform's parsed props, then ``key``. Children keep
    their list position as key; children that render nothing are left out.

    Args:
        component: Component description (dict or ComponentNode).
        key: Identity key for this node.
        components: Component registry, type -> ComponentEntry.
        parse_dyn_action: Action resolver passed to the transform.
        parse_dyn_variable: Variable resolver passed to the transform.
        parse_dyn_style: Style resolver, also passed to the transform.
        renderer: Callable used to render children (passed to the transform).

    Returns:
        The rendered node, or None for an unknown type.
    """
    component = as_wire(component)
    if not isinstance(component, Mapping):
        return None

    entry = _lookup(components, component.get("type"))
    if entry is None:
        return None

    original_props = {
        name: value for name, value in component.items() if name not in RESERVED_FIELDS
    }

    style = component.get("style")
    resolved_style = parse_dyn_style(style) if style is not None else None

    result = entry.transform(
        TransformContext(
            props=dict(original_props),
            component=dict(component),
            parse_dyn_action=parse_dyn_action,
            parse_dyn_variable=parse_dyn_variable,
            parse_dyn_style=parse_dyn_style,
            renderer=renderer,
        )
    )

    props = dict(original_props)
    if resolved_style is not None:
        props["style"] = resolved_style
    props.update(parsed_props_of(result))
    props["key"] = key

    children = component.get("children")
    rendered_children: list[RenderedNode] | None = None
    if isinstance(children, (list, tuple)):
        rendered_children = []
        for index, child in enumerate(children):
            node = renderer(child, index)
            if node is not None:
                rendered_children.append(node)

    return RenderedNode(element=entry.element, props=props, children=rendered_children)
