"""
Typed descriptor models for dynui documents.

The engine works on plain data (dicts and lists, as loaded from JSON).
These models let host code build or validate descriptors in Python and
convert them back to the wire form with ``to_wire()``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Selectors
# =============================================================================

FormatKind = Literal["time", "timeago", "toInt", "toString"]


class Selector(BaseModel):
    """
    One resolution step: a namespace root, a path and optional formatting.

    Example:
        Selector(root="@state", keys="user.name", default="Guest")
        Selector(root=None, keys="literal text", suffix="!")
        Selector(root="@props", keys="createdAt", format="timeago")
    """

    model_config = ConfigDict(frozen=True)

    root: str | None = Field(description="Namespace id, or None when keys is a literal")
    keys: Any = Field(description="Path into the namespace (or the literal value)")
    default: Any = Field(default=None, description="Fallback when the path is missing")
    prefix: str | None = Field(default=None, description="Text prepended to primitive results")
    suffix: str | None = Field(default=None, description="Text appended to primitive results")
    format: FormatKind | None = Field(default=None, description="Formatting applied before affixes")

    @classmethod
    def literal(cls, value: Any, **kwargs: Any) -> Selector:
        """Selector whose value is ``value`` itself."""
        return cls(root=None, keys=value, **kwargs)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


def dynamic_variable(*levels: Selector) -> list[dict[str, Any]]:
    """Build the wire form of a dynamic variable from selectors."""
    return [level.to_wire() for level in levels]


# =============================================================================
# Actions
# =============================================================================


class ActionDescriptor(BaseModel):
    """
    Declarative action: a registered action name plus its data.

    Example:
        ActionDescriptor(
            name="setState",
            payload={"selected": [{"root": "@props", "keys": "id"}]},
            on_success=ActionDescriptor(name="continue"),
        )
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    name: str = Field(description="Action id registered in the action registry")
    payload: dict[str, Any] | None = Field(default=None, description="Action payload")
    on_success: ActionDescriptor | None = Field(
        default=None, alias="onSuccess", description="Follow-up action"
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


# =============================================================================
# Components
# =============================================================================


class ComponentNode(BaseModel):
    """
    Component description: a registered type, dynamic style, props and children.

    Any extra field is a prop.

    Example:
        ComponentNode(
            type="Text",
            style={"color": {"root": "colors", "keys": "primary", "default": "colors"}},
            text=[{"root": "@state", "keys": "greeting"}],
            children=[ComponentNode(type="Icon", name="star")],
        )
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str = Field(description="Component type id")
    style: dict[str, Any] | None = Field(default=None, description="Dynamic style map")
    children: list[ComponentNode] | None = Field(default=None, description="Child components")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


ActionDescriptor.model_rebuild()
ComponentNode.model_rebuild()


def as_wire(value: Any) -> Any:
    """Convert models (or lists of models) to their plain wire form."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_unset=True)
    if isinstance(value, (list, tuple)) and any(isinstance(item, BaseModel) for item in value):
        return [as_wire(item) for item in value]
    return value
