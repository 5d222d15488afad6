"""Tests for the tree renderer."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from dynui import (
    ComponentEntry,
    ComponentNode,
    Engine,
    RenderedNode,
    TransformContext,
    TransformResult,
)

PRIMARY = {"root": "colors", "keys": "primary", "default": "colors"}


def text_transform(context: TransformContext) -> TransformResult:
    return TransformResult(parsed_props={"text": context.parse_dyn_variable(context.props.get("text"))})


def button_transform(context: TransformContext) -> TransformResult:
    return TransformResult(parsed_props={"on_click": context.parse_dyn_action(context.props.get("action"))})


@pytest.fixture
def captured() -> list[TransformContext]:
    return []


@pytest.fixture
def clicks() -> list[Any]:
    return []


@pytest.fixture
def ui_engine(engine: Engine, captured: list[TransformContext], clicks: list[Any]) -> Engine:
    def capture(context: TransformContext) -> TransformResult:
        captured.append(context)
        return TransformResult()

    engine.setup(
        components={
            "Box": ComponentEntry(element="div"),
            "Text": ComponentEntry(element="span", transform=text_transform),
            "Button": ComponentEntry(element="button", transform=button_transform),
            "Capture": ComponentEntry(element="section", transform=capture),
            "Paint": ComponentEntry(
                element="div",
                transform=lambda context: TransformResult(parsed_props={"color": "red"}),
            ),
            "Legacy": {
                "element": "p",
                "transform": lambda context: {"parsedProps": {"legacy": True}},
            },
        },
        actions={"click": lambda context: lambda: clicks.append(context.dynamic_action)},
    )
    return engine


class TestRender:
    def test_unknown_type_renders_nothing(self, ui_engine: Engine) -> None:
        assert ui_engine.render({"type": "Marquee", "text": "x"}) is None

    @pytest.mark.parametrize("component", [None, "Box", 3, {"style": {}}])
    def test_malformed_component_renders_nothing(self, ui_engine: Engine, component: Any) -> None:
        assert ui_engine.render(component) is None

    def test_basic_node(self, ui_engine: Engine) -> None:
        node = ui_engine.render({"type": "Box", "id": "main"})
        assert isinstance(node, RenderedNode)
        assert node.element == "div"
        assert node.props == {"id": "main", "key": None}
        assert node.children is None

    def test_key_is_set(self, ui_engine: Engine) -> None:
        node = ui_engine.render({"type": "Box"}, key="root")
        assert node.key == "root"
        assert node.props["key"] == "root"

    def test_transform_resolves_props(self, ui_engine: Engine) -> None:
        node = ui_engine.render({"type": "Text", "text": [{"root": "@state", "keys": "greeting"}]})
        assert node.props["text"] == "Hello"

    def test_style_resolved(self, ui_engine: Engine) -> None:
        node = ui_engine.render(
            {
                "type": "Box",
                "style": {"color": PRIMARY, "padding": 8},
            }
        )
        assert node.props["style"] == {"color": "#0066cc"}

    def test_use_style_flag_is_ignored(self, engine: Engine) -> None:
        engine.setup(
            components={
                "Plain": ComponentEntry(
                    element="div", transform=lambda context: TransformResult(use_style=False)
                )
            }
        )
        node = engine.render({"type": "Plain", "style": {"color": PRIMARY}})
        assert node.props["style"] == {"color": "#0066cc"}

    def test_no_style_key_without_style(self, ui_engine: Engine) -> None:
        assert "style" not in ui_engine.render({"type": "Box"}).props

    def test_mapping_entry_and_result(self, ui_engine: Engine) -> None:
        node = ui_engine.render({"type": "Legacy"})
        assert node.element == "p"
        assert node.props["legacy"] is True


class TestMergePrecedence:
    def test_parsed_props_override_original(self, ui_engine: Engine) -> None:
        node = ui_engine.render({"type": "Paint", "color": "blue"})
        assert node.props["color"] == "red"

    def test_parsed_style_overrides_resolved_style(self, ui_engine: Engine) -> None:
        ui_engine.setup(
            components={
                "Override": ComponentEntry(
                    element="div",
                    transform=lambda context: TransformResult(
                        parsed_props={"style": {"color": "green"}}
                    ),
                )
            }
        )
        node = ui_engine.render(
            {"type": "Override", "style": {"color": PRIMARY}}
        )
        assert node.props["style"] == {"color": "green"}

    def test_key_overrides_everything(self, ui_engine: Engine) -> None:
        node = ui_engine.render({"type": "Box", "key": "from-props"}, key=4)
        assert node.props["key"] == 4


class TestTransformContext:
    def test_context_contents(self, ui_engine: Engine, captured: list[TransformContext]) -> None:
        component = {
            "type": "Capture",
            "style": {"color": PRIMARY},
            "children": [],
            "title": "t",
        }
        ui_engine.render(component)
        (context,) = captured
        assert context.props == {"title": "t"}
        assert context.component == component
        assert context.renderer == ui_engine.render
        assert context.parse_dyn_style(component["style"]) == {"color": "#0066cc"}
        assert context.parse_dyn_variable([{"root": None, "keys": "x"}]) == "x"

    def test_transform_builds_action_handler(self, ui_engine: Engine, clicks: list[Any]) -> None:
        node = ui_engine.render({"type": "Button", "action": {"name": "click", "id": 1}})
        node.props["on_click"]()
        assert clicks == [{"name": "click", "id": 1}]

    def test_unknown_action_prop_is_noop(self, ui_engine: Engine) -> None:
        node = ui_engine.render({"type": "Button", "action": {"name": "nope"}})
        assert node.props["on_click"]() is None

    def test_input_not_mutated(self, ui_engine: Engine) -> None:
        component = {
            "type": "Box",
            "style": {"color": PRIMARY},
            "children": [{"type": "Text", "text": [{"root": "@state", "keys": "name"}]}],
        }
        snapshot = copy.deepcopy(component)
        ui_engine.render(component)
        assert component == snapshot


class TestChildren:
    def test_children_keyed_by_position(self, ui_engine: Engine) -> None:
        node = ui_engine.render(
            {
                "type": "Box",
                "children": [
                    {"type": "Text", "text": "a"},
                    {"type": "Marquee"},
                    {"type": "Text", "text": "c"},
                ],
            }
        )
        assert [child.key for child in node.children] == [0, 2]
        assert [child.props["text"] for child in node.children] == ["a", "c"]

    def test_empty_children(self, ui_engine: Engine) -> None:
        assert ui_engine.render({"type": "Box", "children": []}).children == []

    def test_nested_tree(self, ui_engine: Engine) -> None:
        node = ui_engine.render(
            {
                "type": "Box",
                "children": [
                    {
                        "type": "Box",
                        "children": [{"type": "Text", "text": [{"root": "@state", "keys": "name"}]}],
                    }
                ],
            }
        )
        assert node.children[0].children[0].props["text"] == "World"

    def test_component_node_model(self, ui_engine: Engine) -> None:
        tree = ComponentNode(
            type="Box",
            style={"gap": {"root": "dimensions", "keys": "gutter", "default": "dimensions"}},
            children=[ComponentNode(type="Text", text="hi")],
        )
        node = ui_engine.render(tree)
        assert node.props["style"] == {"gap": 16}
        assert node.children[0].props["text"] == "hi"


class TestToDict:
    def test_callables_described_by_name(self, ui_engine: Engine) -> None:
        node = ui_engine.render(
            {"type": "Box", "children": [{"type": "Button", "action": {"name": "unknown"}}]}
        )
        data = node.to_dict()
        assert data["element"] == "div"
        assert data["children"][0]["props"]["on_click"] == "noop"
        assert data["children"][0]["children"] is None
