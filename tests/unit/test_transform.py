#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_transform.py
"""Unit tests for the DOM-to-view transform.

Tests cover:
- Comments, text and elements
- Newline formatting inside and outside preformatted tags
- Component dispatch and props delivery
- Unknown elements and undecodable text
- Order preservation and repeatability

"""

import logging

import pytest

from mdxview.components import Components
from mdxview.dom import DomComment, DomElement, DomText
from mdxview.exceptions import ComponentError
from mdxview.options import TransformOptions
from mdxview.transform import TreeTransformer, transform_node
from mdxview.view import Element, Empty, Fragment, LineBreak, Text


@pytest.mark.unit
class TestLeafNodes:
    """Tests for comments and text."""

    def test_comment_renders_nothing(self, transformer):
        """Test that comments become Empty."""
        assert transformer.transform(DomComment(" note ")) == Empty()

    def test_text_formatted(self, transformer):
        """Test that text newlines become breaks when formatting is on."""
        result = transformer.transform(DomText("a\nb"))

        assert result == Fragment([Text("a"), LineBreak(), Text("b")])

    def test_text_unformatted(self, transformer):
        """Test that text is copied when formatting is off."""
        assert transformer.transform(DomText("a\nb"), format_text=False) == Text("a\nb")

    def test_edge_newlines_literal(self, transformer):
        """Test that leading and trailing newlines stay literal."""
        assert transformer.transform(DomText("\na")) == Text("\na")
        assert transformer.transform(DomText("a\n")) == Text("a\n")

    def test_undecodable_text(self, transformer, caplog):
        """Test that text that cannot be encoded renders nothing."""
        with caplog.at_level(logging.WARNING, logger="mdxview.transform"):
            result = transformer.transform(DomText("bad \ud800 surrogate"))

        assert result == Empty()
        assert "not valid Unicode" in caplog.text

    def test_unsupported_node(self, transformer):
        """Test that non-DOM values are rejected."""
        with pytest.raises(TypeError):
            transformer.transform("<p>not a node</p>")


@pytest.mark.unit
class TestBuiltinElements:
    """Tests for elements mapped to built-in constructors."""

    def test_element_with_attributes(self, transformer):
        """Test an element with id, classes and other attributes."""
        node = DomElement("a", {"href": "/x", "id": "link", "class": "btn  primary"}, (DomText("go"),))

        result = transformer.transform(node)

        assert result == Element("a", {"id": "link", "href": "/x", "class": "btn primary"}, [Text("go")])

    def test_valueless_attribute_dropped(self, transformer):
        """Test that valueless attributes are not applied to built-in elements."""
        node = DomElement("input", {"type": "checkbox", "checked": None})

        result = transformer.transform(node)

        assert result == Element("input", {"type": "checkbox"}, void=True)

    def test_code_keeps_newlines(self, transformer):
        """Test that newlines inside code are preserved literally."""
        node = DomElement("code", {}, (DomText("x\ny"),))

        assert transformer.transform(node) == Element("code", {}, [Text("x\ny")])

    def test_paragraph_converts_newlines(self, transformer):
        """Test that a sibling paragraph converts its newline to a break."""
        nodes = [DomElement("code", {}, (DomText("x\ny"),)), DomElement("p", {}, (DomText("x\ny"),))]

        code, paragraph = transformer.transform_nodes(nodes)

        assert code.children == [Text("x\ny")]
        assert paragraph.children == [Fragment([Text("x"), LineBreak(), Text("y")])]

    def test_preformatting_inherited(self, transformer):
        """Test that formatting stays off for all descendants of pre."""
        node = DomElement("pre", {}, (DomElement("span", {}, (DomText("a\nb"),)),))

        result = transformer.transform(node)

        assert result == Element("pre", {}, [Element("span", {}, [Text("a\nb")])])

    def test_preformatting_ends_with_element(self, transformer):
        """Test that text after a code element is formatted again."""
        node = DomElement("p", {}, (DomElement("code", {}, (DomText("a\nb"),)), DomText("c\nd")))

        result = transformer.transform(node)

        assert result.children[0] == Element("code", {}, [Text("a\nb")])
        assert result.children[1] == Fragment([Text("c"), LineBreak(), Text("d")])

    def test_root_formatting_off(self, transformer):
        """Test that format_text=False applies to the whole subtree."""
        node = DomElement("p", {}, (DomText("a\nb"),))

        assert transformer.transform(node, format_text=False) == Element("p", {}, [Text("a\nb")])

    def test_custom_preformatted_tags(self):
        """Test configuring additional preformatted tags."""
        transformer = TreeTransformer(options=TransformOptions(preformatted_tags=frozenset({"textarea"})))

        textarea = transformer.transform(DomElement("textarea", {}, (DomText("a\nb"),)))
        code = transformer.transform(DomElement("code", {}, (DomText("a\nb"),)))

        assert textarea.children == [Text("a\nb")]
        assert code.children == [Fragment([Text("a"), LineBreak(), Text("b")])]

    def test_comment_child_is_empty(self, transformer):
        """Test that comments inside elements keep their position as Empty."""
        node = DomElement("div", {}, (DomText("a"), DomComment("c"), DomText("b")))

        assert transformer.transform(node).children == [Text("a"), Empty(), Text("b")]


@pytest.mark.unit
class TestUnknownElements:
    """Tests for tags that are neither components nor standard elements."""

    def test_unknown_renders_nothing(self, transformer, caplog):
        """Test that an unknown tag becomes Empty and is logged."""
        with caplog.at_level(logging.WARNING, logger="mdxview.transform"):
            result = transformer.transform(DomElement("foo-bar", {}, (DomText("text"),)))

        assert result == Empty()
        assert "foo-bar" in caplog.text

    def test_siblings_still_render(self, transformer):
        """Test that siblings of an unknown tag render normally."""
        node = DomElement(
            "div",
            {},
            (DomElement("span", {}, (DomText("a"),)), DomElement("foo-bar"), DomElement("span", {}, (DomText("b"),))),
        )

        result = transformer.transform(node)

        assert result.children == [
            Element("span", {}, [Text("a")]),
            Empty(),
            Element("span", {}, [Text("b")]),
        ]

    def test_case_differs_from_component(self, transformer, recorder):
        """Test that a lower-case tag does not match a capitalized component."""
        assert transformer.transform(DomElement("widget")) == Empty()
        assert recorder.calls == []


@pytest.mark.unit
class TestComponentDispatch:
    """Tests for elements handled by registered components."""

    def test_props_delivered(self, transformer, recorder):
        """Test that a component receives id, classes, attributes and children."""
        node = DomElement("Widget", {"id": "a", "class": "x y"}, (DomElement("span", {}, (DomText("hi"),)),))

        result = transformer.transform(node)

        assert len(recorder.calls) == 1
        props = recorder.calls[0]
        assert props.id == "a"
        assert props.classes == ["x", "y"]
        assert props.attributes == {"id": "a", "class": "x y"}
        assert props.children() == Fragment([Element("span", {}, [Text("hi")])])
        assert result == Element("section", {"data-component": "recorded"}, [props.children()])

    def test_children_match_builtin_path(self, transformer, recorder):
        """Test that component children equal the built-in rendering of the same nodes."""
        span = DomElement("span", {"class": "c"}, (DomText("one\ntwo"),))

        transformer.transform(DomElement("Widget", {}, (span,)))

        assert recorder.calls[0].children() == Fragment([transformer.transform(span)])

    def test_valueless_attribute_is_none(self, transformer, recorder):
        """Test that valueless attributes reach components as None."""
        transformer.transform(DomElement("Widget", {"open": None}))

        props = recorder.calls[0]
        assert props.attributes == {"open": None}
        assert props.has_attribute("open")

    def test_children_calls_share_nodes(self, transformer, recorder):
        """Test that each children call returns a new fragment over the same nodes."""
        transformer.transform(DomElement("Widget", {}, (DomElement("span", {}, (DomText("hi"),)),)))

        children = recorder.calls[0].children
        first, second = children(), children()

        assert first is not second
        assert first.children is not second.children
        assert first.children[0] is second.children[0]

    def test_children_formatting_follows_context(self, transformer, recorder):
        """Test that children inside pre are not formatted."""
        transformer.transform(DomElement("pre", {}, (DomElement("Widget", {}, (DomText("a\nb"),)),)))

        assert recorder.calls[0].children() == Fragment([Text("a\nb")])

    def test_component_shadows_builtin(self):
        """Test that a component registered under a standard tag takes precedence."""
        components = Components()
        components.add("p", lambda: Element("div", {"class": "para"}))

        result = TreeTransformer(components).transform(DomElement("p", {}, (DomText("x"),)))

        assert result == Element("div", {"class": "para"})

    def test_children_not_required(self):
        """Test that a component may ignore its children."""
        components = Components()
        components.add("Hidden", lambda: None)

        result = TreeTransformer(components).transform(DomElement("Hidden", {}, (DomText("secret"),)))

        assert result == Empty()

    def test_component_error_propagates(self):
        """Test that component failures abort the transform."""
        components = Components()
        components.add("Broken", lambda: 1 / 0)

        with pytest.raises(ComponentError):
            TreeTransformer(components).transform(DomElement("div", {}, (DomElement("Broken"),)))


@pytest.mark.unit
class TestTransformNodes:
    """Tests for transforming sequences of nodes."""

    def test_order_preserved(self, transformer):
        """Test that output order matches input order."""
        nodes = [DomElement("h1"), DomText("t"), DomComment(), DomElement("p")]

        result = transformer.transform_nodes(nodes)

        assert result == [Element("h1"), Text("t"), Empty(), Element("p")]

    def test_repeatable(self, transformer):
        """Test that transforming the same tree twice gives equal output."""
        node = DomElement("div", {"id": "r"}, (DomText("a\nb"), DomElement("Widget", {"class": "k"})))

        assert transformer.transform(node) == transformer.transform(node)

    def test_transform_node_function(self):
        """Test the module-level convenience function."""
        assert transform_node(DomElement("em", {}, (DomText("x"),))) == Element("em", {}, [Text("x")])


@pytest.mark.unit
class TestDeepNesting:
    """Tests for documents nested deeper than the interpreter's recursion limit."""

    def test_deeply_nested_elements(self, transformer):
        """Test transforming thousands of nested elements."""
        depth = 5000
        node = DomText("x")
        for _ in range(depth):
            node = DomElement("div", {}, (node,))

        result = transformer.transform(node)

        levels = 0
        while isinstance(result, Element):
            assert result.tag == "div"
            levels += 1
            result = result.children[0]
        assert levels == depth
        assert result == Text("x")

    def test_deep_component_children(self, transformer, recorder):
        """Test a component at the bottom of a deep tree."""
        node = DomElement("Widget", {"id": "deep"})
        for _ in range(3000):
            node = DomElement("span", {}, (node,))

        transformer.transform(node)

        assert [props.id for props in recorder.calls] == ["deep"]
