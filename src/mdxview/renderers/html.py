#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/renderers/html.py
"""View tree to HTML string renderer.

This is the reference host rendering layer: it serializes the nodes built
by the transform so a view tree can be served, compared or inspected.

Text inside ``script`` and ``style`` elements is written unescaped.
Attribute names that cannot be written as HTML are dropped with a warning.

"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from typing import Union

from mdxview.constants import RAW_TEXT_ELEMENTS
from mdxview.options.html import HtmlRendererOptions
from mdxview.renderers.base import BaseRenderer
from mdxview.view.nodes import Element, Empty, Fragment, LineBreak, Text, ViewNode
from mdxview.view.visitors import ViewVisitor

logger = logging.getLogger(__name__)

_ATTRIBUTE_NAME_RE = re.compile(r"[^\s\"'>/=\x00-\x1f\x7f]+")


@dataclass(frozen=True)
class _EndTag:
    markup: str
    raw_text: bool


class HtmlRenderer(ViewVisitor, BaseRenderer):
    """Render a view tree to an HTML string.

    The tree is walked with an explicit stack, so nesting depth is not
    bounded by the interpreter's recursion limit.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from mdxview.view import Element, Text
        >>> HtmlRenderer().render_to_string(Element("p", {"class": "lead"}, [Text("a < b")]))
        '<p class="lead">a &lt; b</p>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._pending: list[Union[ViewNode, _EndTag]] = []
        self._raw_text_depth = 0

    def render_to_string(self, view: ViewNode) -> str:
        """Render a view tree to HTML.

        Parameters
        ----------
        view : ViewNode
            Root of the view tree

        Returns
        -------
        str
            HTML markup

        """
        self._output = []
        self._pending = [view]
        self._raw_text_depth = 0

        while self._pending:
            item = self._pending.pop()
            if isinstance(item, _EndTag):
                self._output.append(item.markup)
                if item.raw_text:
                    self._raw_text_depth -= 1
            else:
                item.accept(self)

        return "".join(self._output)

    def visit_empty(self, node: Empty) -> None:
        """Render nothing."""

    def visit_text(self, node: Text) -> None:
        """Render text, escaped unless escaping is disabled or inside script/style."""
        if self.options.escape_text and not self._raw_text_depth:
            self._output.append(html.escape(node.content, quote=False))
        else:
            self._output.append(node.content)

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a line break."""
        self._output.append("<br />" if self.options.self_closing_void else "<br>")

    def visit_element(self, node: Element) -> None:
        """Render an element's start tag and queue its children and end tag."""
        attrs = "".join(
            f' {name}="{html.escape(value, quote=True)}"'
            for name, value in node.attributes.items()
            if self._valid_attribute_name(name, node.tag)
        )

        if node.void:
            if node.children:
                logger.debug("Dropping %d children of void element <%s>", len(node.children), node.tag)
            self._output.append(f"<{node.tag}{attrs} />" if self.options.self_closing_void else f"<{node.tag}{attrs}>")
            return

        self._output.append(f"<{node.tag}{attrs}>")

        raw_text = node.tag in RAW_TEXT_ELEMENTS
        if raw_text:
            self._raw_text_depth += 1
        self._pending.append(_EndTag(markup=f"</{node.tag}>", raw_text=raw_text))
        self._pending.extend(reversed(node.children))

    def visit_fragment(self, node: Fragment) -> None:
        """Queue each child in order."""
        self._pending.extend(reversed(node.children))

    @staticmethod
    def _valid_attribute_name(name: str, tag: str) -> bool:
        if _ATTRIBUTE_NAME_RE.fullmatch(name):
            return True
        logger.warning("Dropping attribute %r on <%s>: not a valid attribute name", name, tag)
        return False
