#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/transform.py
"""DOM tree to view tree transform.

Every DOM node becomes exactly one view node:

- comments render nothing
- text is copied, with newline formatting applied outside preformatted tags
- elements are first checked against the registered components, then
  against the built-in element table; anything else renders nothing and is
  logged

Children are always transformed before their parent is dispatched, so a
component receives children that were formatted for the context they sit
in. Unknown elements and undecodable text never abort a render.

"""

from __future__ import annotations

import logging
from typing import Iterable

from mdxview.attributes import extract_attributes
from mdxview.components import ComponentProps, Components
from mdxview.dom import DomComment, DomElement, DomNode, DomText
from mdxview.options.transform import TransformOptions
from mdxview.utils.text import format_newlines
from mdxview.view.elements import build_element, lookup_element
from mdxview.view.nodes import Empty, Fragment, Text, ViewNode

logger = logging.getLogger(__name__)


class TreeTransformer:
    """Transform DOM nodes into view nodes.

    The transformer keeps no state between calls; it only holds read-only
    references to the registry and options, so one instance can serve any
    number of renders.

    Parameters
    ----------
    components : Components or None, default = None
        Registered components; None means no tag is intercepted
    options : TransformOptions or None, default = None
        Transform options

    """

    def __init__(self, components: Components | None = None, options: TransformOptions | None = None):
        """Initialize the transformer with a registry and options."""
        self.components = components if components is not None else Components()
        self.options = options or TransformOptions()

    def transform(self, node: DomNode, format_text: bool = True) -> ViewNode:
        """Transform one DOM node and its subtree.

        Parameters
        ----------
        node : DomNode
            Node to transform
        format_text : bool, default True
            Whether newline formatting is active for this node

        Returns
        -------
        ViewNode
            The view node for ``node``

        """
        return self.transform_nodes([node], format_text)[0]

    def transform_nodes(self, nodes: Iterable[DomNode], format_text: bool = True) -> list[ViewNode]:
        """Transform a sequence of sibling nodes in document order.

        The tree is walked with an explicit stack, so nesting depth is not
        bounded by the interpreter's recursion limit.

        Parameters
        ----------
        nodes : iterable of DomNode
            Sibling nodes
        format_text : bool, default True
            Whether newline formatting is active for these nodes

        Returns
        -------
        list of ViewNode
            One view node per input node, in the same order

        Raises
        ------
        TypeError
            If a node is not a DOM node

        """
        # Entries are (node, format_text, children_done). Finished views are
        # pushed onto ``views``; an element's children are the last
        # len(children) entries when the element is revisited.
        stack: list[tuple[DomNode, bool, bool]] = [(node, format_text, False) for node in reversed(list(nodes))]
        views: list[ViewNode] = []

        while stack:
            node, fmt, children_done = stack.pop()

            if isinstance(node, DomComment):
                views.append(Empty())
            elif isinstance(node, DomText):
                views.append(self._transform_text(node, fmt))
            elif isinstance(node, DomElement):
                if children_done:
                    count = len(node.children)
                    child_views = views[len(views) - count :]
                    del views[len(views) - count :]
                    views.append(self._transform_element(node, child_views))
                else:
                    child_format = False if node.tag_name in self.options.preformatted_tags else fmt
                    stack.append((node, fmt, True))
                    stack.extend((child, child_format, False) for child in reversed(node.children))
            else:
                raise TypeError(f"Expected a DOM node, got {type(node).__name__}")

        return views

    def _transform_text(self, node: DomText, format_text: bool) -> ViewNode:
        content = node.content
        try:
            content.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.warning("Skipping text that is not valid Unicode: %s", e)
            return Empty()

        if format_text:
            return format_newlines(content)
        return Text(content=content)

    def _transform_element(self, node: DomElement, child_views: list[ViewNode]) -> ViewNode:
        tag_name = node.tag_name
        extracted = extract_attributes(node.attributes)

        if tag_name in self.components:

            def children() -> Fragment:
                return Fragment(children=list(child_views))

            props = ComponentProps.from_attributes(extracted, children)
            return self.components.render(tag_name, props)

        constructor = lookup_element(tag_name)
        if constructor is None:
            logger.warning("Unknown element <%s>, rendering nothing", tag_name)
            return Empty()

        return build_element(constructor, extracted, child_views)


def transform_node(
    node: DomNode,
    components: Components | None = None,
    format_text: bool = True,
    options: TransformOptions | None = None,
) -> ViewNode:
    """Transform one DOM node with a one-off transformer.

    Parameters
    ----------
    node : DomNode
        Node to transform
    components : Components or None, default = None
        Registered components
    format_text : bool, default True
        Whether newline formatting is active for this node
    options : TransformOptions or None, default = None
        Transform options

    Returns
    -------
    ViewNode
        The view node for ``node``

    """
    return TreeTransformer(components, options).transform(node, format_text)
