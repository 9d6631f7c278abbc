"""Test utilities for the mdxview test suite.

This module provides helpers for walking view trees and recording the
props components are called with.
"""

from typing import Any, Iterator

from mdxview.components import ComponentProps
from mdxview.view.nodes import Element, Fragment, Text, ViewNode


def iter_view(node: ViewNode) -> Iterator[ViewNode]:
    """Yield ``node`` and every view node below it in document order."""
    yield node
    if isinstance(node, (Element, Fragment)):
        for child in node.children:
            yield from iter_view(child)


def find_elements(node: ViewNode, tag: str) -> list[Element]:
    """Return all elements with ``tag`` in a view tree."""
    return [n for n in iter_view(node) if isinstance(n, Element) and n.tag == tag]


def element_children(node: Element | Fragment) -> list[Element]:
    """Return the direct children of ``node`` that are elements."""
    return [child for child in node.children if isinstance(child, Element)]


def text_content(node: ViewNode) -> str:
    """Concatenate all text in a view tree."""
    return "".join(n.content for n in iter_view(node) if isinstance(n, Text))


class PropsRecorder:
    """Component that records the props it is called with.

    Parameters
    ----------
    tag : str, default "section"
        Tag of the element the component renders

    """

    def __init__(self, tag: str = "section"):
        self.tag = tag
        self.calls: list[ComponentProps] = []

    def __call__(self, props: ComponentProps) -> Any:
        self.calls.append(props)
        return Element(self.tag, {"data-component": "recorded"}, [props.children()])
