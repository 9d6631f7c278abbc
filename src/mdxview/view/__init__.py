#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/view/__init__.py
"""View tree nodes, visitors and built-in element constructors."""

from mdxview.view.elements import (
    ELEMENT_CONSTRUCTORS,
    STANDARD_ELEMENTS,
    VOID_ELEMENTS,
    apply_attributes,
    build_element,
    lookup_element,
)
from mdxview.view.nodes import Element, Empty, Fragment, LineBreak, Text, ViewNode, into_view
from mdxview.view.visitors import ViewVisitor

__all__ = [
    "ELEMENT_CONSTRUCTORS",
    "STANDARD_ELEMENTS",
    "VOID_ELEMENTS",
    "Element",
    "Empty",
    "Fragment",
    "LineBreak",
    "Text",
    "ViewNode",
    "ViewVisitor",
    "apply_attributes",
    "build_element",
    "into_view",
    "lookup_element",
]
