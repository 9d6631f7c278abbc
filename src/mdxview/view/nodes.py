#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/view/nodes.py
"""View node classes produced by the DOM-to-view transform.

A view tree is what the host rendering layer consumes. The transform never
inspects a view node after building it; it only composes nodes into parents
through ``Element.append_child``.

Node Hierarchy
--------------
All nodes inherit from ViewNode and support the visitor pattern:
    - Empty: renders nothing (comments, unknown elements, undecodable text)
    - Text: literal text content
    - LineBreak: an explicit line break inserted by newline formatting
    - Element: a built-in HTML element with attributes and children
    - Fragment: an ordered sequence of sibling nodes without a wrapper

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator

from mdxview.exceptions import RenderingError

if TYPE_CHECKING:
    from mdxview.view.visitors import ViewVisitor


class ViewNode(ABC):
    """Base class for all view nodes."""

    @abstractmethod
    def accept(self, visitor: ViewVisitor) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : ViewVisitor
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result of the visitor's processing

        """
        ...


@dataclass
class Empty(ViewNode):
    """A node that renders nothing."""

    def accept(self, visitor: ViewVisitor) -> Any:
        """Accept a visitor."""
        return visitor.visit_empty(self)


@dataclass
class Text(ViewNode):
    """Literal text content.

    Parameters
    ----------
    content : str
        The text, unescaped

    """

    content: str

    def accept(self, visitor: ViewVisitor) -> Any:
        """Accept a visitor."""
        return visitor.visit_text(self)


@dataclass
class LineBreak(ViewNode):
    """Explicit line break between two runs of text."""

    def accept(self, visitor: ViewVisitor) -> Any:
        """Accept a visitor."""
        return visitor.visit_line_break(self)


@dataclass
class Element(ViewNode):
    """A built-in element.

    Elements are created empty by the constructors in
    :mod:`mdxview.view.elements` and then filled in with the builder methods,
    each of which returns the element itself so calls can be chained.

    Parameters
    ----------
    tag : str
        Element tag name
    attributes : dict[str, str], default = empty dict
        Attribute values in insertion order
    children : list of ViewNode, default = empty list
        Child nodes in document order
    void : bool, default = False
        Whether the element is a void element (no closing tag, no children)

    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[ViewNode] = field(default_factory=list)
    void: bool = False

    def set_id(self, value: str) -> Element:
        """Set the ``id`` attribute."""
        self.attributes["id"] = value
        return self

    def set_attribute(self, name: str, value: str) -> Element:
        """Set an attribute, replacing any previous value."""
        self.attributes[name] = value
        return self

    def append_child(self, child: ViewNode) -> Element:
        """Append a child node after the existing children."""
        self.children.append(child)
        return self

    def accept(self, visitor: ViewVisitor) -> Any:
        """Accept a visitor."""
        return visitor.visit_element(self)


@dataclass
class Fragment(ViewNode):
    """Sibling nodes rendered in order without a wrapping element.

    Parameters
    ----------
    children : list of ViewNode, default = empty list
        Nodes in document order

    """

    children: list[ViewNode] = field(default_factory=list)

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[ViewNode]:
        """Iterate over the direct children."""
        return iter(self.children)

    def accept(self, visitor: ViewVisitor) -> Any:
        """Accept a visitor."""
        return visitor.visit_fragment(self)


def into_view(value: Any) -> ViewNode:
    """Coerce a component's return value into a view node.

    Parameters
    ----------
    value : Any
        A ViewNode, None, a string, or a list/tuple of such values

    Returns
    -------
    ViewNode
        ``value`` itself for view nodes, ``Empty`` for None, ``Text`` for
        strings and a ``Fragment`` for sequences

    Raises
    ------
    RenderingError
        If ``value`` cannot be turned into a view node

    """
    if isinstance(value, ViewNode):
        return value
    if value is None:
        return Empty()
    if isinstance(value, str):
        return Text(content=value)
    if isinstance(value, (list, tuple)):
        return Fragment(children=[into_view(item) for item in value])
    raise RenderingError(f"Cannot convert {type(value).__name__} to a view node", rendering_stage="component")
