#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/view/visitors.py
"""Visitor base class for view tree traversal.

Host rendering layers implement :class:`ViewVisitor` to turn a view tree into
their own output (an HTML string, a widget tree, ...).

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdxview.view.nodes import Element, Empty, Fragment, LineBreak, Text


class ViewVisitor(ABC):
    """Abstract base class for view node visitors.

    Examples
    --------
    Collect all text in a view tree:

        >>> class TextCollector(ViewVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...     def visit_empty(self, node): pass
        ...     def visit_text(self, node): self.parts.append(node.content)
        ...     def visit_line_break(self, node): self.parts.append("\\n")
        ...     def visit_element(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_fragment(self, node):
        ...         for child in node.children:
        ...             child.accept(self)

    """

    @abstractmethod
    def visit_empty(self, node: Empty) -> Any:
        """Visit an Empty node."""
        ...

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        ...

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        ...

    @abstractmethod
    def visit_element(self, node: Element) -> Any:
        """Visit an Element node."""
        ...

    @abstractmethod
    def visit_fragment(self, node: Fragment) -> Any:
        """Visit a Fragment node."""
        ...
