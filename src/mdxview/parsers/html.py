#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/parsers/html.py
"""HTML string to DOM value tree.

HTML is parsed with BeautifulSoup's ``html.parser`` builder and copied into
the immutable :mod:`mdxview.dom` node classes. ``html.parser`` lowercases
tag and attribute names and stores valueless attributes as empty strings,
which would lose information components rely on (``<Widget>`` vs
``<widget>``, ``<Toggle open>`` vs ``<Toggle open="">``). Each start tag is
therefore re-read from the source markup at the position the parser
recorded, and the written names and valueless attributes are restored.

"""

from __future__ import annotations

import logging
import re
import warnings
from typing import Any, Optional

from mdxview.constants import DEPS_HTML
from mdxview.dom import DomComment, DomElement, DomNode, DomText
from mdxview.exceptions import ParsingError
from mdxview.parsers.base import BaseParser
from mdxview.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r"<([a-zA-Z][^\t\n\r\f />\x00]*)")
_ATTRIBUTE_RE = re.compile(
    r"""[\s/]*(?P<name>[^\s/>=][^\s/=>]*)(?:\s*=\s*(?P<value>"[^"]*"|'[^']*'|[^\s>]*))?"""
)
_NEWLINE_RE = re.compile("\n")


class _StartTagReader:
    """Read tag and attribute names back out of the source markup.

    Parameters
    ----------
    markup : str
        The exact string handed to BeautifulSoup

    """

    def __init__(self, markup: str):
        self.markup = markup
        # Offset of the first character of each line; line numbers match
        # html.parser, which only counts "\n"
        self.line_offsets = [0] + [m.end() for m in _NEWLINE_RE.finditer(markup)]

    def _offset(self, tag: Any) -> Optional[int]:
        line = getattr(tag, "sourceline", None)
        column = getattr(tag, "sourcepos", None)
        if line is None or column is None or not 0 < line <= len(self.line_offsets):
            return None
        return self.line_offsets[line - 1] + column

    def read(self, tag: Any) -> tuple[str, dict[str, Optional[str]]]:
        """Return the tag name and attributes as written in the markup.

        Falls back to the names BeautifulSoup reports when the start tag
        cannot be located.

        Parameters
        ----------
        tag : bs4.element.Tag
            Parsed element

        Returns
        -------
        tuple
            (tag_name, attributes) with valueless attributes mapped to None

        """
        parsed_attrs: dict[str, str] = {key: _attribute_text(value) for key, value in tag.attrs.items()}

        offset = self._offset(tag)
        name_match = _TAG_NAME_RE.match(self.markup, offset) if offset is not None else None
        if name_match is None or name_match.group(1).lower() != tag.name:
            logger.debug("Could not locate start tag for <%s>, using parsed names", tag.name)
            return tag.name, dict(parsed_attrs)

        # lowercased name -> (written name, has value)
        written: dict[str, tuple[str, bool]] = {}
        pos = name_match.end()
        while True:
            attr_match = _ATTRIBUTE_RE.match(self.markup, pos)
            if attr_match is None:
                break
            written_name = attr_match.group("name")
            written[written_name.lower()] = (written_name, attr_match.group("value") is not None)
            pos = attr_match.end()

        attributes: dict[str, Optional[str]] = {}
        for key, value in parsed_attrs.items():
            written_name, has_value = written.get(key, (key, True))
            attributes[written_name] = value if has_value else None

        return name_match.group(1), attributes


def _attribute_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


class HtmlTreeBuilder(BaseParser):
    """Build a DOM value tree from an HTML string.

    Examples
    --------
        >>> nodes = HtmlTreeBuilder().build('<Card id="a" open>hi</Card>')
        >>> nodes[0].tag_name, nodes[0].attributes
        ('Card', {'id': 'a', 'open': None})

    """

    def __init__(self) -> None:
        """Initialize the builder."""
        super().__init__(None)

    @requires_dependencies("html", DEPS_HTML)
    def build(self, html: str) -> list[DomNode]:
        """Parse HTML into the root-level DOM nodes.

        Parameters
        ----------
        html : str
            HTML markup (a fragment or a full document)

        Returns
        -------
        list of DomNode
            Root-level nodes in document order

        Raises
        ------
        ParsingError
            If the HTML parser rejects the markup

        """
        from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
        from bs4.builder import ParserRejectedMarkup

        if not isinstance(html, str):
            raise TypeError(f"Expected str, got {type(html).__name__}")

        try:
            with warnings.catch_warnings():
                # Short fragments such as "index.html" are valid content here
                warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
                soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
        except ParserRejectedMarkup as e:
            raise ParsingError(f"Invalid HTML: {e}", parsing_stage="html", original_error=e) from e

        reader = _StartTagReader(html)
        return self._convert_nodes(soup.contents, reader)

    def _convert_nodes(self, nodes: list[Any], reader: _StartTagReader) -> list[DomNode]:
        """Convert BeautifulSoup nodes and their subtrees to DOM nodes.

        The tree is walked with an explicit stack, so nesting depth is not
        bounded by the interpreter's recursion limit.

        Parameters
        ----------
        nodes : list
            Sibling BeautifulSoup nodes
        reader : _StartTagReader
            Source reader for restoring written names

        Returns
        -------
        list of DomNode
            Converted nodes in document order

        """
        from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

        stack: list[tuple[Any, bool]] = [(node, False) for node in reversed(nodes)]
        converted: list[DomNode] = []

        while stack:
            node, children_done = stack.pop()

            if isinstance(node, (Comment, Declaration, Doctype, ProcessingInstruction)):
                converted.append(DomComment(content=str(node)))
            elif isinstance(node, NavigableString):
                # Plain strings and CDATA sections
                converted.append(DomText(content=str(node)))
            elif isinstance(node, Tag):
                if children_done:
                    count = len(node.contents)
                    children = tuple(converted[len(converted) - count :])
                    del converted[len(converted) - count :]
                    tag_name, attributes = reader.read(node)
                    converted.append(DomElement(tag_name=tag_name, attributes=attributes, children=children))
                else:
                    stack.append((node, True))
                    stack.extend((child, False) for child in reversed(node.contents))
            else:
                logger.debug("Ignoring unsupported node type %s", type(node).__name__)
                converted.append(DomComment())

        return converted


def build_dom(html: str) -> list[DomNode]:
    """Parse HTML into root-level DOM nodes with a one-off builder.

    Parameters
    ----------
    html : str
        HTML markup

    Returns
    -------
    list of DomNode
        Root-level nodes in document order

    """
    return HtmlTreeBuilder().build(html)
