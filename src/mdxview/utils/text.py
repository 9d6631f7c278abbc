#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/utils/text.py
"""Newline formatting for text nodes.

Authors wrap long lines by hand; inside a paragraph those soft wraps arrive
as bare newlines in the HTML text. Each newline that has content on both
sides becomes an explicit line break. Newlines at the start or end of a text
run are kept as literal characters so no break appears at the edge of a
block.

"""

from __future__ import annotations

import re

from mdxview.view.nodes import Fragment, LineBreak, Text, ViewNode

# A newline with a non-newline character on each side
_SOFT_BREAK_RE = re.compile(r"(?<=[^\n])\n(?=[^\n])")


def split_soft_breaks(text: str) -> list[str]:
    r"""Split text at every newline flanked by content.

    Parameters
    ----------
    text : str
        Raw text content

    Returns
    -------
    list of str
        The text runs between breaks. A single-element list means there is
        nothing to convert.

    Examples
    --------
        >>> split_soft_breaks("a\nb\nc")
        ['a', 'b', 'c']
        >>> split_soft_breaks("\na\n")
        ['\na\n']

    """
    return _SOFT_BREAK_RE.split(text)


def format_newlines(text: str) -> ViewNode:
    """Turn soft-wrapped text into text runs separated by line breaks.

    Parameters
    ----------
    text : str
        Raw text content

    Returns
    -------
    ViewNode
        ``Text`` when no newline qualifies, otherwise a ``Fragment`` of
        ``Text`` and ``LineBreak`` nodes

    """
    runs = split_soft_breaks(text)
    if len(runs) == 1:
        return Text(content=text)

    children: list[ViewNode] = [Text(content=runs[0])]
    for run in runs[1:]:
        children.append(LineBreak())
        children.append(Text(content=run))
    return Fragment(children=children)
