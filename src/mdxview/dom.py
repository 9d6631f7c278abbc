#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/dom.py
"""DOM value tree handed from the HTML tree builder to the transform.

The tree is built once per render call, never mutated, and discarded when
the transform finishes. Nodes do not point back at their parents.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union


@dataclass(frozen=True)
class DomComment:
    """An HTML comment (or doctype / declaration), which renders nothing."""

    content: str = ""


@dataclass(frozen=True)
class DomText:
    """A run of raw text between tags.

    Parameters
    ----------
    content : str
        Text with character references already decoded

    """

    content: str


@dataclass(frozen=True)
class DomElement:
    """An element with its attributes and children.

    Parameters
    ----------
    tag_name : str
        Tag name as written in the source markup (case preserved)
    attributes : dict[str, str or None]
        Attributes in source order; valueless attributes map to None
    children : tuple of DomNode
        Child nodes in document order

    """

    tag_name: str
    attributes: dict[str, Optional[str]] = field(default_factory=dict)
    children: tuple[DomNode, ...] = ()

    def iter_descendants(self) -> Iterator[DomNode]:
        """Yield every descendant node in document order."""
        for child in self.children:
            yield child
            if isinstance(child, DomElement):
                yield from child.iter_descendants()


DomNode = Union[DomComment, DomText, DomElement]
