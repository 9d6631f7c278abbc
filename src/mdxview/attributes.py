#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/attributes.py
"""Attribute extraction shared by components and built-in elements.

Both destinations of an element receive the same three pieces of
information: the ``id``, the whitespace-split ``class`` tokens and the full
attribute mapping. Only the way they are consumed differs.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class ExtractedAttributes:
    """Attributes pulled off a DOM element.

    Parameters
    ----------
    id : str or None
        Value of the ``id`` attribute, if present with a value
    classes : list of str
        Tokens of the ``class`` attribute, in order, duplicates kept
    attributes : dict[str, str or None]
        Every attribute; valueless attributes map to None

    """

    id: Optional[str] = None
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def class_string(self) -> Optional[str]:
        """Classes re-joined with single spaces, or None when there are none."""
        return " ".join(self.classes) if self.classes else None


def extract_attributes(attributes: Mapping[str, Optional[str]]) -> ExtractedAttributes:
    """Extract id, class tokens and the attribute mapping from an element.

    Parameters
    ----------
    attributes : Mapping[str, str or None]
        Attributes of a DOM element in source order

    Returns
    -------
    ExtractedAttributes
        The extracted values. The attribute mapping is a copy, so callers may
        modify it freely.

    Examples
    --------
        >>> extracted = extract_attributes({"id": "a", "class": "x  y", "hidden": None})
        >>> extracted.id, extracted.classes
        ('a', ['x', 'y'])
        >>> extracted.attributes["hidden"] is None
        True

    """
    class_value = attributes.get("class")
    return ExtractedAttributes(
        id=attributes.get("id"),
        classes=class_value.split() if class_value else [],
        attributes=dict(attributes),
    )
