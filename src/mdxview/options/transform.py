#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the DOM-to-view transform."""
# src/mdxview/options/transform.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdxview.constants import DEFAULT_FORMAT_NEWLINES, PREFORMATTED_TAGS
from mdxview.options.base import CloneFrozenMixin
from mdxview.options.markdown import MarkdownParserOptions


@dataclass(frozen=True)
class TransformOptions(CloneFrozenMixin):
    """Configuration options for rendering a document into a view tree.

    Parameters
    ----------
    format_newlines : bool, default True
        Whether newline formatting is active for root-level nodes.
    preformatted_tags : frozenset of str, default {"code", "pre"}
        Tags whose descendants keep newlines literally.
    markdown : MarkdownParserOptions
        Options for front-matter extraction and markdown conversion.

    Examples
    --------
    Keep newlines inside textarea elements as well:

        >>> options = TransformOptions(preformatted_tags=frozenset({"code", "pre", "textarea"}))

    """

    format_newlines: bool = field(
        default=DEFAULT_FORMAT_NEWLINES,
        metadata={"help": "Turn newlines flanked by text into line breaks", "importance": "core"},
    )
    preformatted_tags: frozenset[str] = field(
        default=PREFORMATTED_TAGS,
        metadata={"help": "Tags inside which newlines are kept literally", "importance": "advanced"},
    )
    markdown: MarkdownParserOptions = field(
        default_factory=MarkdownParserOptions,
        metadata={"help": "Markdown parser options", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the preformatted tag set.

        Raises
        ------
        ValueError
            If ``preformatted_tags`` contains anything but non-empty strings.

        """
        if isinstance(self.preformatted_tags, str):
            raise ValueError("preformatted_tags must be a collection of tag names, not a string")
        for tag in self.preformatted_tags:
            if not isinstance(tag, str) or not tag:
                raise ValueError(f"preformatted_tags must contain non-empty strings, got {tag!r}")
        object.__setattr__(self, "preformatted_tags", frozenset(self.preformatted_tags))
