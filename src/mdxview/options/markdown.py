#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for front-matter extraction and markdown conversion."""
# src/mdxview/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdxview.constants import (
    DEFAULT_AUTOLINK_URLS,
    DEFAULT_HARD_WRAP,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_MATH,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
)
from mdxview.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for turning a document into HTML.

    Raw HTML in the markdown is always passed through unescaped, since that
    is how component tags reach the transform.

    Parameters
    ----------
    parse_frontmatter : bool, default True
        Whether to split YAML (---) or TOML (+++) front-matter off the document.
    parse_tables : bool, default True
        Whether to parse GFM pipe tables.
    parse_strikethrough : bool, default True
        Whether to parse ~~strikethrough~~.
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_math : bool, default False
        Whether to parse inline ($...$) and block ($$...$$) math.
    autolink_urls : bool, default False
        Whether to turn bare URLs into links.
    hard_wrap : bool, default False
        Whether markdown itself should emit <br> for every newline. When False
        newlines stay in the HTML text and the transform decides.

    """

    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={"help": "Parse YAML/TOML front-matter at document start", "importance": "core"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )
    parse_math: bool = field(
        default=DEFAULT_PARSE_MATH,
        metadata={"help": "Parse inline and block math ($...$ and $$...$$)", "importance": "advanced"},
    )
    autolink_urls: bool = field(
        default=DEFAULT_AUTOLINK_URLS,
        metadata={"help": "Turn bare URLs into links", "importance": "advanced"},
    )
    hard_wrap: bool = field(
        default=DEFAULT_HARD_WRAP,
        metadata={"help": "Emit <br> for every newline during markdown conversion", "importance": "advanced"},
    )

    def mistune_plugins(self) -> list[str]:
        """Return the mistune plugin names enabled by these options."""
        plugins = []
        if self.parse_strikethrough:
            plugins.append("strikethrough")
        if self.parse_tables:
            plugins.append("table")
        if self.parse_footnotes:
            plugins.append("footnotes")
        if self.parse_task_lists:
            plugins.append("task_lists")
        if self.parse_math:
            plugins.append("math")
        if self.autolink_urls:
            plugins.append("url")
        return plugins
