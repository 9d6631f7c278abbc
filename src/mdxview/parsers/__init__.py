#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsing stages: document to HTML, and HTML to DOM."""

from mdxview.parsers.html import HtmlTreeBuilder, build_dom
from mdxview.parsers.markdown import MarkdownParser, ParsedDocument, parse_document

__all__ = ["HtmlTreeBuilder", "MarkdownParser", "ParsedDocument", "build_dom", "parse_document"]
