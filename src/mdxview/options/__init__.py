#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for each stage of the mdxview pipeline."""

from mdxview.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdxview.options.html import HtmlRendererOptions
from mdxview.options.markdown import MarkdownParserOptions
from mdxview.options.transform import TransformOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "TransformOptions",
]
