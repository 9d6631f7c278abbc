#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for serializing view trees to HTML."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdxview.constants import DEFAULT_ESCAPE_TEXT, DEFAULT_SELF_CLOSING_VOID
from mdxview.options.base import BaseRendererOptions


# src/mdxview/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a view tree to an HTML string.

    Parameters
    ----------
    escape_text : bool, default True
        Escape HTML special characters in text content. Attribute values are
        always escaped.
    self_closing_void : bool, default False
        Write void elements as ``<br />`` instead of ``<br>``.

    """

    escape_text: bool = field(
        default=DEFAULT_ESCAPE_TEXT,
        metadata={"help": "Escape HTML special characters in text content", "importance": "security"},
    )
    self_closing_void: bool = field(
        default=DEFAULT_SELF_CLOSING_VOID,
        metadata={"help": "Write void elements as <br /> instead of <br>", "importance": "advanced"},
    )
