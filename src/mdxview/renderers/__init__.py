#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that serialize view trees."""

from mdxview.renderers.base import BaseRenderer
from mdxview.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer"]
