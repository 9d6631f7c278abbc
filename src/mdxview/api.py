#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/api.py
r"""Render entry points.

The pipeline runs in three stages:

1. ``MarkdownParser`` splits off front-matter and converts markdown to HTML
2. ``HtmlTreeBuilder`` parses the HTML into DOM nodes
3. ``TreeTransformer`` turns every root DOM node into a view node

Examples
--------
    >>> from mdxview import Components, render_to_html
    >>> from mdxview.view import Element, Text
    >>> components = Components()
    >>> components.add_props(
    ...     "Shout",
    ...     lambda props: Element("strong", children=[Text(props.attributes.get("word") or "")]),
    ...     lambda props: props,
    ... )
    >>> render_to_html('<Shout word="hey"></Shout>', components)
    '<p><strong>hey</strong></p>\n'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from mdxview.components import Components
from mdxview.options.html import HtmlRendererOptions
from mdxview.options.transform import TransformOptions
from mdxview.parsers.html import HtmlTreeBuilder
from mdxview.parsers.markdown import MarkdownParser
from mdxview.renderers.html import HtmlRenderer
from mdxview.transform import TreeTransformer
from mdxview.utils.decorators import debug_timer
from mdxview.view.nodes import Fragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDocument:
    """A rendered document together with its front-matter.

    Parameters
    ----------
    metadata : Any
        Parsed front-matter, or None
    html : str
        Intermediate HTML produced from the markdown body
    view : Fragment
        View nodes for the root-level HTML nodes, in document order

    """

    metadata: Optional[Any]
    html: str
    view: Fragment


def render_document(
    source: Union[str, bytes],
    components: Components | None = None,
    options: TransformOptions | None = None,
) -> RenderedDocument:
    """Render a document and keep its front-matter and intermediate HTML.

    Parameters
    ----------
    source : str or bytes
        Markdown document, optionally starting with YAML or TOML front-matter
    components : Components or None, default = None
        Registered components
    options : TransformOptions or None, default = None
        Transform and markdown options

    Returns
    -------
    RenderedDocument
        Front-matter, HTML and view tree

    Raises
    ------
    ParsingError
        If front-matter, markdown or HTML parsing fails
    ComponentError
        If a registered component fails

    """
    options = options or TransformOptions()

    with debug_timer(logger, "Markdown parsing"):
        parsed = MarkdownParser(options.markdown).parse(source)

    with debug_timer(logger, "HTML tree building"):
        roots = HtmlTreeBuilder().build(parsed.html)

    transformer = TreeTransformer(components, options)
    with debug_timer(logger, "View transform"):
        views = transformer.transform_nodes(roots, options.format_newlines)

    logger.debug("Rendered %d root nodes", len(views))
    return RenderedDocument(metadata=parsed.metadata, html=parsed.html, view=Fragment(children=views))


def render(
    source: Union[str, bytes],
    components: Components | None = None,
    options: TransformOptions | None = None,
) -> Fragment:
    """Render a document into a view tree.

    Parameters
    ----------
    source : str or bytes
        Markdown document, optionally starting with front-matter
    components : Components or None, default = None
        Registered components
    options : TransformOptions or None, default = None
        Transform and markdown options

    Returns
    -------
    Fragment
        One view node per root-level HTML node, in document order

    """
    return render_document(source, components, options).view


def render_to_html(
    source: Union[str, bytes],
    components: Components | None = None,
    options: TransformOptions | None = None,
    renderer_options: HtmlRendererOptions | None = None,
) -> str:
    """Render a document and serialize the view tree to HTML."""
    view = render(source, components, options)
    return HtmlRenderer(renderer_options).render_to_string(view)
