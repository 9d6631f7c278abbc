r"""mdxview - render markdown with embedded custom components into view trees.

mdxview converts a markdown document to HTML, parses that HTML into a DOM
tree and transforms the tree into view nodes. Any tag whose name matches a
registered component is handed to that component instead of being mapped to
a built-in HTML element, so documents can embed application widgets such as
``<Counter start="3"></Counter>``.

Key Features
------------
- YAML (``---``) and TOML (``+++``) front-matter
- Case-sensitive component matching against tag names as written
- Standardized component props: id, class list, all attributes, children
- Newline formatting into explicit line breaks outside ``code`` and ``pre``
- Unknown elements render nothing instead of failing the render

Examples
--------
    >>> from mdxview import Components, render_to_html
    >>> from mdxview.view import Element
    >>> components = Components()
    >>> components.add_props(
    ...     "Note",
    ...     lambda props: Element("aside", {"class": "note"}, [props.children()]),
    ...     lambda props: props,
    ... )
    >>> render_to_html("<Note>Remember</Note>", components)
    '<p><aside class="note">Remember</aside></p>\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdxview requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdxview.api import RenderedDocument, render, render_document, render_to_html  # noqa: E402
from mdxview.components import Component, ComponentProps, Components  # noqa: E402
from mdxview.exceptions import (  # noqa: E402
    ComponentError,
    DependencyError,
    InvalidOptionsError,
    MdxViewError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdxview.options import HtmlRendererOptions, MarkdownParserOptions, TransformOptions  # noqa: E402
from mdxview.transform import TreeTransformer, transform_node  # noqa: E402
from mdxview.view import Element, Empty, Fragment, LineBreak, Text, ViewNode  # noqa: E402

__all__ = [
    "__version__",
    "Component",
    "ComponentError",
    "ComponentProps",
    "Components",
    "DependencyError",
    "Element",
    "Empty",
    "Fragment",
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "LineBreak",
    "MarkdownParserOptions",
    "MdxViewError",
    "ParsingError",
    "RenderedDocument",
    "RenderingError",
    "Text",
    "TransformOptions",
    "TreeTransformer",
    "ValidationError",
    "ViewNode",
    "render",
    "render_document",
    "render_to_html",
    "transform_node",
]
