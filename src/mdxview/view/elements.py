#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/view/elements.py
"""Built-in element constructors keyed by standard HTML tag name.

The transform consults this table only for tags that no registered
component claims. Looking up a tag that is not listed here is not an error;
it sends the node down the unknown-element path instead.

"""

from __future__ import annotations

from functools import partial
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence

from mdxview.attributes import ExtractedAttributes
from mdxview.view.nodes import Element, ViewNode

ElementConstructor = Callable[[], Element]

STANDARD_ELEMENTS: tuple[str, ...] = (
    # Document and metadata
    "html",
    "base",
    "head",
    "link",
    "meta",
    "style",
    "title",
    "body",
    # Sectioning
    "address",
    "article",
    "aside",
    "footer",
    "header",
    "hgroup",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "main",
    "nav",
    "section",
    # Text content
    "blockquote",
    "dd",
    "div",
    "dl",
    "dt",
    "figcaption",
    "figure",
    "hr",
    "li",
    "ol",
    "p",
    "pre",
    "ul",
    # Inline text
    "a",
    "abbr",
    "b",
    "bdi",
    "bdo",
    "br",
    "cite",
    "code",
    "data",
    "dfn",
    "em",
    "i",
    "kbd",
    "mark",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "time",
    "u",
    "var",
    "wbr",
    # Image and multimedia
    "area",
    "audio",
    "img",
    "map",
    "track",
    "video",
    # Embedded content
    "embed",
    "iframe",
    "object",
    "param",
    "picture",
    "portal",
    "source",
    "svg",
    "math",
    # Scripting
    "canvas",
    "noscript",
    "script",
    # Edits
    "del",
    "ins",
    # Tables
    "caption",
    "col",
    "colgroup",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    # Forms
    "button",
    "datalist",
    "fieldset",
    "form",
    "input",
    "label",
    "legend",
    "meter",
    "optgroup",
    "option",
    "output",
    "progress",
    "select",
    "textarea",
    # Interactive
    "details",
    "dialog",
    "menu",
    "summary",
    # Web components
    "slot",
    "template",
)

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

ELEMENT_CONSTRUCTORS: Mapping[str, ElementConstructor] = MappingProxyType(
    {tag: partial(Element, tag, void=tag in VOID_ELEMENTS) for tag in STANDARD_ELEMENTS}
)


def lookup_element(tag: str) -> Optional[ElementConstructor]:
    """Return the constructor for a standard tag, or None if it is not one.

    Parameters
    ----------
    tag : str
        Tag name exactly as parsed; matching is case-sensitive

    Returns
    -------
    callable or None
        A parameterless function returning a new, empty ``Element``

    """
    return ELEMENT_CONSTRUCTORS.get(tag)


def apply_attributes(element: Element, extracted: ExtractedAttributes) -> Element:
    """Copy extracted attributes onto a built-in element.

    The id is set first, then every other attribute that carries a value,
    and finally the class tokens re-joined with single spaces. The source
    ``class`` value is never copied as written, so a class attribute made
    only of whitespace is dropped. Valueless attributes are never applied.

    Parameters
    ----------
    element : Element
        Element to modify in place
    extracted : ExtractedAttributes
        Attributes of the source DOM element

    Returns
    -------
    Element
        The same element, for chaining

    """
    if extracted.id is not None:
        element.set_id(extracted.id)

    for name, value in extracted.attributes.items():
        if value is not None and name != "class":
            element.set_attribute(name, value)

    class_string = extracted.class_string
    if class_string is not None:
        element.set_attribute("class", class_string)

    return element


def build_element(
    constructor: ElementConstructor, extracted: ExtractedAttributes, children: Sequence[ViewNode]
) -> Element:
    """Construct a built-in element with its attributes and children.

    Parameters
    ----------
    constructor : callable
        Constructor from ``ELEMENT_CONSTRUCTORS``
    extracted : ExtractedAttributes
        Attributes of the source DOM element
    children : sequence of ViewNode
        Already transformed children, in document order

    Returns
    -------
    Element
        The populated element

    """
    element = apply_attributes(constructor(), extracted)
    for child in children:
        element.append_child(child)
    return element
