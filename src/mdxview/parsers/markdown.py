#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/parsers/markdown.py
"""Front-matter extraction and markdown to HTML conversion.

A document may begin with a YAML block delimited by ``---`` lines or a TOML
block delimited by ``+++`` lines. The block is parsed into a structured
value; the rest of the document is converted to HTML with mistune. Raw HTML
in the markdown is passed through untouched so that component tags survive
into the HTML.

Any failure in this stage is fatal for the render call.

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from mdxview.constants import DEPS_MARKDOWN, DEPS_YAML_FRONTMATTER, FRONTMATTER_DELIMITERS
from mdxview.exceptions import ParsingError
from mdxview.options.markdown import MarkdownParserOptions
from mdxview.parsers.base import BaseParser
from mdxview.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedDocument:
    """Result of the document parsing stage.

    Parameters
    ----------
    metadata : Any
        Parsed front-matter (usually a dict), or None when the document has
        no front-matter or the block is empty
    html : str
        HTML produced from the markdown body

    """

    metadata: Optional[Any]
    html: str


def _split_frontmatter_block(content: str, delimiter: str) -> tuple[str, str] | None:
    """Split a delimited front-matter block off the start of ``content``.

    Parameters
    ----------
    content : str
        Document text
    delimiter : str
        Delimiter line, e.g. ``---``

    Returns
    -------
    tuple[str, str] or None
        (block_text, remaining_content), or None if the document does not
        start with a complete block

    """
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != delimiter:
        return None

    for i in range(1, len(lines)):
        if lines[i].strip() == delimiter:
            return "".join(lines[1:i]), "".join(lines[i + 1 :])

    return None


class MarkdownParser(BaseParser):
    r"""Split front-matter off a document and convert the body to HTML.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parsed = MarkdownParser().parse("---\ntitle: Hi\n---\nHello *world*")
        >>> parsed.metadata
        {'title': 'Hi'}
        >>> parsed.html
        '<p>Hello <em>world</em></p>\n'

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, bytes]) -> ParsedDocument:
        """Parse a document into its front-matter and HTML body.

        Parameters
        ----------
        input_data : str or bytes
            Document text; bytes are decoded as UTF-8

        Returns
        -------
        ParsedDocument
            Front-matter value and HTML string

        Raises
        ------
        ParsingError
            If the front-matter is malformed or markdown conversion fails

        """
        content = self._load_text_content(input_data, "markdown")
        metadata, body = self.extract_frontmatter(content)
        return ParsedDocument(metadata=metadata, html=self.to_html(body))

    def extract_frontmatter(self, content: str) -> tuple[Optional[Any], str]:
        """Split front-matter off the start of the document.

        Parameters
        ----------
        content : str
            Document text

        Returns
        -------
        tuple
            (metadata, remaining_content). Metadata is None when there is no
            front-matter, when it is disabled, or when the block is empty.

        Raises
        ------
        ParsingError
            If a front-matter block is present but cannot be parsed

        """
        if not self.options.parse_frontmatter:
            return None, content

        content = content.removeprefix("\ufeff")

        block = _split_frontmatter_block(content, FRONTMATTER_DELIMITERS["yaml"])
        if block is not None:
            yaml_text, remaining = block
            return self._load_yaml(yaml_text), remaining

        block = _split_frontmatter_block(content, FRONTMATTER_DELIMITERS["toml"])
        if block is not None:
            toml_text, remaining = block
            return self._load_toml(toml_text), remaining

        return None, content

    @requires_dependencies("yaml front-matter", DEPS_YAML_FRONTMATTER)
    def _load_yaml(self, yaml_text: str) -> Optional[Any]:
        import yaml

        try:
            data = yaml.safe_load(yaml_text)
        except yaml.YAMLError as e:
            raise ParsingError(
                f"Invalid YAML front-matter: {e}", parsing_stage="frontmatter", original_error=e
            ) from e
        logger.debug("Parsed YAML front-matter")
        return data

    def _load_toml(self, toml_text: str) -> Optional[Any]:
        if not toml_text.strip():
            return None
        try:
            data = tomllib.loads(toml_text)
        except tomllib.TOMLDecodeError as e:
            raise ParsingError(
                f"Invalid TOML front-matter: {e}", parsing_stage="frontmatter", original_error=e
            ) from e
        logger.debug("Parsed TOML front-matter")
        return data

    def to_html(self, markdown_content: str) -> str:
        """Convert a markdown body to HTML.

        Parameters
        ----------
        markdown_content : str
            Markdown without front-matter

        Returns
        -------
        str
            HTML markup

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        import mistune

        plugins = self.options.mistune_plugins()
        logger.debug("Converting markdown with plugins: %s", plugins)

        markdown = mistune.create_markdown(escape=False, hard_wrap=self.options.hard_wrap, plugins=plugins)
        try:
            html = markdown(markdown_content)
        except Exception as e:
            raise ParsingError(f"Markdown conversion failed: {e}", parsing_stage="markdown", original_error=e) from e

        if not isinstance(html, str):
            raise ParsingError("Markdown conversion did not produce HTML", parsing_stage="markdown")
        return html


def parse_document(source: Union[str, bytes], options: MarkdownParserOptions | None = None) -> ParsedDocument:
    """Parse a document into front-matter and HTML with a one-off parser.

    Parameters
    ----------
    source : str or bytes
        Document text
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    ParsedDocument
        Front-matter value and HTML string

    """
    return MarkdownParser(options).parse(source)
