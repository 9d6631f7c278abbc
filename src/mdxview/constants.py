#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdxview library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Dependencies - Package requirements checked at call time
3. Front-matter - Delimiters recognized at the start of a document
4. Transform Defaults - Newline formatting and preformatted context
5. Renderer Defaults - HTML serialization of view trees
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FrontmatterFormat = Literal["yaml", "toml"]
ParsingStage = Literal["frontmatter", "markdown", "html"]

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_YAML_FRONTMATTER = [("PyYAML", "yaml", ">=5.1")]

# =============================================================================
# Front-matter
# =============================================================================

FRONTMATTER_DELIMITERS: dict[FrontmatterFormat, str] = {
    "yaml": "---",
    "toml": "+++",
}

DEFAULT_PARSE_FRONTMATTER = True

# =============================================================================
# Markdown Defaults
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_PARSE_MATH = False
DEFAULT_AUTOLINK_URLS = False
DEFAULT_HARD_WRAP = False

# =============================================================================
# Transform Defaults
# =============================================================================

# Inside these tags newlines are kept literally instead of becoming breaks
PREFORMATTED_TAGS: frozenset[str] = frozenset({"code", "pre"})

DEFAULT_FORMAT_NEWLINES = True

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_ESCAPE_TEXT = True
DEFAULT_SELF_CLOSING_VOID = False

# Elements whose text content is written without escaping
RAW_TEXT_ELEMENTS: frozenset[str] = frozenset({"script", "style"})
