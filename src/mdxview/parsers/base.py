#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/parsers/base.py
"""Shared base class for the parsing stages."""

from __future__ import annotations

from typing import Union

from mdxview.constants import ParsingStage
from mdxview.exceptions import InvalidOptionsError, ParsingError
from mdxview.options.base import BaseParserOptions


class BaseParser:
    """Base class for the document and HTML parsing stages.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Stage-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                stage_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes], parsing_stage: ParsingStage) -> str:
        """Return input as text, decoding UTF-8 bytes.

        Parameters
        ----------
        input_data : str or bytes
            Document content
        parsing_stage : str
            Stage name reported if decoding fails

        Returns
        -------
        str
            The document text

        Raises
        ------
        ParsingError
            If bytes are not valid UTF-8
        TypeError
            If input is neither str nor bytes

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, (bytes, bytearray)):
            try:
                return bytes(input_data).decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError(
                    f"Input is not valid UTF-8: {e}", parsing_stage=parsing_stage, original_error=e
                ) from e
        raise TypeError(f"Expected str or bytes, got {type(input_data).__name__}")
