#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/renderers/base.py
"""Abstract base class for view tree renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mdxview.exceptions import InvalidOptionsError
from mdxview.options.base import BaseRendererOptions
from mdxview.view.nodes import ViewNode


class BaseRenderer(ABC):
    """Abstract base class for turning a view tree into host output.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with options."""
        self.options: BaseRendererOptions | None = options

    @abstractmethod
    def render_to_string(self, view: ViewNode) -> str:
        """Render a view tree to a string.

        Parameters
        ----------
        view : ViewNode
            Root of the view tree

        Returns
        -------
        str
            Rendered output

        """
        ...

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                stage_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
