#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that renderers inherit from. The
BaseRenderer provides a consistent interface for turning the MIME part tree
into output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from mimebody.ast.nodes import Envelope
from mimebody.exceptions import InvalidOptionsError, RenderingError
from mimebody.options.base import BaseRendererOptions
from mimebody.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Envelope) -> str:
        """Render the tree to a string.

        Parameters
        ----------
        doc : Envelope
            Root of the part tree

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Envelope, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write it to a file or file-like object.

        Parameters
        ----------
        doc : Envelope
            Root of the part tree
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If the output cannot be written

        """
        text = self.render_to_string(doc)
        try:
            write_content(text, output)
        except OSError as e:
            raise RenderingError(f"Failed to write rendered body: {e}", original_error=e) from e

    def render_to_bytes(self, doc: Envelope) -> bytes:
        """Render the tree to UTF-8 bytes.

        Parameters
        ----------
        doc : Envelope
            Root of the part tree

        Returns
        -------
        bytes
            Rendered document

        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
