#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for configuring MIME body rendering."""

from mimebody.options.base import BaseRendererOptions, CloneFrozenMixin
from mimebody.options.mime import MimeRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MimeRendererOptions",
]
