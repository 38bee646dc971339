#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mimebody/renderers/__init__.py
"""Renderers for turning the MIME part tree into output.

- MimeRenderer: Render to the nested multipart upload body

Examples
--------
    >>> from mimebody.ast import build_tree
    >>> from mimebody.renderers import MimeRenderer
    >>> from mimebody.request import MessageRequest
    >>> body = MimeRenderer().render_to_string(build_tree(MessageRequest(text_html="<p>hi</p>")))

"""

from mimebody.renderers.base import BaseRenderer
from mimebody.renderers.mime import MimeRenderer

__all__ = [
    "BaseRenderer",
    "MimeRenderer",
]
