#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mimebody - serialize message requests into nested MIME multipart upload bodies.

mimebody turns a structured message description (draft and thread metadata,
headers, plain and HTML bodies, inline embedded objects and attachments) into
the single multipart document accepted by message-store APIs that take a raw
RFC 822 message alongside JSON metadata.

The library builds a small part tree from the request, deciding which
nesting levels exist (mixed, alternative, related), and renders it with a
visitor into CRLF-delimited text. Payloads are expected to be base64 encoded
by the caller.

Requirements
------------
- Python 3.10+
- PyYAML and tomli (Python < 3.11) for request and config files

Examples
--------
Basic usage:

    >>> from mimebody import create_body
    >>> body = create_body({
    ...     "headers": {"To": "a@b.com", "Subject": "Hello"},
    ...     "textPlain": "hi",
    ...     "textHtml": "<p>hi</p>",
    ... })

Per-document boundaries with collision checking:

    >>> from mimebody import Boundaries, MimeRendererOptions
    >>> options = MimeRendererOptions(boundaries=Boundaries.generate(), check_boundary_collisions=True)
    >>> body = create_body({"textPlain": "hi"}, options)

"""

__version__ = "0.1.0"

from mimebody.api import create_body, create_body_bytes
from mimebody.exceptions import (
    BoundaryCollisionError,
    InvalidOptionsError,
    MimeBodyError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mimebody.options import MimeRendererOptions
from mimebody.parsers.request import load_request
from mimebody.request import Attachment, Draft, EmbeddedObject, MessageRequest
from mimebody.utils.boundaries import Boundaries, find_boundary_collisions

__all__ = [
    "__version__",
    "Attachment",
    "Boundaries",
    "BoundaryCollisionError",
    "Draft",
    "EmbeddedObject",
    "InvalidOptionsError",
    "MessageRequest",
    "MimeBodyError",
    "MimeRendererOptions",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "create_body",
    "create_body_bytes",
    "find_boundary_collisions",
    "load_request",
]
