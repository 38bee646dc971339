"""Test utilities for the mimebody test suite.

Helpers for building requests and for parsing produced bodies back with the
standard library email parser, which is how structural validity is judged.
"""

import base64
import email
from email.message import Message

from mimebody.constants import DEFAULT_OUTER_BOUNDARY

# Base64 encoded 1x1 pixel PNG for testing
MINIMAL_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/w8AAn8B9FpQHLwAAAAASUVORK5CYII="
MINIMAL_PNG_BYTES = base64.b64decode(MINIMAL_PNG_B64)

CSV_B64 = "MSwyLDM="
CSV_BYTES = b"1,2,3"


def parse_body(body: str, outer_boundary: str = DEFAULT_OUTER_BOUNDARY) -> Message:
    """Parse a produced body the way the upload endpoint sees it.

    The body carries no headers of its own; the endpoint learns the outer
    boundary from the HTTP Content-Type, so one is prepended here.

    Parameters
    ----------
    body : str
        Rendered MIME body
    outer_boundary : str
        Outer boundary token used when rendering

    Returns
    -------
    Message
        Parsed outer multipart message

    """
    raw = f'Content-Type: multipart/related; boundary="{outer_boundary}"\r\n\r\n' + body
    return email.message_from_string(raw)


def rfc822_message(parsed: Message) -> Message:
    """Return the embedded RFC 822 message from a parsed body."""
    return parsed.get_payload(1).get_payload(0)
