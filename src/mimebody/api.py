#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/api.py
"""Public entry points for serializing message requests.

``create_body`` is the single operation of the library: one request in, one
MIME body out. Validation and collision checks, when enabled, run before any
output is produced.

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from mimebody.ast.builder import build_tree
from mimebody.exceptions import BoundaryCollisionError
from mimebody.options.mime import MimeRendererOptions
from mimebody.renderers.mime import MimeRenderer
from mimebody.request import MessageRequest
from mimebody.utils.boundaries import find_boundary_collisions

logger = logging.getLogger(__name__)


def create_body(
    request: Union[MessageRequest, Mapping[str, Any]],
    options: MimeRendererOptions | None = None,
) -> str:
    """Serialize a message request into the nested MIME multipart body.

    Parameters
    ----------
    request : MessageRequest or Mapping
        The message to serialize. Mappings use the API's parameter names
        (``draft``, ``headers``, ``threadId``, ``textPlain``, ``textHtml``,
        ``embedded``, ``attachments``).
    options : MimeRendererOptions or None, default = None
        Rendering options; defaults use the fixed boundary tokens, validate
        required fields and skip the collision scan

    Returns
    -------
    str
        The MIME body with CRLF line endings

    Raises
    ------
    ValidationError
        If a required field is missing and ``validate_required_fields`` is set,
        or a mapping field has the wrong type
    BoundaryCollisionError
        If ``check_boundary_collisions`` is set and a boundary token appears
        in caller content

    Examples
    --------
        >>> body = create_body({
        ...     "textPlain": "hi",
        ...     "headers": {"To": "a@b.com"},
        ...     "attachments": [{"type": "text/csv", "name": "f.csv", "data": "MSwyLDM="}],
        ... })
        >>> 'Content-Disposition: attachment; filename="f.csv"' in body
        True

    """
    options = options or MimeRendererOptions()
    if not isinstance(request, MessageRequest):
        request = MessageRequest.from_dict(request)

    if options.validate_required_fields:
        request.validate()

    if options.check_boundary_collisions:
        collisions = find_boundary_collisions(request, options.boundaries)
        if collisions:
            raise BoundaryCollisionError(collisions)

    return MimeRenderer(options).render_to_string(build_tree(request))


def create_body_bytes(
    request: Union[MessageRequest, Mapping[str, Any]],
    options: MimeRendererOptions | None = None,
) -> bytes:
    """Serialize a message request and encode the body as UTF-8.

    See :func:`create_body` for parameters and errors.
    """
    return create_body(request, options).encode("utf-8")
