#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/renderers/mime.py
"""MIME rendering from the part tree.

This module provides the MimeRenderer class, which serializes the part tree
built by :func:`mimebody.ast.build_tree` into the nested multipart body
accepted by the message-store upload endpoint.

Document layout
---------------
The outer document has no headers of its own; its boundary is declared by
the HTTP request carrying it::

    --<outer>
    Content-Type: application/json; charset="UTF-8"

    {<metadata>}

    --<outer>
    Content-Type: message/rfc822

    Content-Type: multipart/mixed; boundary="<rfc822>"
    <caller headers>

    --<rfc822>
    <text section, alternative or related envelope>

    <attachment parts>
    --<rfc822>--

    --<outer>--

Every line ends with CRLF. Caller strings are written verbatim: no escaping,
folding or encoding is applied, so none of them may contain a boundary token.

"""

from __future__ import annotations

import logging
from typing import Optional

from mimebody.ast.nodes import (
    AlternativePart,
    AttachmentPart,
    EmptyText,
    Envelope,
    HeaderBlock,
    InlineObjectPart,
    MetadataPart,
    RelatedPart,
    Rfc822Part,
    TextLeaf,
)
from mimebody.ast.visitors import NodeVisitor
from mimebody.constants import (
    BASE64_TRANSFER_ENCODING_HEADER,
    BLANK_LINE,
    CLOSE_DELIMITER_SUFFIX,
    CRLF,
    DELIMITER_PREFIX,
    JSON_CONTENT_TYPE_HEADER,
    MIME_VERSION_HEADER,
    MULTIPART_CONTENT_TYPE_TEMPLATE,
    RFC822_CONTENT_TYPE_HEADER,
    TEXT_CONTENT_TYPE_TEMPLATE,
    TEXT_TRANSFER_ENCODING_HEADER,
)
from mimebody.options.mime import MimeRendererOptions
from mimebody.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)


def _delimiter(boundary: str) -> str:
    return DELIMITER_PREFIX + boundary + CRLF


def _close_delimiter(boundary: str) -> str:
    return DELIMITER_PREFIX + boundary + CLOSE_DELIMITER_SUFFIX


def _multipart_header(subtype: str, boundary: str) -> str:
    return MULTIPART_CONTENT_TYPE_TEMPLATE.format(subtype=subtype, boundary=boundary)


def _param(name: str, value: Optional[str]) -> str:
    """Render an optional ``; name="value"`` header parameter."""
    return f'; {name}="{value}"' if value else ""


def _text(value: Optional[str]) -> str:
    # Missing required values only reach the renderer in lenient mode
    return value if value is not None else ""


class MimeRenderer(NodeVisitor, BaseRenderer):
    """Render the part tree to a nested MIME multipart string.

    Each ``visit_*`` method returns the text of one node and has no side
    effects, so a renderer instance can be shared freely.

    Parameters
    ----------
    options : MimeRendererOptions or None, default = None
        Rendering options; only ``boundaries`` affects the output

    Examples
    --------
        >>> from mimebody.ast import build_tree
        >>> from mimebody.request import MessageRequest
        >>> body = MimeRenderer().render_to_string(build_tree(MessageRequest(text_plain="hi")))
        >>> body.startswith("--foo_bar_baz\\r\\n")
        True

    """

    def __init__(self, options: MimeRendererOptions | None = None):
        """Initialize the MIME renderer with options."""
        BaseRenderer._validate_options_type(options, MimeRendererOptions, "mime")
        options = options or MimeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MimeRendererOptions = options

    def render_to_string(self, doc: Envelope) -> str:
        """Render the part tree to a string.

        Parameters
        ----------
        doc : Envelope
            Root of the part tree

        Returns
        -------
        str
            The complete MIME body

        """
        body = doc.accept(self)
        logger.debug("Rendered MIME body: %d characters", len(body))
        return body

    def visit_envelope(self, node: Envelope) -> str:
        """Render the outer envelope: metadata part, then message part."""
        outer = self.options.boundaries.outer
        return "".join(
            [
                _delimiter(outer),
                node.metadata.accept(self),
                BLANK_LINE,
                _delimiter(outer),
                node.message.accept(self),
                _close_delimiter(outer),
            ]
        )

    def visit_metadata_part(self, node: MetadataPart) -> str:
        """Render the JSON metadata part.

        ``threadId`` only appears inside the ``message`` object, which only
        exists when a draft was supplied.
        """
        fragments = [JSON_CONTENT_TYPE_HEADER, BLANK_LINE, "{", CRLF]
        if node.draft_id:
            fragments += [f'"id": "{node.draft_id}",', CRLF]
        if node.draft_present:
            fragments += ['"message": {', CRLF]
            if node.thread_id:
                fragments += [f'  "threadId": "{node.thread_id}"', CRLF]
            fragments += ["}", CRLF]
        fragments.append("}")
        return "".join(fragments)

    def visit_rfc822_part(self, node: Rfc822Part) -> str:
        """Render the message: its multipart/mixed declaration, headers, body and attachments."""
        boundary = self.options.boundaries.rfc822
        return "".join(
            [
                RFC822_CONTENT_TYPE_HEADER,
                BLANK_LINE,
                _multipart_header("mixed", boundary),
                CRLF,
                node.headers.accept(self),
                CRLF,
                _delimiter(boundary),
                node.body.accept(self),
                BLANK_LINE,
                *(attachment.accept(self) for attachment in node.attachments),
                _close_delimiter(boundary),
                BLANK_LINE,
            ]
        )

    def visit_header_block(self, node: HeaderBlock) -> str:
        """Render ``name: value`` lines in mapping order; empty mapping gives ``""``."""
        return "".join(f"{name}: {value}{CRLF}" for name, value in node.headers.items())

    def visit_empty_text(self, node: EmptyText) -> str:
        """Render an absent text section as the empty string."""
        return ""

    def visit_text_leaf(self, node: TextLeaf) -> str:
        """Render a text/plain or text/html part with the body written verbatim."""
        return "".join(
            [
                TEXT_CONTENT_TYPE_TEMPLATE.format(subtype=node.subtype),
                CRLF,
                MIME_VERSION_HEADER,
                CRLF,
                TEXT_TRANSFER_ENCODING_HEADER,
                BLANK_LINE,
                node.content,
            ]
        )

    def visit_alternative_part(self, node: AlternativePart) -> str:
        """Render the multipart/alternative envelope, plain part first."""
        boundary = self.options.boundaries.alternative
        return "".join(
            [
                _multipart_header("alternative", boundary),
                BLANK_LINE,
                _delimiter(boundary),
                node.plain.accept(self),
                BLANK_LINE,
                _delimiter(boundary),
                node.html.accept(self),
                BLANK_LINE,
                _close_delimiter(boundary),
            ]
        )

    def visit_related_part(self, node: RelatedPart) -> str:
        """Render the multipart/related envelope: text section, then inline objects."""
        boundary = self.options.boundaries.related
        return "".join(
            [
                _multipart_header("related", boundary),
                BLANK_LINE,
                _delimiter(boundary),
                node.body.accept(self),
                BLANK_LINE,
                *(obj.accept(self) for obj in node.objects),
                _close_delimiter(boundary),
            ]
        )

    def visit_inline_object_part(self, node: InlineObjectPart) -> str:
        """Render one inline object member of the related envelope."""
        return "".join(
            [
                _delimiter(self.options.boundaries.related),
                f"Content-Type: {_text(node.content_type)}{_param('name', node.name)}",
                CRLF,
                MIME_VERSION_HEADER,
                CRLF,
                f"Content-ID: <{_text(node.content_id)}>",
                CRLF,
                BASE64_TRANSFER_ENCODING_HEADER,
                CRLF,
                f"Content-Disposition: inline{_param('filename', node.name)}",
                BLANK_LINE,
                _text(node.data),
                BLANK_LINE,
            ]
        )

    def visit_attachment_part(self, node: AttachmentPart) -> str:
        """Render one attachment; the enclosing message supplies the closing delimiter."""
        return "".join(
            [
                _delimiter(self.options.boundaries.rfc822),
                f"Content-Type: {_text(node.content_type)}",
                CRLF,
                MIME_VERSION_HEADER,
                CRLF,
                BASE64_TRANSFER_ENCODING_HEADER,
                CRLF,
                f"Content-Disposition: attachment{_param('filename', node.name)}",
                BLANK_LINE,
                _text(node.data),
                BLANK_LINE,
            ]
        )
