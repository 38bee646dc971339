#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/ast/builder.py
"""Build the MIME part tree from a message request.

This is where the shape of the document is decided: which text variant is
used and whether the text is wrapped in a related envelope. Absent values are
judged by truthiness, so an empty string counts as not supplied. A draft is
present whenever it is not ``None``, even without an id.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from mimebody.ast.nodes import (
    AlternativePart,
    AttachmentPart,
    BodySection,
    EmptyText,
    Envelope,
    HeaderBlock,
    InlineObjectPart,
    MetadataPart,
    RelatedPart,
    Rfc822Part,
    TextLeaf,
    TextSection,
)
from mimebody.request import Attachment, Draft, EmbeddedObject, MessageRequest

logger = logging.getLogger(__name__)


def build_metadata(thread_id: Optional[str], draft: Optional[Draft]) -> MetadataPart:
    """Build the JSON metadata node.

    Parameters
    ----------
    thread_id : str or None
        Thread id; dropped from the output when ``draft`` is None
    draft : Draft or None
        Draft association

    Returns
    -------
    MetadataPart
        Metadata node

    """
    if thread_id and draft is None:
        logger.debug("threadId supplied without draft; it is not written to the metadata part")
    return MetadataPart(
        draft_present=draft is not None,
        draft_id=(draft.id or None) if draft is not None else None,
        thread_id=thread_id or None,
    )


def build_text(text_plain: Optional[str], text_html: Optional[str]) -> TextSection:
    """Select the text variant for the supplied bodies.

    ===========  ==========  ================
    text_plain   text_html   result
    ===========  ==========  ================
    present      present     AlternativePart
    present      absent      TextLeaf(plain)
    absent       present     TextLeaf(html)
    absent       absent      EmptyText
    ===========  ==========  ================

    """
    if text_plain and text_html:
        return AlternativePart(plain=TextLeaf("plain", text_plain), html=TextLeaf("html", text_html))
    if text_plain:
        return TextLeaf("plain", text_plain)
    if text_html:
        return TextLeaf("html", text_html)
    return EmptyText()


def wrap_related(text: TextSection, embedded: Sequence[EmbeddedObject]) -> BodySection:
    """Wrap the text section in a related envelope when inline objects exist.

    Without embedded objects the text section is returned unchanged.
    """
    if not embedded:
        return text
    objects = tuple(
        InlineObjectPart(content_type=obj.type, content_id=obj.id, data=obj.data, name=obj.name or None)
        for obj in embedded
    )
    return RelatedPart(body=text, objects=objects)


def build_attachments(attachments: Sequence[Attachment]) -> tuple[AttachmentPart, ...]:
    """Build attachment nodes in caller order."""
    return tuple(AttachmentPart(content_type=a.type, data=a.data, name=a.name or None) for a in attachments)


def build_tree(request: MessageRequest) -> Envelope:
    """Build the complete part tree for a request.

    Parameters
    ----------
    request : MessageRequest
        The message to serialize

    Returns
    -------
    Envelope
        Root of the part tree

    """
    text = build_text(request.text_plain, request.text_html)
    body = wrap_related(text, request.embedded)
    attachments = build_attachments(request.attachments)

    logger.debug(
        "Built MIME tree: text=%s, related=%s, inline_objects=%d, attachments=%d",
        type(text).__name__,
        isinstance(body, RelatedPart),
        len(request.embedded),
        len(attachments),
    )

    return Envelope(
        metadata=build_metadata(request.thread_id, request.draft),
        message=Rfc822Part(
            headers=HeaderBlock(headers=dict(request.headers)),
            body=body,
            attachments=attachments,
        ),
    )
