#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/ast/nodes.py
"""Node classes for the MIME part tree.

The tree describes which parts a message body consists of and how they nest.
It carries no boundary tokens or header syntax; those belong to the renderer.
Every structural decision (is there an alternative envelope, is the text
wrapped in a related envelope) is made once, when the tree is built, so each
node kind can be rendered in isolation.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

    Envelope
    ├── MetadataPart                 JSON side channel
    └── Rfc822Part
        ├── HeaderBlock
        ├── body: BodySection
        │   ├── EmptyText
        │   ├── TextLeaf             text/plain or text/html
        │   ├── AlternativePart      plain + html
        │   └── RelatedPart          TextSection + InlineObjectPart*
        └── AttachmentPart*

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from mimebody.constants import TextSubtype


class Node(ABC):
    """Base class for all MIME tree nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result of the visitor's processing

        """
        pass


@dataclass(frozen=True)
class HeaderBlock(Node):
    """Caller-supplied RFC 822 headers.

    Parameters
    ----------
    headers : dict[str, str], default = empty dict
        Header names and values in emission order

    """

    headers: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header block."""
        return visitor.visit_header_block(self)


@dataclass(frozen=True)
class MetadataPart(Node):
    """JSON metadata part carrying draft and thread association.

    The combination of fields yields one of four document shapes. A thread id
    is only ever written inside the ``message`` object, which exists only when
    a draft is present.

    Parameters
    ----------
    draft_present : bool, default = False
        Whether a draft was supplied (opens the ``message`` object)
    draft_id : str or None, default = None
        Id of the draft to update
    thread_id : str or None, default = None
        Thread to file the message into

    """

    draft_present: bool = False
    draft_id: Optional[str] = None
    thread_id: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this metadata part."""
        return visitor.visit_metadata_part(self)


@dataclass(frozen=True)
class EmptyText(Node):
    """Text section when neither a plain nor an HTML body was supplied."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this empty text section."""
        return visitor.visit_empty_text(self)


@dataclass(frozen=True)
class TextLeaf(Node):
    """Single text/plain or text/html part.

    Parameters
    ----------
    subtype : {"plain", "html"}
        Text subtype
    content : str
        Body text, written verbatim

    """

    subtype: TextSubtype
    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text leaf."""
        return visitor.visit_text_leaf(self)


@dataclass(frozen=True)
class AlternativePart(Node):
    """multipart/alternative envelope holding the plain and HTML bodies.

    Parameters
    ----------
    plain : TextLeaf
        Plain text alternative, always emitted first
    html : TextLeaf
        HTML alternative, always emitted last

    """

    plain: TextLeaf
    html: TextLeaf

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this alternative envelope."""
        return visitor.visit_alternative_part(self)


@dataclass(frozen=True)
class InlineObjectPart(Node):
    """Inline object inside a multipart/related envelope.

    Parameters
    ----------
    content_type : str or None
        MIME type of the object
    content_id : str or None
        Content-ID referenced from HTML as ``cid:``
    data : str or None
        Base64 payload
    name : str or None, default = None
        Display and file name

    """

    content_type: Optional[str]
    content_id: Optional[str]
    data: Optional[str]
    name: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline object."""
        return visitor.visit_inline_object_part(self)


TextSection = Union[EmptyText, TextLeaf, AlternativePart]


@dataclass(frozen=True)
class RelatedPart(Node):
    """multipart/related envelope wrapping a text section and its inline objects.

    Parameters
    ----------
    body : TextSection
        Composed text section, the first member of the envelope
    objects : tuple of InlineObjectPart
        Inline objects in caller order; never empty

    """

    body: TextSection
    objects: tuple[InlineObjectPart, ...]

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this related envelope."""
        return visitor.visit_related_part(self)


BodySection = Union[EmptyText, TextLeaf, AlternativePart, RelatedPart]


@dataclass(frozen=True)
class AttachmentPart(Node):
    """Attachment part inside the RFC 822 message.

    Parameters
    ----------
    content_type : str or None
        MIME type of the attachment
    data : str or None
        Base64 payload
    name : str or None, default = None
        File name

    """

    content_type: Optional[str]
    data: Optional[str]
    name: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this attachment."""
        return visitor.visit_attachment_part(self)


@dataclass(frozen=True)
class Rfc822Part(Node):
    """The message itself: headers, body section and attachments.

    Parameters
    ----------
    headers : HeaderBlock
        Caller headers
    body : BodySection
        Text section, possibly wrapped in a related envelope
    attachments : tuple of AttachmentPart, default = ()
        Attachments in caller order

    """

    headers: HeaderBlock
    body: BodySection
    attachments: tuple[AttachmentPart, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this message part."""
        return visitor.visit_rfc822_part(self)


@dataclass(frozen=True)
class Envelope(Node):
    """Root of the tree: the outer multipart document.

    Parameters
    ----------
    metadata : MetadataPart
        JSON side channel, always the first part
    message : Rfc822Part
        The message, always the second part

    """

    metadata: MetadataPart
    message: Rfc822Part

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this envelope."""
        return visitor.visit_envelope(self)
