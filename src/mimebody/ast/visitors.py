#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/ast/visitors.py
"""Visitor pattern base class for MIME tree traversal.

Visitors keep algorithms (rendering, inspection) separate from the node
structure. Every node kind has one ``visit_*`` method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for MIME tree visitors.

    Examples
    --------
    Visitor that counts attachments:

        >>> class AttachmentCounter(NodeVisitor):
        ...     def visit_rfc822_part(self, node):
        ...         return len(node.attachments)
        ...     # remaining visit_* methods omitted
        >>> tree.message.accept(AttachmentCounter())

    """

    @abstractmethod
    def visit_envelope(self, node: Envelope) -> Any:
        """Visit the root Envelope node."""
        pass

    @abstractmethod
    def visit_metadata_part(self, node: MetadataPart) -> Any:
        """Visit a MetadataPart node."""
        pass

    @abstractmethod
    def visit_rfc822_part(self, node: Rfc822Part) -> Any:
        """Visit an Rfc822Part node."""
        pass

    @abstractmethod
    def visit_header_block(self, node: HeaderBlock) -> Any:
        """Visit a HeaderBlock node."""
        pass

    @abstractmethod
    def visit_empty_text(self, node: EmptyText) -> Any:
        """Visit an EmptyText node."""
        pass

    @abstractmethod
    def visit_text_leaf(self, node: TextLeaf) -> Any:
        """Visit a TextLeaf node."""
        pass

    @abstractmethod
    def visit_alternative_part(self, node: AlternativePart) -> Any:
        """Visit an AlternativePart node."""
        pass

    @abstractmethod
    def visit_related_part(self, node: RelatedPart) -> Any:
        """Visit a RelatedPart node."""
        pass

    @abstractmethod
    def visit_inline_object_part(self, node: InlineObjectPart) -> Any:
        """Visit an InlineObjectPart node."""
        pass

    @abstractmethod
    def visit_attachment_part(self, node: AttachmentPart) -> Any:
        """Visit an AttachmentPart node."""
        pass
