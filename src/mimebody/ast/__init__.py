#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/ast/__init__.py
"""MIME part tree.

The module consists of:

- nodes: node classes describing the parts of the body and how they nest
- visitors: visitor base class for traversing the tree
- builder: builds the tree from a MessageRequest

Examples
--------
    >>> from mimebody.ast import build_tree
    >>> from mimebody.request import MessageRequest
    >>> tree = build_tree(MessageRequest(text_plain="hi", text_html="<p>hi</p>"))
    >>> type(tree.message.body).__name__
    'AlternativePart'

"""

from mimebody.ast.builder import build_attachments, build_metadata, build_text, build_tree, wrap_related
from mimebody.ast.nodes import (
    AlternativePart,
    AttachmentPart,
    BodySection,
    EmptyText,
    Envelope,
    HeaderBlock,
    InlineObjectPart,
    MetadataPart,
    Node,
    RelatedPart,
    Rfc822Part,
    TextLeaf,
    TextSection,
)
from mimebody.ast.visitors import NodeVisitor

__all__ = [
    "AlternativePart",
    "AttachmentPart",
    "BodySection",
    "EmptyText",
    "Envelope",
    "HeaderBlock",
    "InlineObjectPart",
    "MetadataPart",
    "Node",
    "NodeVisitor",
    "RelatedPart",
    "Rfc822Part",
    "TextLeaf",
    "TextSection",
    "build_attachments",
    "build_metadata",
    "build_text",
    "build_tree",
    "wrap_related",
]
