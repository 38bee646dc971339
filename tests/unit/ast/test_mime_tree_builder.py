#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_mime_tree_builder.py
"""Unit tests for building the MIME part tree from a request."""

import pytest

from mimebody.ast import (
    AlternativePart,
    EmptyText,
    Envelope,
    RelatedPart,
    TextLeaf,
    build_attachments,
    build_metadata,
    build_text,
    build_tree,
    wrap_related,
)
from mimebody.request import Attachment, Draft, EmbeddedObject, MessageRequest


@pytest.mark.unit
class TestBuildText:
    """Tests for the text variant decision table."""

    @pytest.mark.parametrize(
        "plain, html, expected",
        [
            ("p", "h", AlternativePart),
            ("p", None, TextLeaf),
            (None, "h", TextLeaf),
            (None, None, EmptyText),
            ("", "", EmptyText),
            ("p", "", TextLeaf),
        ],
    )
    def test_variant_selection(self, plain, html, expected) -> None:
        """Test that exactly one variant is selected per combination."""
        assert isinstance(build_text(plain, html), expected)

    def test_alternative_order(self) -> None:
        """Test that plain is first and HTML last."""
        node = build_text("p", "h")
        assert node.plain == TextLeaf("plain", "p")
        assert node.html == TextLeaf("html", "h")

    def test_html_only_subtype(self) -> None:
        """Test that an HTML-only body is an html leaf."""
        assert build_text(None, "<p>x</p>") == TextLeaf("html", "<p>x</p>")


@pytest.mark.unit
class TestWrapRelated:
    """Tests for the related wrapping decision."""

    def test_no_objects_pass_through(self) -> None:
        """Test that the text section is returned unchanged."""
        text = TextLeaf("plain", "p")
        assert wrap_related(text, ()) is text

    def test_objects_keep_order(self) -> None:
        """Test that inline objects keep caller order."""
        objects = [EmbeddedObject(type="image/png", id=str(i), data="QQ==") for i in range(3)]
        node = wrap_related(EmptyText(), objects)
        assert isinstance(node, RelatedPart)
        assert [o.content_id for o in node.objects] == ["0", "1", "2"]

    def test_empty_name_dropped(self) -> None:
        """Test that an empty name counts as absent."""
        node = wrap_related(EmptyText(), [EmbeddedObject(type="image/png", id="a", data="QQ==", name="")])
        assert node.objects[0].name is None


@pytest.mark.unit
class TestBuildMetadata:
    """Tests for metadata node construction."""

    def test_draft_presence_without_id(self) -> None:
        """Test that an id-less draft still counts as present."""
        node = build_metadata(None, Draft())
        assert node.draft_present is True
        assert node.draft_id is None

    def test_thread_kept_on_node_without_draft(self) -> None:
        """Test that the node keeps the thread id; rendering decides to drop it."""
        node = build_metadata("t1", None)
        assert node.draft_present is False
        assert node.thread_id == "t1"


@pytest.mark.unit
class TestBuildTree:
    """Tests for complete tree construction."""

    def test_full_request_shape(self, full_request: MessageRequest) -> None:
        """Test the tree for a request using every nesting level."""
        tree = build_tree(full_request)

        assert isinstance(tree, Envelope)
        assert tree.metadata.draft_id == "r-123"
        assert tree.message.headers.headers == {"To": "a@b.com", "Subject": "Quarterly report"}
        assert isinstance(tree.message.body, RelatedPart)
        assert isinstance(tree.message.body.body, AlternativePart)
        assert len(tree.message.attachments) == 1

    def test_empty_request(self) -> None:
        """Test the tree for a request with nothing in it."""
        tree = build_tree(MessageRequest())
        assert isinstance(tree.message.body, EmptyText)
        assert tree.message.attachments == ()
        assert tree.metadata.draft_present is False

    def test_attachments_order(self) -> None:
        """Test that attachment nodes keep caller order."""
        nodes = build_attachments([Attachment(type="a/a", data="A"), Attachment(type="b/b", data="B")])
        assert [n.content_type for n in nodes] == ["a/a", "b/b"]
