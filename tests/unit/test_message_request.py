#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_message_request.py
"""Unit tests for the MessageRequest value types."""

import logging

import pytest

from mimebody import Attachment, Draft, EmbeddedObject, MessageRequest, ValidationError


@pytest.mark.unit
class TestFromDict:
    """Tests for building requests from API parameter mappings."""

    def test_camel_case_keys(self) -> None:
        """Test the wire names used by the upload API."""
        request = MessageRequest.from_dict(
            {
                "draft": {"id": "r1"},
                "threadId": "t1",
                "textPlain": "plain",
                "textHtml": "<p>html</p>",
                "headers": {"To": "a@b.com"},
                "embedded": [{"type": "image/png", "id": "img", "data": "QQ==", "name": "a.png"}],
                "attachments": [{"type": "text/csv", "data": "MSwyLDM=", "name": "f.csv"}],
            }
        )
        assert request.draft == Draft(id="r1")
        assert request.thread_id == "t1"
        assert request.text_plain == "plain"
        assert request.text_html == "<p>html</p>"
        assert request.headers == {"To": "a@b.com"}
        assert request.embedded == (EmbeddedObject(type="image/png", id="img", data="QQ==", name="a.png"),)
        assert request.attachments == (Attachment(type="text/csv", data="MSwyLDM=", name="f.csv"),)

    def test_snake_case_keys(self) -> None:
        """Test that field names are accepted too."""
        request = MessageRequest.from_dict({"thread_id": "t1", "text_plain": "p", "text_html": "h"})
        assert (request.thread_id, request.text_plain, request.text_html) == ("t1", "p", "h")

    def test_empty_mapping(self) -> None:
        """Test that every field is optional at the top level."""
        assert MessageRequest.from_dict({}) == MessageRequest()

    def test_empty_draft_is_present(self) -> None:
        """Test that an empty draft mapping still counts as a draft."""
        assert MessageRequest.from_dict({"draft": {}}).draft == Draft()

    def test_header_order_preserved(self) -> None:
        """Test that header insertion order survives parsing."""
        request = MessageRequest.from_dict({"headers": {"Subject": "s", "To": "t", "Cc": "c"}})
        assert list(request.headers) == ["Subject", "To", "Cc"]

    def test_none_header_value_becomes_empty(self) -> None:
        """Test that a null header value is written as an empty value."""
        assert MessageRequest.from_dict({"headers": {"X-Empty": None}}).headers == {"X-Empty": ""}

    def test_missing_required_fields_kept_as_none(self) -> None:
        """Test that required fields are not enforced while parsing."""
        request = MessageRequest.from_dict({"attachments": [{"name": "x"}]})
        assert request.attachments[0].type is None
        assert request.attachments[0].data is None

    def test_unknown_key_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that unknown keys are ignored with a warning."""
        with caplog.at_level(logging.WARNING, logger="mimebody.request"):
            request = MessageRequest.from_dict({"textPlain": "hi", "bcc": "x"})
        assert request.text_plain == "hi"
        assert "bcc" in caplog.text

    @pytest.mark.parametrize(
        "data, field",
        [
            ({"textPlain": 5}, "textPlain"),
            ({"threadId": ["t"]}, "threadId"),
            ({"draft": "r1"}, "draft"),
            ({"draft": {"id": 3}}, "draft.id"),
            ({"headers": ["To"]}, "headers"),
            ({"headers": {"To": 1}}, "headers.To"),
            ({"attachments": "f.csv"}, "attachments"),
            ({"attachments": ["f.csv"]}, "attachments[0]"),
            ({"embedded": [{"id": 1}]}, "embedded[0].id"),
        ],
    )
    def test_wrong_types(self, data: dict, field: str) -> None:
        """Test that mistyped values are rejected with their field path."""
        with pytest.raises(ValidationError) as exc_info:
            MessageRequest.from_dict(data)
        assert exc_info.value.parameter_name == field

    def test_non_mapping_rejected(self) -> None:
        """Test that the request itself must be a mapping."""
        with pytest.raises(ValidationError):
            MessageRequest.from_dict(["textPlain"])  # type: ignore[arg-type]


@pytest.mark.unit
class TestValidate:
    """Tests for required field validation."""

    def test_valid_request(self, full_request: MessageRequest) -> None:
        """Test that a complete request passes."""
        full_request.validate()

    def test_reports_first_missing_field(self) -> None:
        """Test the field path of the first offending item."""
        request = MessageRequest(
            attachments=[
                Attachment(type="text/csv", data="QQ=="),
                Attachment(type="text/csv", data=None),  # type: ignore[arg-type]
            ]
        )
        with pytest.raises(ValidationError, match=r"attachments\[1\]\.data") as exc_info:
            request.validate()
        assert exc_info.value.parameter_name == "attachments[1].data"

    def test_non_string_payload(self) -> None:
        """Test that payloads must already be base64 text."""
        request = MessageRequest(embedded=[EmbeddedObject(type="image/png", id="a", data=b"QQ==")])  # type: ignore[arg-type]
        with pytest.raises(ValidationError) as exc_info:
            request.validate()
        assert exc_info.value.parameter_name == "embedded[0].data"
        assert exc_info.value.parameter_value == b"QQ=="

    def test_empty_strings_are_accepted(self) -> None:
        """Test that only None and non-strings fail; empty strings pass."""
        MessageRequest(attachments=[Attachment(type="", data="")]).validate()


@pytest.mark.unit
class TestRequestValues:
    """Tests for construction and serialization of requests."""

    def test_sequences_become_tuples(self) -> None:
        """Test that list inputs are frozen."""
        request = MessageRequest(attachments=[Attachment(type="a/b", data="QQ==")], embedded=None)  # type: ignore[arg-type]
        assert isinstance(request.attachments, tuple)
        assert request.embedded == ()

    def test_headers_copied(self) -> None:
        """Test that later changes to the caller's mapping are not seen."""
        headers = {"To": "a@b.com"}
        request = MessageRequest(headers=headers)
        headers["Cc"] = "c@d.com"
        assert request.headers == {"To": "a@b.com"}

    def test_to_dict_omits_absent_fields(self) -> None:
        """Test that only supplied fields appear in the mapping."""
        request = MessageRequest(draft=Draft(), text_plain="hi", attachments=[Attachment(type="text/csv", data="QQ==")])
        assert request.to_dict() == {
            "draft": {},
            "textPlain": "hi",
            "attachments": [{"type": "text/csv", "data": "QQ=="}],
        }

    def test_to_dict_from_dict_agree(self, full_request: MessageRequest) -> None:
        """Test that the API mapping describes the same request."""
        assert MessageRequest.from_dict(full_request.to_dict()) == full_request
