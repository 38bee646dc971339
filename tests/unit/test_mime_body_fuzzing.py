"""Property-based fuzzing tests for MIME body serialization.

This test module uses Hypothesis to generate random message requests and
checks properties that must hold for every input.

Test Coverage:
- Property: Output is a pure function of the request
- Property: The outer envelope frames every body
- Property: One part per attachment and inline object
- Property: Attachments parse back in caller order
- Property: Bodies free of delimiter lines parse back with the email package
"""

import string

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st
from utils import parse_body, rfc822_message

from mimebody import Attachment, Draft, EmbeddedObject, MessageRequest, create_body

SAFE_TEXT = st.text(alphabet=string.ascii_letters + string.digits + " .,", min_size=0, max_size=40)
SAFE_TOKEN = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=12)

attachments_strategy = st.lists(
    st.builds(Attachment, type=st.just("application/octet-stream"), data=SAFE_TOKEN, name=st.none() | SAFE_TOKEN),
    max_size=4,
)
embedded_strategy = st.lists(
    st.builds(EmbeddedObject, type=st.just("image/png"), id=SAFE_TOKEN, data=SAFE_TOKEN, name=st.none() | SAFE_TOKEN),
    max_size=3,
)
requests_strategy = st.builds(
    MessageRequest,
    draft=st.none() | st.builds(Draft, id=st.none() | SAFE_TOKEN),
    headers=st.dictionaries(SAFE_TOKEN, SAFE_TEXT, max_size=3),
    thread_id=st.none() | SAFE_TOKEN,
    text_plain=st.none() | SAFE_TEXT,
    text_html=st.none() | SAFE_TEXT,
    embedded=embedded_strategy,
    attachments=attachments_strategy,
)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestMimeBodyProperties:
    """Property-based tests for create_body."""

    @given(requests_strategy)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_output_is_deterministic(self, request_obj):
        """Property: Equal requests always produce identical bodies."""
        assert create_body(request_obj) == create_body(request_obj)

    @given(requests_strategy)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_outer_envelope_frames_body(self, request_obj):
        """Property: Bodies open with the outer delimiter and end with its close."""
        body = create_body(request_obj)
        assert body.startswith('--foo_bar_baz\r\nContent-Type: application/json; charset="UTF-8"\r\n\r\n{\r\n')
        assert body.endswith("--foo_bar--\r\n\r\n--foo_bar_baz--")
        assert body.count("--foo_bar_baz\r\n") == 2

    @given(requests_strategy)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_one_part_per_attachment(self, request_obj):
        """Property: Each attachment and inline object gets exactly one part."""
        body = create_body(request_obj)
        assert body.count("Content-Disposition: attachment") == len(request_obj.attachments)
        assert body.count("Content-Disposition: inline") == len(request_obj.embedded)

    @given(requests_strategy)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None)
    def test_parses_with_email_package(self, request_obj):
        """Property: The inner message has the text section, then the attachments in caller order."""
        parsed = parse_body(create_body(request_obj))
        assert len(parsed.get_payload()) == 2
        assert parsed.get_payload(0).get_content_type() == "application/json"

        message = rfc822_message(parsed)
        assert message.get_content_type() == "multipart/mixed"
        parts = message.get_payload()
        assert len(parts) == 1 + len(request_obj.attachments)
        for part, attachment in zip(parts[1:], request_obj.attachments):
            assert part.get_payload().strip() == attachment.data
