"""Pytest configuration and shared fixtures for the mimebody test suite."""

import os

import pytest
from utils import CSV_B64, MINIMAL_PNG_B64

from mimebody.request import Attachment, Draft, EmbeddedObject, MessageRequest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - bodies parsed back with the email package")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def full_request() -> MessageRequest:
    """Provide a request exercising every nesting level.

    Returns
    -------
    MessageRequest
        Draft, thread, headers, both bodies, one inline image and one attachment.

    """
    return MessageRequest(
        draft=Draft(id="r-123"),
        thread_id="t-456",
        headers={"To": "a@b.com", "Subject": "Quarterly report"},
        text_plain="See the chart.",
        text_html='<p>See the chart.</p><img src="cid:chart">',
        embedded=(EmbeddedObject(type="image/png", id="chart", name="chart.png", data=MINIMAL_PNG_B64),),
        attachments=(Attachment(type="text/csv", name="f.csv", data=CSV_B64),),
    )


@pytest.fixture
def scenario_request() -> dict:
    """Provide the plain text + one attachment request in API parameter form."""
    return {
        "textPlain": "hi",
        "headers": {"To": "a@b.com"},
        "attachments": [{"type": "text/csv", "name": "f.csv", "data": CSV_B64}],
    }
