"""
Shared pytest fixtures for the dependency inversion demo tests.

These fixtures provide fresh sinks, orders and notifiers for every test so
recorded output never leaks between tests.
"""

import pytest

from inverted.notifiers import (
    EmailNotifier,
    RecordingNotifier,
    SlackNotifier,
    SMSNotifier,
)
from shared.models import Order
from shared.sinks import MemorySink


@pytest.fixture
def sink() -> MemorySink:
    """Fresh in-memory sink for each test."""
    return MemorySink()


# =============================================================================
# Order Fixtures
# =============================================================================

@pytest.fixture
def order() -> Order:
    """Alice's order - the standard example dispatched in the demos."""
    return Order(
        customer_email="a@x.com",
        customer_phone="+1",
        order_id="ORD-1",
    )


@pytest.fixture
def other_order() -> Order:
    """Bob's order, for tests that dispatch more than one."""
    return Order(
        customer_email="bob@example.com",
        customer_phone="+1-555-0002",
        order_id="ORD-2",
    )


# =============================================================================
# Notifier Fixtures
# =============================================================================

@pytest.fixture
def email_notifier(sink: MemorySink) -> EmailNotifier:
    """Email notifier writing to the test sink."""
    return EmailNotifier(sink=sink)


@pytest.fixture
def sms_notifier(sink: MemorySink) -> SMSNotifier:
    """SMS notifier writing to the test sink."""
    return SMSNotifier(sink=sink)


@pytest.fixture
def slack_notifier(sink: MemorySink) -> SlackNotifier:
    """Slack notifier writing to the test sink."""
    return SlackNotifier(sink=sink)


@pytest.fixture
def mock_notifier() -> RecordingNotifier:
    """Fresh recording test double."""
    return RecordingNotifier()
