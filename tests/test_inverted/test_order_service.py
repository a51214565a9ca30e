"""
Tests for the inverted OrderService.

These tests verify the core property of the demo: OrderService works with
any Notifier and never cares which one it was given.
"""

import logging

import pytest

from inverted.notifiers import (
    CompositeNotifier,
    EmailNotifier,
    RecordingNotifier,
    SMSNotifier,
)
from inverted.order_service import CONFIRMATION_MESSAGE, OrderService
from shared.errors import DeliveryError, TransportUnavailableError
from shared.models import Order
from shared.sinks import LoggingSink, MemorySink


class TestProcessOrder:
    """Tests for process_order."""

    def test_example_scenario(self, order: Order, mock_notifier: RecordingNotifier):
        """Test the canonical example: ORD-1 through a mock."""
        OrderService(mock_notifier).process_order(order)

        assert mock_notifier.invoked is True
        assert mock_notifier.last_recipient == "a@x.com"

    def test_exactly_one_send(self, order: Order, mock_notifier: RecordingNotifier):
        """Test one send to the customer email with the confirmation message."""
        OrderService(mock_notifier).process_order(order)

        assert mock_notifier.calls == [(order.customer_email, CONFIRMATION_MESSAGE)]

    def test_returns_nothing(self, order: Order, mock_notifier: RecordingNotifier):
        """Test that processing has no result value."""
        assert OrderService(mock_notifier).process_order(order) is None

    def test_writes_trace(self, order: Order, mock_notifier: RecordingNotifier, sink: MemorySink):
        """Test the processing trace goes to the injected sink."""
        OrderService(mock_notifier, sink=sink).process_order(order)

        assert sink.lines == ["Processing order ORD-1"]

    def test_trace_before_send(self, order: Order, sink: MemorySink):
        """Test that the trace is written before the notifier is called."""
        email = EmailNotifier(sink=sink)

        OrderService(email, sink=sink).process_order(order)

        assert sink.lines[0] == "Processing order ORD-1"
        assert sink.lines[1].startswith("[EMAIL]")
        assert "To: a@x.com" in sink.lines[1]

    def test_multiple_orders(
        self,
        order: Order,
        other_order: Order,
        mock_notifier: RecordingNotifier,
    ):
        """Test one send per processed order."""
        service = OrderService(mock_notifier)

        service.process_order(order)
        service.process_order(other_order)

        assert [recipient for recipient, _ in mock_notifier.calls] == [
            "a@x.com",
            "bob@example.com",
        ]

    def test_default_sink_logs(self, order: Order, mock_notifier: RecordingNotifier, caplog):
        """Test that the trace is logged when no sink is given."""
        service = OrderService(mock_notifier)
        assert isinstance(service.sink, LoggingSink)

        with caplog.at_level(logging.INFO, logger="order_service"):
            service.process_order(order)

        assert any("Processing order ORD-1" in r.message for r in caplog.records)


class TestSubstitutability:
    """Tests that swapping notifiers needs no change to OrderService."""

    def test_swap_between_calls(self, order: Order):
        """
        Test that a different notifier receives the second order.

        The notifier is fixed for a service's lifetime (read-only property),
        so swapping means wiring a new OrderService around the other
        notifier; OrderService itself is unchanged.
        """
        first, second = RecordingNotifier(), RecordingNotifier()

        OrderService(first).process_order(order)
        OrderService(second).process_order(order)

        assert first.call_count == 1
        assert second.call_count == 1

    def test_email_and_sms(self, order: Order, sink: MemorySink):
        """Test the same service code driving different channels."""
        OrderService(EmailNotifier(sink=sink), sink=sink).process_order(order)
        OrderService(SMSNotifier(sink=sink), sink=sink).process_order(order)

        channels = [line.split("]")[0] for line in sink.lines if line.startswith("[")]
        assert channels == ["[EMAIL", "[SMS"]

    def test_composite(self, order: Order):
        """Test that a composite is a valid substitute."""
        recorders = [RecordingNotifier(), RecordingNotifier()]

        OrderService(CompositeNotifier(recorders)).process_order(order)

        assert all(r.last_recipient == order.customer_email for r in recorders)

    def test_notifier_exposed(self, mock_notifier: RecordingNotifier):
        """Test that the injected notifier is the one held."""
        assert OrderService(mock_notifier).notifier is mock_notifier

    def test_requires_notifier(self):
        """Test that a notifier must be injected."""
        with pytest.raises(TypeError):
            OrderService(None)


class TestDeliveryFailures:
    """Tests for error propagation."""

    def test_error_propagates_unchanged(self, order: Order):
        """Test that the notifier's DeliveryError reaches the caller as-is."""
        error = TransportUnavailableError("down", channel="email")

        with pytest.raises(DeliveryError) as exc_info:
            OrderService(RecordingNotifier(error=error)).process_order(order)

        assert exc_info.value is error

    def test_error_is_logged(self, order: Order, caplog):
        """Test that the failure is logged with the order id."""
        service = OrderService(EmailNotifier(sink=MemorySink(), fail_rate=1.0))

        with caplog.at_level(logging.ERROR, logger="order_service"):
            with pytest.raises(TransportUnavailableError):
                service.process_order(order)

        assert any(
            r.name == "order_service" and "ORD-1" in r.message
            for r in caplog.records
        )
