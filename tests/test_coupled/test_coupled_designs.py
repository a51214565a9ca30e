"""
Tests for the coupled designs.

These tests pin down what the "bad" examples do, and what they cannot do:
their collaborator is always the one they built themselves.
"""

from coupled.order_service import CONFIRMATION_MESSAGE, CoupledOrderService, EmailSender
from coupled.switch import BadSwitch, Light
from shared.models import Order
from shared.sinks import LoggingSink, MemorySink


class TestBadSwitch:
    """Tests for BadSwitch."""

    def test_press_turns_on_light(self, sink: MemorySink):
        """Test that pressing turns on the built-in light."""
        BadSwitch(sink=sink).press()

        assert sink.lines == ["Light is ON"]

    def test_builds_its_own_light(self):
        """Test that the switch constructs a concrete Light internally."""
        switch = BadSwitch()

        assert type(switch.light) is Light
        assert isinstance(switch.light.sink, LoggingSink)

    def test_every_switch_gets_a_new_light(self):
        """Test that the light is not shared or injectable."""
        assert BadSwitch().light is not BadSwitch().light


class TestCoupledOrderService:
    """Tests for CoupledOrderService."""

    def test_process_order_emails_customer(self, order: Order, sink: MemorySink):
        """Test the trace and the hard-wired email."""
        CoupledOrderService(sink=sink).process_order(order)

        assert sink.lines == [
            "Processing order ORD-1",
            f"[EMAIL] From: orders@dip-demo.com | To: a@x.com | {CONFIRMATION_MESSAGE}",
        ]

    def test_always_uses_email_sender(self):
        """Test that the channel is fixed at construction."""
        service = CoupledOrderService()

        assert type(service.email_sender) is EmailSender

    def test_phone_is_never_used(self, order: Order, sink: MemorySink):
        """Test that SMS is unreachable without editing the class."""
        CoupledOrderService(sink=sink).process_order(order)

        assert not any(order.customer_phone in line for line in sink.lines)


class TestEmailSender:
    """Tests for the concrete EmailSender."""

    def test_send_email(self, sink: MemorySink):
        """Test output line."""
        EmailSender(sink=sink, from_addr="shop@example.com").send_email("a@x.com", "Hi")

        assert sink.lines == ["[EMAIL] From: shop@example.com | To: a@x.com | Hi"]
