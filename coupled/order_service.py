"""
Order service for the coupled approach.

This is the "before" picture. The service creates its own EmailSender, so:
- Customers can only ever be confirmed by email
- Adding SMS or Slack means editing this class
- Tests cannot replace the sender with a double

Compare to inverted/order_service.py, which is identical except that the
notifier is passed in.
"""

import logging
from typing import Optional

from shared.models import Order
from shared.sinks import LoggingSink, OutputSink

logger = logging.getLogger("order_service")

CONFIRMATION_MESSAGE = "Your order has been confirmed!"


class EmailSender:
    """A concrete email sender with no abstraction above it."""

    def __init__(self, sink: Optional[OutputSink] = None, from_addr: str = "orders@dip-demo.com"):
        self.sink = sink if sink is not None else LoggingSink("notifications")
        self.from_addr = from_addr

    def send_email(self, to: str, message: str) -> None:
        self.sink.write(f"[EMAIL] From: {self.from_addr} | To: {to} | {message}")


class CoupledOrderService:
    """
    Processes orders and always confirms them by email.

    Example:
        service = CoupledOrderService()
        service.process_order(order)  # email, and only ever email
    """

    def __init__(self, sink: Optional[OutputSink] = None):
        """
        Initialize the order service.

        Args:
            sink: Where both the processing trace and the email are written
        """
        self.sink = sink if sink is not None else LoggingSink("order_service")
        # The service decides the channel itself
        self.email_sender = EmailSender(sink=self.sink)

    def process_order(self, order: Order) -> None:
        """Process an order and email the customer a confirmation."""
        self.sink.write(f"Processing order {order.order_id}")
        logger.debug(f"Confirming {order.order_id} via hard-wired EmailSender")
        self.email_sender.send_email(order.customer_email, CONFIRMATION_MESSAGE)
