"""
Order service for the inverted approach.

This is the high-level component. It decides WHAT happens when an order is
processed (trace it, confirm it with the customer) but not HOW the customer
is reached.

Key insight for the demo:
- The notifier is passed in, never constructed here
- The service only ever calls notifier.send()
- Email, SMS, Slack, a composite, or a test double all work unchanged
"""

import logging
from typing import Optional

from inverted.notifiers import Notifier
from shared.errors import DeliveryError
from shared.models import Order
from shared.sinks import LoggingSink, OutputSink

logger = logging.getLogger("order_service")

CONFIRMATION_MESSAGE = "Your order has been confirmed!"


class OrderService:
    """
    Processes orders and confirms them through an injected Notifier.

    Example:
        service = OrderService(EmailNotifier())
        service.process_order(Order(
            customer_email="a@example.com",
            customer_phone="+1-555-0001",
            order_id="ORD-1",
        ))

        # Switching channel needs no change to OrderService:
        service = OrderService(SMSNotifier())
    """

    def __init__(self, notifier: Notifier, sink: Optional[OutputSink] = None):
        """
        Initialize the order service.

        Args:
            notifier: How customers are notified
            sink: Where processing traces are written (defaults to logging)
        """
        if notifier is None:
            raise TypeError("OrderService requires a notifier")
        self._notifier = notifier
        self.sink = sink if sink is not None else LoggingSink("order_service")

    @property
    def notifier(self) -> Notifier:
        """The injected notifier."""
        return self._notifier

    def process_order(self, order: Order) -> None:
        """
        Process an order and send the customer a confirmation.

        Args:
            order: The order to process

        Raises:
            DeliveryError: If the confirmation could not be delivered
        """
        self.sink.write(f"Processing order {order.order_id}")

        try:
            self._notifier.send(order.customer_email, CONFIRMATION_MESSAGE)
        except DeliveryError as e:
            logger.error(f"Confirmation for {order.order_id} failed: {e}")
            raise
