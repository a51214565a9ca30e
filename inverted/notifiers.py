"""
Notifier abstraction and its implementations.

This is the "abstraction" half of dependency inversion. High-level code
(OrderService) depends only on Notifier.send; everything below it is a
detail that can be swapped without touching the high-level code:
- EmailNotifier, SMSNotifier, SlackNotifier: simulated channels
- CompositeNotifier: fans one send out to several notifiers
- RecordingNotifier: test double that remembers how it was called

In a real system the channels would integrate with services like:
- Email: SendGrid, AWS SES, Mailgun
- SMS: Twilio, AWS SNS, Vonage
- Slack: Slack Web API (chat.postMessage)

Design decisions:
- Channels write to an injected OutputSink instead of printing
- Channels keep no per-send state; only their configuration
- Channel failures can be simulated with fail_rate, and raise DeliveryError
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

from shared.errors import (
    CompositeDeliveryError,
    DeliveryError,
    InvalidRecipientError,
    TransportUnavailableError,
)
from shared.models import ChannelType
from shared.sinks import LoggingSink, OutputSink

logger = logging.getLogger("notifications")


class Notifier(ABC):
    """
    Anything that can deliver a message to a recipient.

    Implementations raise DeliveryError (or a subclass) when the message
    cannot be delivered. They never return a value.
    """

    @abstractmethod
    def send(self, recipient: str, message: str) -> None:
        """
        Deliver a message.

        Args:
            recipient: Who to notify. Format depends on the channel
                (email address, phone number, Slack handle) and is not
                validated beyond being non-empty.
            message: Message content

        Raises:
            DeliveryError: If the message could not be delivered
        """


# =============================================================================
# Simulated Channels
# =============================================================================

class ChannelNotifier(Notifier):
    """
    Base for the simulated channels.

    Handles recipient checks and simulated transport failures; subclasses
    only format the line that stands in for the real external call.
    """

    channel: ChannelType

    def __init__(self, sink: Optional[OutputSink] = None, fail_rate: float = 0.0):
        """
        Initialize the channel.

        Args:
            sink: Where to write the simulated send (defaults to logging)
            fail_rate: Probability of send failure (0.0 to 1.0), for testing.
        """
        if not 0.0 <= fail_rate <= 1.0:
            raise ValueError(f"fail_rate must be between 0.0 and 1.0, got {fail_rate}")
        self.sink = sink if sink is not None else LoggingSink()
        self.fail_rate = fail_rate

    def send(self, recipient: str, message: str) -> None:
        tag = self.channel.value.upper()

        if not recipient or not recipient.strip():
            logger.error(f"[{tag} FAILED] Empty recipient")
            raise InvalidRecipientError(
                f"{self.channel.value} recipient must not be empty",
                recipient=recipient,
                channel=self.channel.value,
            )

        # Simulate potential failure
        if random.random() < self.fail_rate:
            logger.error(f"[{tag} FAILED] To: {recipient} | Error: transport unavailable")
            raise TransportUnavailableError(
                f"Simulated {self.channel.value} delivery failure",
                recipient=recipient,
                channel=self.channel.value,
            )

        self.sink.write(self.format_line(recipient, message))

    @abstractmethod
    def format_line(self, recipient: str, message: str) -> str:
        """Render the line written for a successful send."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fail_rate={self.fail_rate})"


class EmailNotifier(ChannelNotifier):
    """Simulated email channel."""

    channel = ChannelType.EMAIL

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        fail_rate: float = 0.0,
        from_addr: str = "orders@dip-demo.com",
    ):
        super().__init__(sink=sink, fail_rate=fail_rate)
        self.from_addr = from_addr

    def format_line(self, recipient: str, message: str) -> str:
        return f"[EMAIL] From: {self.from_addr} | To: {recipient} | {message}"


class SMSNotifier(ChannelNotifier):
    """
    Simulated SMS channel.

    SMS messages are typically shorter than emails; long ones are still
    sent but a warning is logged.
    """

    channel = ChannelType.SMS

    # SMS typically have character limits
    MAX_LENGTH = 160

    def send(self, recipient: str, message: str) -> None:
        if len(message) > self.MAX_LENGTH:
            logger.warning(
                f"[SMS] Message length ({len(message)}) exceeds {self.MAX_LENGTH} chars, "
                "may be split into multiple messages"
            )
        super().send(recipient, message)

    def format_line(self, recipient: str, message: str) -> str:
        return f"[SMS] To: {recipient} | {message}"


class SlackNotifier(ChannelNotifier):
    """Simulated Slack channel. Recipient is a user handle or channel name."""

    channel = ChannelType.SLACK

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        fail_rate: float = 0.0,
        workspace: str = "dip-demo",
    ):
        super().__init__(sink=sink, fail_rate=fail_rate)
        self.workspace = workspace

    def format_line(self, recipient: str, message: str) -> str:
        return f"[SLACK] {self.workspace} | To: {recipient} | {message}"


# =============================================================================
# Composite
# =============================================================================

class CompositeNotifier(Notifier):
    """
    Sends every message through several notifiers, in order.

    The composite is itself a Notifier, so OrderService can use it without
    knowing it fans out. The child notifiers are shared, not owned.

    Failure policy:
    - fail_fast=True (default): the first DeliveryError propagates and the
      remaining notifiers are skipped.
    - fail_fast=False: every notifier is tried; failures are collected and
      raised together as a CompositeDeliveryError at the end.

    Example:
        notifier = CompositeNotifier([EmailNotifier(), SlackNotifier()])
        notifier.send("a@example.com", "Hello")  # email, then slack
    """

    def __init__(self, notifiers: Iterable[Notifier] = (), fail_fast: bool = True):
        self.notifiers: tuple[Notifier, ...] = tuple(notifiers)
        self.fail_fast = fail_fast

    def send(self, recipient: str, message: str) -> None:
        failures: list[DeliveryError] = []

        for notifier in self.notifiers:
            try:
                notifier.send(recipient, message)
            except DeliveryError as e:
                if self.fail_fast:
                    raise
                logger.warning(f"[COMPOSITE] {type(notifier).__name__} failed: {e}")
                failures.append(e)

        if failures:
            raise CompositeDeliveryError(failures, recipient=recipient)

    def __len__(self) -> int:
        return len(self.notifiers)

    def __iter__(self) -> Iterator[Notifier]:
        return iter(self.notifiers)

    def __repr__(self) -> str:
        return f"CompositeNotifier({list(self.notifiers)!r}, fail_fast={self.fail_fast})"


# =============================================================================
# Test Double
# =============================================================================

class RecordingNotifier(Notifier):
    """
    Test double that records how it was called instead of delivering.

    Used to show the payoff of dependency inversion: OrderService can be
    tested without any real (or simulated) channel.

    Example:
        mock = RecordingNotifier()
        OrderService(mock).process_order(order)
        assert mock.invoked
        assert mock.last_recipient == order.customer_email
    """

    def __init__(self, error: Optional[Exception] = None):
        """
        Initialize the recorder.

        Args:
            error: Raised from send() after the call is recorded. Lets tests
                drive failure paths.
        """
        self.error = error
        self.reset()

    def send(self, recipient: str, message: str) -> None:
        self.invoked = True
        self.last_recipient = recipient
        self.last_message = message
        self.calls.append((recipient, message))

        if self.error is not None:
            raise self.error

    @property
    def call_count(self) -> int:
        """Number of times send() was called."""
        return len(self.calls)

    def reset(self):
        """Forget all recorded calls."""
        self.invoked = False
        self.last_recipient: Optional[str] = None
        self.last_message: Optional[str] = None
        self.calls: list[tuple[str, str]] = []
