"""
Delivery errors raised by notification channels.

The demo channels never talk to a real provider, but they fail the way a
real one would: a bad recipient, or a transport that is down. High-level
code sees only DeliveryError and never needs to know which channel failed.
"""

from typing import Optional


class DeliveryError(Exception):
    """A notification could not be delivered."""

    def __init__(
        self,
        message: str,
        recipient: Optional[str] = None,
        channel: Optional[str] = None,
    ):
        super().__init__(message)
        self.recipient = recipient
        self.channel = channel


class InvalidRecipientError(DeliveryError):
    """Recipient is empty or blank."""


class TransportUnavailableError(DeliveryError):
    """The channel's transport (SMTP relay, SMS gateway, Slack API) is down."""


class CompositeDeliveryError(DeliveryError):
    """
    One or more channels in a CompositeNotifier failed.

    Only raised when the composite collects failures instead of stopping at
    the first one. `errors` keeps the child failures in channel order.
    """

    def __init__(self, errors: list[DeliveryError], recipient: Optional[str] = None):
        channels = ", ".join(e.channel or "unknown" for e in errors)
        super().__init__(
            f"{len(errors)} channel(s) failed: {channels}",
            recipient=recipient,
        )
        self.errors = errors
