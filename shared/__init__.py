"""
Shared infrastructure for the dependency inversion demo.

This package contains code used by both the coupled and inverted approaches:
- The Order value being confirmed
- Output sinks that stand in for real side effects
- The delivery error hierarchy
"""

from shared.models import Order, ChannelType
from shared.errors import (
    DeliveryError,
    InvalidRecipientError,
    TransportUnavailableError,
    CompositeDeliveryError,
)
from shared.sinks import OutputSink, LoggingSink, ConsoleSink, MemorySink, TeeSink

__all__ = [
    "Order",
    "ChannelType",
    "DeliveryError",
    "InvalidRecipientError",
    "TransportUnavailableError",
    "CompositeDeliveryError",
    "OutputSink",
    "LoggingSink",
    "ConsoleSink",
    "MemorySink",
    "TeeSink",
]
