"""
Inverted (dependency-injected) approach.

This package implements the "good" side of the demo:
- High-level components receive an abstraction through their constructor
- Concrete channels and devices implement that abstraction
- Swapping the concrete implementation needs no change to the high-level code
"""

from inverted.notifiers import (
    Notifier,
    EmailNotifier,
    SMSNotifier,
    SlackNotifier,
    CompositeNotifier,
    RecordingNotifier,
)
from inverted.order_service import OrderService, CONFIRMATION_MESSAGE
from inverted.devices import Device, Light, Fan, Switch

__all__ = [
    "Notifier",
    "EmailNotifier",
    "SMSNotifier",
    "SlackNotifier",
    "CompositeNotifier",
    "RecordingNotifier",
    "OrderService",
    "CONFIRMATION_MESSAGE",
    "Device",
    "Light",
    "Fan",
    "Switch",
]
