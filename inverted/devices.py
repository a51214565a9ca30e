"""
Device control, the inverted way.

Same shape as OrderService/Notifier with a different vocabulary: a Switch
controls any Device it is given. Think of a universal remote - it works with
any TV that follows the "TV interface", not one specific model.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from shared.sinks import LoggingSink, OutputSink

logger = logging.getLogger("switch")


class Device(ABC):
    """Anything a switch can turn on."""

    @abstractmethod
    def turn_on(self) -> None:
        """Turn the device on."""


class Light(Device):
    def __init__(self, sink: Optional[OutputSink] = None):
        self.sink = sink if sink is not None else LoggingSink("devices")

    def turn_on(self) -> None:
        self.sink.write("Light is ON")


class Fan(Device):
    def __init__(self, sink: Optional[OutputSink] = None):
        self.sink = sink if sink is not None else LoggingSink("devices")

    def turn_on(self) -> None:
        self.sink.write("Fan is ON")


class Switch:
    """
    A switch that controls whichever Device it was given.

    Example:
        Switch(Light()).press()   # Light is ON
        Switch(Fan()).press()     # Fan is ON
    """

    def __init__(self, device: Device):
        if device is None:
            raise TypeError("Switch requires a device")
        self.device = device

    def press(self) -> None:
        """Turn on the controlled device."""
        logger.debug(f"Switch pressed, controlling {type(self.device).__name__}")
        self.device.turn_on()
