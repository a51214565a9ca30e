"""
Device control, the coupled way.

BadSwitch builds its own Light. It works, but it can only ever control a
Light: to control a Fan you would need a new switch class.
"""

import logging
from typing import Optional

from shared.sinks import LoggingSink, OutputSink

logger = logging.getLogger("switch")


class Light:
    """A concrete light. There is no Device abstraction in this approach."""

    def __init__(self, sink: Optional[OutputSink] = None):
        self.sink = sink if sink is not None else LoggingSink("devices")

    def turn_on(self) -> None:
        self.sink.write("Light is ON")


class BadSwitch:
    """
    A switch hard-wired to a Light.

    The sink is the only thing callers can pass in, so tests can still see
    what happened. The device itself cannot be swapped.
    """

    def __init__(self, sink: Optional[OutputSink] = None):
        # Stuck with only Light
        self.light = Light(sink=sink)

    def press(self) -> None:
        """Turn on the light."""
        logger.debug("BadSwitch pressed, controlling Light")
        self.light.turn_on()
