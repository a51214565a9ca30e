"""
Output sinks for demo side effects.

Every "external call" in the demo is simulated by writing a line somewhere.
Instead of printing directly, channels and devices write to an injected
sink, so the same code can print during a demo, log during normal use,
and be inspected line-by-line in tests.
"""

import logging
from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Somewhere to write a line of simulated output."""

    @abstractmethod
    def write(self, line: str) -> None:
        """Write one line of output."""


class LoggingSink(OutputSink):
    """
    Writes lines to a logger at INFO level.

    This is the default sink for channels and services.
    """

    def __init__(self, logger_name: str = "notifications"):
        self.logger = logging.getLogger(logger_name)

    def write(self, line: str) -> None:
        self.logger.info(line)


class ConsoleSink(OutputSink):
    """Prints lines to stdout. Used by the demo scripts."""

    def __init__(self, prefix: str = "  "):
        self.prefix = prefix

    def write(self, line: str) -> None:
        print(f"{self.prefix}{line}")


class MemorySink(OutputSink):
    """
    Collects lines in memory.

    Useful for test assertions and for the comparison script, which counts
    what each approach produced.
    """

    def __init__(self):
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def clear(self):
        """Forget everything written so far."""
        self.lines.clear()

    def __len__(self) -> int:
        return len(self.lines)


class TeeSink(OutputSink):
    """Writes every line to several sinks, in order."""

    def __init__(self, *sinks: OutputSink):
        self.sinks = sinks

    def write(self, line: str) -> None:
        for sink in self.sinks:
            sink.write(line)
