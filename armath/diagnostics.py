"""
Diagnostic sink: the single outward capability of the kernel.

The kernel reports failed divisions, unsupported operands and explicit debug
requests as plain strings. By default they go to the ``armath`` logger; a
host can inject any ``callable(message)`` instead.
"""
import logging

from .logger import get_logger


class Diagnostics:
    """Holds the active sink and forwards messages to it."""

    def __init__(self, sink=None, logger_name: str = "armath"):
        self.logger_name = logger_name
        self._sink = sink

    def _default_sink(self, message: str):
        logging.getLogger(self.logger_name).warning(message)

    @property
    def sink(self):
        return self._sink if self._sink is not None else self._default_sink

    def set_sink(self, sink):
        """Install ``sink`` and return the previous one. ``None`` restores logging."""
        previous = self._sink
        self._sink = sink
        return previous

    def log(self, message: str):
        self.sink(message)


get_logger("armath")
diagnostics = Diagnostics()


def set_sink(sink):
    return diagnostics.set_sink(sink)
