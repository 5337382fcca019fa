"""Exceptions raised by the event emitter."""

from __future__ import annotations

from typing import Any


class EventEmitterError(Exception):
    """Base class for all errors raised by erfevents."""


class InvalidArgumentError(EventEmitterError, TypeError):
    """Raised when a call receives an argument of the wrong shape.

    The ``argument`` attribute names the offending parameter so callers can tell
    a bad event name apart from a bad listener or emit limit.
    """

    argument = "value"

    def __init__(self, value: Any, expected: str, argument: str | None = None) -> None:
        if argument is not None:
            self.argument = argument
        super().__init__(f"Invalid {self.argument}: expected {expected}, got {value!r}")
        self.value = value
        self.expected = expected


class InvalidNameError(InvalidArgumentError):
    argument = "name"


class InvalidListenerError(InvalidArgumentError):
    argument = "listener"


class InvalidEmitLimitError(InvalidArgumentError):
    argument = "emit_limit"


class InvalidValueError(InvalidArgumentError):
    argument = "value"
