"""Runtime argument checks shared by the emitter and its helpers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from erfevents.lib.errors import (
    InvalidArgumentError,
    InvalidEmitLimitError,
    InvalidListenerError,
    InvalidNameError,
    InvalidValueError,
)


class Validator:
    """Validates values and returns them unchanged, raising on a bad shape.

    Every check takes an optional ``error`` class so the raised exception names
    the argument position that was violated.
    """

    @staticmethod
    def string(value: Any, error: type[InvalidArgumentError] = InvalidNameError) -> str:
        """Accept a non-empty ``str``."""
        if not isinstance(value, str) or not value:
            raise error(value, "a non-empty string")
        return value

    @staticmethod
    def number(
        value: Any, error: type[InvalidArgumentError] = InvalidEmitLimitError
    ) -> int | float:
        """Accept an int or float (``math.inf`` included), rejecting bools and NaN."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise error(value, "a number")
        if isinstance(value, float) and math.isnan(value):
            raise error(value, "a number other than NaN")
        return value

    @staticmethod
    def function(value: Any, error: type[InvalidArgumentError] = InvalidListenerError) -> Any:
        if not callable(value):
            raise error(value, "a callable")
        return value

    @staticmethod
    def mapping(
        value: Any, error: type[InvalidArgumentError] = InvalidValueError
    ) -> Mapping[str, Any]:
        """Accept a mapping whose keys are all strings."""
        if not isinstance(value, Mapping):
            raise error(value, "a mapping")
        for key in value:
            if not isinstance(key, str):
                raise error(value, "a mapping with string keys")
        return value

    @staticmethod
    def nullish(value: Any, error: type[InvalidArgumentError] = InvalidValueError) -> None:
        if value is not None:
            raise error(value, "None")
        return value

    @staticmethod
    def instance(
        expected: type, value: Any, error: type[InvalidArgumentError] = InvalidValueError
    ) -> Any:
        if not isinstance(value, expected):
            raise error(value, f"an instance of {expected.__name__}")
        return value

    @staticmethod
    def string_input(
        value: Any, *choices: str, error: type[InvalidArgumentError] = InvalidValueError
    ) -> str:
        """Accept one of the given string literals."""
        if not isinstance(value, str) or value not in choices:
            raise error(value, "one of " + ", ".join(repr(c) for c in choices))
        return value
