"""Emitter settings loaded from an optional ini file."""

from __future__ import annotations

import configparser
import logging
import math
from typing import Any

from erfevents.lib.errors import InvalidEmitLimitError, InvalidValueError
from erfevents.lib.validator import Validator

SECTION = "EVENTS"


class EmitterConfig:
    """Settings that tune an EventEmitter.

    Values come from DEFAULTS, then the [EVENTS] section of the ini file, then
    keyword overrides. The file is parsed once, on construction or ``reload()``,
    and the typed values are cached so emitting never touches the disk.
    """

    DEFAULTS = {
        "default_emit_limit": math.inf,
        "max_listeners": 0,
        "strict_emit_result": False,
    }

    def __init__(self, config_file_path: str | None = None, **overrides: Any) -> None:
        for setting in overrides:
            Validator.string_input(setting, *self.DEFAULTS)
        self.config_file_path = config_file_path
        self._overrides = overrides
        self._values: dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        """Re-read the ini file and rebuild the cached settings."""
        raw = dict(self.DEFAULTS)
        if self.config_file_path is not None:
            raw.update(self._read_section(self.config_file_path))
        raw.update(self._overrides)

        self._values = {
            "default_emit_limit": _parse_limit(raw["default_emit_limit"]),
            "max_listeners": _parse_count(raw["max_listeners"]),
            "strict_emit_result": _parse_flag(raw["strict_emit_result"]),
        }

    @property
    def default_emit_limit(self) -> int | float:
        return self._values["default_emit_limit"]

    @property
    def max_listeners(self) -> int:
        return self._values["max_listeners"]

    @property
    def strict_emit_result(self) -> bool:
        return self._values["strict_emit_result"]

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    @staticmethod
    def _read_section(path: str) -> dict[str, str]:
        parser = configparser.ConfigParser()
        if not parser.read(path, encoding="utf-8"):
            logging.debug(f"Emitter config file not found, using defaults: {path}")
            return {}
        if not parser.has_section(SECTION):
            return {}

        logging.debug(f"Loaded emitter settings from {path}")
        # Unknown keys are ignored so one file can carry settings for other tools
        return {k: v for k, v in parser.items(SECTION) if k in EmitterConfig.DEFAULTS}


def _parse_limit(value: Any) -> int | float:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("inf", "unbounded"):
            return math.inf
        try:
            value = float(text) if "." in text else int(text)
        except ValueError:
            raise InvalidEmitLimitError(value, "a number or 'unbounded'") from None
    return Validator.number(value)


def _parse_count(value: Any) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidValueError(value, "an integer", argument="max_listeners") from None
    if isinstance(value, bool) or count < 0:
        raise InvalidValueError(value, "a non-negative integer", argument="max_listeners")
    return count


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text not in configparser.ConfigParser.BOOLEAN_STATES:
        raise InvalidValueError(value, "a boolean", argument="strict_emit_result")
    return configparser.ConfigParser.BOOLEAN_STATES[text]
