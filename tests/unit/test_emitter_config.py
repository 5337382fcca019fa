"""Tests for the EmitterConfig."""

from __future__ import annotations

import math

import pytest

from erfevents.lib.emitter_config import EmitterConfig
from erfevents.lib.errors import InvalidEmitLimitError, InvalidValueError


def write_config(path, body):
    with open(path, "w", encoding="utf-8") as f:
        f.write("[EVENTS]\n" + body)


def test_defaults_without_file():
    """Test that a config without a file uses DEFAULTS."""
    config = EmitterConfig()
    assert config.default_emit_limit == math.inf
    assert config.max_listeners == 0
    assert config.strict_emit_result is False


def test_missing_file_uses_defaults(config_file):
    """Test that a config path that does not exist falls back to DEFAULTS."""
    config = EmitterConfig(config_file)
    assert config.as_dict() == EmitterConfig.DEFAULTS


def test_values_read_from_file(config_file):
    """Test that settings in the [EVENTS] section are parsed into typed values."""
    write_config(
        config_file,
        "default_emit_limit = 3\nmax_listeners = 10\nstrict_emit_result = yes\n",
    )
    config = EmitterConfig(config_file)
    assert config.default_emit_limit == 3
    assert config.max_listeners == 10
    assert config.strict_emit_result is True


def test_file_without_section_uses_defaults(config_file):
    """Test that an ini file without [EVENTS] leaves DEFAULTS in place."""
    with open(config_file, "w", encoding="utf-8") as f:
        f.write("[OTHER]\nmax_listeners = 4\n")
    assert EmitterConfig(config_file).max_listeners == 0


def test_unknown_file_keys_are_ignored(config_file):
    """Test that keys the emitter does not know about are skipped."""
    write_config(config_file, "colour = blue\n")
    assert "colour" not in EmitterConfig(config_file).as_dict()


@pytest.mark.parametrize(
    "raw, expected",
    [("unbounded", math.inf), ("inf", math.inf), ("4", 4), ("2.5", 2.5), ("0", 0)],
)
def test_emit_limit_spellings(config_file, raw, expected):
    """Test the accepted spellings of default_emit_limit."""
    write_config(config_file, f"default_emit_limit = {raw}\n")
    assert EmitterConfig(config_file).default_emit_limit == expected


@pytest.mark.parametrize("raw", ["Off", "false", "no", "0"])
def test_false_flag_spellings(config_file, raw):
    """Test that configparser's false spellings disable strict_emit_result."""
    write_config(config_file, f"strict_emit_result = {raw}\n")
    assert EmitterConfig(config_file).strict_emit_result is False


def test_overrides_take_priority(config_file):
    """Test that keyword overrides win over the file."""
    write_config(config_file, "max_listeners = 3\n")
    config = EmitterConfig(config_file, max_listeners=7)
    assert config.max_listeners == 7


def test_string_overrides_are_parsed():
    """Test that overrides given as strings are converted like file values."""
    config = EmitterConfig(default_emit_limit="unbounded", strict_emit_result="on")
    assert config.default_emit_limit == math.inf
    assert config.strict_emit_result is True


def test_unknown_override_rejected():
    """Test that a misspelled override is rejected."""
    with pytest.raises(InvalidValueError):
        EmitterConfig(max_listener=3)


def test_invalid_default_emit_limit(config_file):
    """Test that a non-numeric default_emit_limit raises on load."""
    write_config(config_file, "default_emit_limit = forever\n")
    with pytest.raises(InvalidEmitLimitError):
        EmitterConfig(config_file)


@pytest.mark.parametrize("raw", ["many", "-1"])
def test_invalid_max_listeners(config_file, raw):
    """Test that max_listeners must be a non-negative integer."""
    write_config(config_file, f"max_listeners = {raw}\n")
    with pytest.raises(InvalidValueError, match="max_listeners"):
        EmitterConfig(config_file)


def test_invalid_strict_emit_result():
    """Test that an unrecognised boolean spelling is rejected."""
    with pytest.raises(InvalidValueError, match="strict_emit_result"):
        EmitterConfig(strict_emit_result="maybe")


def test_file_is_read_once_until_reload(config_file):
    """Test that later edits to the file only apply after reload()."""
    write_config(config_file, "max_listeners = 2\n")
    config = EmitterConfig(config_file)

    write_config(config_file, "max_listeners = 9\n")
    assert config.max_listeners == 2

    config.reload()
    assert config.max_listeners == 9
