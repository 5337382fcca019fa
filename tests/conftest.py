"""Pytest fixtures for erfevents tests."""

import pytest

from erfevents.lib.emitter_config import EmitterConfig
from erfevents.lib.events import EventEmitter


class Recorder:
    """Callable listener that records every call it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))

    @property
    def call_count(self):
        return len(self.calls)


@pytest.fixture
def emitter():
    """Create an EventEmitter with default settings."""
    return EventEmitter()


@pytest.fixture
def recorder():
    """Create a fresh recording listener."""
    return Recorder()


@pytest.fixture
def make_recorder():
    """Factory for additional, distinct recording listeners."""
    return Recorder


@pytest.fixture
def config_file(tmp_path):
    """Path to a not-yet-existing emitter config file."""
    return str(tmp_path / "events.ini")


@pytest.fixture
def strict_emitter():
    """Create an EventEmitter whose emit result reports whether a listener ran."""
    return EventEmitter(EmitterConfig(strict_emit_result=True))
