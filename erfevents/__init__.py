from erfevents.lib.errors import (
    EventEmitterError,
    InvalidArgumentError,
    InvalidEmitLimitError,
    InvalidListenerError,
    InvalidNameError,
    InvalidValueError,
)
from erfevents.lib.emitter_config import EmitterConfig
from erfevents.lib.events import EventEmitter
from erfevents.lib.listener import UNBOUNDED, ListenerEntry, decorate
from erfevents.lib.validator import Validator
from erfevents.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    "UNBOUNDED",
    EventEmitter.__name__,
    EmitterConfig.__name__,
    ListenerEntry.__name__,
    Validator.__name__,
    decorate.__name__,
    EventEmitterError.__name__,
    InvalidArgumentError.__name__,
    InvalidNameError.__name__,
    InvalidListenerError.__name__,
    InvalidEmitLimitError.__name__,
    InvalidValueError.__name__,
]
