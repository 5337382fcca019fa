"""Listener entries and callback decoration."""

from __future__ import annotations

import math
import types
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from erfevents.lib.errors import InvalidListenerError
from erfevents.lib.validator import Validator

UNBOUNDED = math.inf

Listener = Callable[..., Any]


def supports_decoration(listener: Any) -> bool:
    """Whether attributes can be set directly on ``listener``.

    Bound methods forward attribute reads to their function but reject writes,
    builtins have no instance dict at all, and built-in types such as ``list``
    are immutable.
    """
    if isinstance(listener, (types.MethodType, types.BuiltinFunctionType)):
        return False
    if isinstance(listener, type) and listener.__module__ == "builtins":
        return False
    return hasattr(listener, "__dict__")


def decorate(listener: Listener, fields: Mapping[str, Any]) -> Listener:
    """Attach each of ``fields`` as an attribute of ``listener``, in place.

    Existing attributes with the same name are overwritten, so a callable shared
    between registrations only ever shows the last values written to it.

    Args:
        listener: The callable to decorate.
        fields: Attribute names mapped to their values.

    Returns:
        The same ``listener`` object.

    Raises:
        InvalidListenerError: If ``listener`` is not callable or rejects attributes.
        InvalidValueError: If ``fields`` is not a mapping with string keys.
    """
    Validator.function(listener)
    Validator.mapping(fields)

    for key, value in fields.items():
        try:
            setattr(listener, key, value)
        except (AttributeError, TypeError) as e:
            raise InvalidListenerError(listener, "a callable that accepts attributes") from e
    return listener


@dataclass(eq=False)
class ListenerEntry:
    """One registration of a listener for one event name."""

    listener: Listener
    emit_limit: int | float = UNBOUNDED
    emit_times: int = 0
    emitted: bool = False
    registered: bool = True

    @property
    def dormant(self) -> bool:
        """True once the entry has used up its emit limit."""
        return self.emit_times >= self.emit_limit

    def matches(self, listener: Any) -> bool:
        return self.listener is listener or self.listener == listener

    def invoke(self, *args: Any, **kwargs: Any) -> None:
        """Call the listener, then record the completed invocation."""
        self.listener(*args, **kwargs)
        self.emitted = True
        self.emit_times += 1
        self._mirror({"emitted": True, "emit_times": self.emit_times})

    def sync(self) -> None:
        """Write the registration's limit and count onto the listener."""
        self._mirror({"emit_limit": self.emit_limit, "emit_times": self.emit_times})

    def _mirror(self, fields: dict[str, Any]) -> None:
        if supports_decoration(self.listener):
            decorate(self.listener, fields)
