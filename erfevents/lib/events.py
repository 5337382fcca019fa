"""Minimal event emitter with per-listener emit limits."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

from erfevents.lib.emitter_config import EmitterConfig
from erfevents.lib.listener import Listener, ListenerEntry, decorate, supports_decoration
from erfevents.lib.validator import Validator

_DEFAULT = object()
_DECORATOR = object()


class EventEmitter:
    """Registry of named events and the listeners subscribed to them.

    Listeners are called synchronously in registration order; exceptions bubble
    up normally and stop the remaining listeners for that emit. Each registration
    tracks its own emit limit and becomes dormant, not removed, once the limit is
    reached.
    """

    decorate = staticmethod(decorate)

    def __init__(self, config: EmitterConfig | None = None) -> None:
        if config is None:
            config = EmitterConfig()
        self._config = Validator.instance(EmitterConfig, config)
        self._events: dict[str, list[ListenerEntry]] = {}
        self._warned: set[str] = set()

    @property
    def config(self) -> EmitterConfig:
        return self._config

    @property
    def events(self) -> Mapping[str, tuple[Listener, ...]]:
        """Read-only snapshot of event names and their registered listeners."""
        return MappingProxyType(
            {name: tuple(e.listener for e in entries) for name, entries in self._events.items()}
        )

    def on(
        self, name: str, listener: Any = _DECORATOR, emit_limit: Any = _DEFAULT
    ) -> EventEmitter | Callable[[Listener], Listener]:
        """Register a listener for an event.

        Can also be used as a decorator, ``@emitter.on("name")``, in which case the
        decorated function is returned unchanged.

        Args:
            name: The event name.
            listener: The callable to run on emit.
            emit_limit: How many times the listener may run. Defaults to the
                configured ``default_emit_limit`` (unbounded).

        Returns:
            This emitter, for chaining.
        """
        if listener is _DECORATOR:
            Validator.string(name)
            return self._register_decorator(name, emit_limit)

        if emit_limit is _DEFAULT:
            emit_limit = self._config.default_emit_limit

        Validator.string(name)
        Validator.function(listener)
        Validator.number(emit_limit)

        entry = ListenerEntry(listener, emit_limit=emit_limit)
        entry.sync()
        self._events.setdefault(name, []).append(entry)

        logging.debug(f"Registered listener for << {name} >> (emit limit: {emit_limit})")
        self._check_max_listeners(name)
        return self

    def once(
        self, name: str, listener: Any = _DECORATOR
    ) -> EventEmitter | Callable[[Listener], Listener]:
        """Register a listener that runs at most once."""
        if listener is _DECORATOR:
            Validator.string(name)
            return self._register_decorator(name, 1)

        Validator.function(listener)
        return self.on(name, listener, 1)

    def off(self, name: str, listener: Listener) -> EventEmitter:
        """Remove the most recent registration of ``listener`` for an event.

        Unknown events and listeners are ignored.
        """
        Validator.string(name)
        Validator.function(listener)

        entries = self._events.get(name)
        if not entries:
            return self

        for index in range(len(entries) - 1, -1, -1):
            if entries[index].matches(listener):
                entries.pop(index).registered = False
                logging.debug(f"Removed listener for << {name} >>")
                break

        if not entries:
            del self._events[name]
            self._warned.discard(name)
        return self

    def emit(self, name: str, *args: Any, **kwargs: Any) -> bool:
        """Call every active listener registered for this event.

        Returns False if nothing is registered for ``name``. Otherwise returns
        True, even when every listener is dormant, unless ``strict_emit_result``
        is configured, in which case True means at least one listener ran.
        """
        entries = self._events.get(name)
        if not entries:
            return False

        ran = False
        for entry in tuple(entries):
            if not entry.registered:
                continue
            if entry.dormant:
                logging.debug(f"Skipping dormant listener for << {name} >>")
                continue
            entry.invoke(*args, **kwargs)
            ran = True

        if self._config.strict_emit_result:
            return ran
        return True

    def remove_all_listeners(self, name: str | None = None) -> EventEmitter:
        """Remove every listener of one event, or of all events when ``name`` is None."""
        if name is None:
            for entries in self._events.values():
                for entry in entries:
                    entry.registered = False
            self._events.clear()
            self._warned.clear()
            logging.debug("Removed all listeners")
            return self

        Validator.string(name)
        for entry in self._events.pop(name, []):
            entry.registered = False
        self._warned.discard(name)
        logging.debug(f"Removed all listeners for << {name} >>")
        return self

    def listener_count(self, name: str) -> int:
        return len(self._events.get(name, ()))

    def listeners(self, name: str) -> tuple[Listener, ...]:
        return tuple(entry.listener for entry in self._events.get(name, ()))

    def entries(self, name: str) -> tuple[ListenerEntry, ...]:
        """Registration records for an event, in registration order."""
        return tuple(self._events.get(name, ()))

    def event_names(self) -> list[str]:
        """Snapshot of the registered event names, in insertion order."""
        return list(self._events)

    def is_emitted(self, listener: Any) -> bool:
        """Whether ``listener`` has run at least once.

        Registered entries are checked first; otherwise the ``emitted`` attribute
        left on the listener by a previous emit is used.
        """
        for entries in self._events.values():
            if any(entry.emitted and entry.matches(listener) for entry in entries):
                return True
        if not supports_decoration(listener):
            return False
        return bool(vars(listener).get("emitted", False))

    def _register_decorator(self, name: str, emit_limit: Any) -> Callable[[Listener], Listener]:
        def decorator(func: Listener) -> Listener:
            self.on(name, func, emit_limit)
            return func

        return decorator

    def _check_max_listeners(self, name: str) -> None:
        max_listeners = self._config.max_listeners
        if max_listeners <= 0 or name in self._warned:
            return
        count = self.listener_count(name)
        if count > max_listeners:
            self._warned.add(name)
            logging.warning(
                f"Possible listener leak: {count} listeners registered for << {name} >> "
                f"(max_listeners is {max_listeners})"
            )
