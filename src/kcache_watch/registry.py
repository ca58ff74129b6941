"""Dispatch cache events to registered handlers."""

from __future__ import annotations

from typing import Dict

from .events import ObjectDelete, ObjectUpsert
from .handlers import ObjectHandler


class HandlerRegistry:
    """Fan out object events to every registered handler."""

    def __init__(self) -> None:
        self._handlers: Dict[str, ObjectHandler] = {}

    def register(self, name: str, handler: ObjectHandler) -> None:
        if name in self._handlers:
            raise ValueError(f"handler '{name}' already registered")
        self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)

    def handle(self, event: ObjectUpsert | ObjectDelete) -> None:
        if isinstance(event, ObjectUpsert):
            for handler in self._handlers.values():
                handler.on_object_upsert(event.nsname, event.obj)
        elif isinstance(event, ObjectDelete):
            for handler in self._handlers.values():
                handler.on_object_delete(event.nsname, event.obj)
        else:
            raise TypeError(f"Unsupported event type: {type(event)!r}")
