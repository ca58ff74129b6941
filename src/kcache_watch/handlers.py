"""Handlers receiving cache events from :class:`HandlerRegistry`."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from kcache_filter.nsname import NSName

LOG = logging.getLogger(__name__)


class ObjectHandler(ABC):
    """Base class for consumers managed by :class:`HandlerRegistry`."""

    @abstractmethod
    def on_object_upsert(self, nsname: NSName, obj: Any) -> None:
        """``obj`` passed the filter and is new or changed."""

    @abstractmethod
    def on_object_delete(self, nsname: NSName, obj: Any) -> None:
        """``obj`` is no longer tracked."""


class LoggingHandler(ObjectHandler):
    """Log every event; used by the CLI."""

    def __init__(self, logger: logging.Logger = LOG) -> None:
        self._log = logger

    def on_object_upsert(self, nsname: NSName, obj: Any) -> None:
        self._log.info("tracking %s", nsname)

    def on_object_delete(self, nsname: NSName, obj: Any) -> None:
        self._log.info("dropped %s", nsname)
