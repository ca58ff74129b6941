"""Object cache that only tracks what its filter accepts.

The cache is fed full listings (``sync``) by a watcher and publishes the
difference against what it tracked before. Swapping the filter with
``refilter`` re-evaluates the last listing, but only when the new filter is
not ``equals`` to the current one.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, Iterable, List, Optional

from kcache_filter.filters import ComparableFilter, make_null
from kcache_filter.nsname import NSName, for_object

from .events import ObjectDelete, ObjectUpsert
from .registry import HandlerRegistry

LOG = logging.getLogger(__name__)


class FilteredCache:
    def __init__(
        self,
        registry: HandlerRegistry,
        object_filter: Optional[ComparableFilter] = None,
    ) -> None:
        self._registry = registry
        self._filter = object_filter or make_null()
        self._lock = RLock()
        self._listing: Dict[NSName, Any] = {}
        self._tracked: Dict[NSName, Any] = {}

    @property
    def filter(self) -> ComparableFilter:
        return self._filter

    def sync(self, objects: Iterable[Any]) -> None:
        """Reconcile against a complete listing of objects."""

        listing: Dict[NSName, Any] = {}
        for obj in objects:
            key = for_object(obj)
            if key is None:
                LOG.debug("skipping object without namespace/name: %r", obj)
                continue
            listing[key] = obj

        with self._lock:
            self._listing = listing
            self._reconcile()

    def refilter(self, object_filter: ComparableFilter) -> bool:
        """Replace the filter; return False if it is equal to the current one."""

        with self._lock:
            if object_filter.equals(self._filter):
                LOG.debug("filter unchanged (%r), skipping refilter", object_filter)
                return False
            LOG.info("refiltering cache: %r -> %r", self._filter, object_filter)
            self._filter = object_filter
            self._reconcile()
            return True

    def _reconcile(self) -> None:
        desired = {
            key: obj
            for key, obj in self._listing.items()
            if self._filter.accept(obj)
        }

        events: List[ObjectUpsert | ObjectDelete] = []
        for key, obj in desired.items():
            if key not in self._tracked or self._tracked[key] != obj:
                events.append(ObjectUpsert(key, obj))
        for key in sorted(set(self._tracked) - set(desired)):
            events.append(ObjectDelete(key, self._tracked[key]))

        self._tracked = desired
        if events:
            LOG.debug(
                "cache now tracks %d of %d objects (%d events)",
                len(desired),
                len(self._listing),
                len(events),
            )
        for event in events:
            self._registry.handle(event)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def list(self) -> List[Any]:
        with self._lock:
            return [self._tracked[key] for key in sorted(self._tracked)]

    def get(self, nsname: NSName) -> Optional[Any]:
        with self._lock:
            return self._tracked.get(nsname)
