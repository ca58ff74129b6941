"""File-based object watcher."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Event, Thread
from typing import Any, List

import yaml

from kcache_filter.objects import from_manifest

from ..cache import FilteredCache

LOG = logging.getLogger(__name__)


def _extract_objects(payload: Any) -> List[Any]:
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        items = payload.get("items")
        if items is None:
            raise ValueError("objects file missing 'items' key")
        if not isinstance(items, list):
            raise ValueError("'items' must be a list")
    else:
        raise ValueError("objects file must contain a list or a mapping")

    objects = []
    for manifest in items:
        if not isinstance(manifest, dict):
            LOG.debug("ignoring non-mapping item %r", manifest)
            continue
        try:
            objects.append(from_manifest(manifest))
        except ValueError as exc:
            LOG.debug("ignoring invalid manifest: %s", exc)
    return objects


class FileObjectWatcher(Thread):
    """Poll a YAML/JSON object listing and feed it to a filtered cache."""

    def __init__(
        self,
        cache: FilteredCache,
        path: Path,
        interval: float,
        stop_event: Event,
    ) -> None:
        super().__init__(daemon=True)
        self._cache = cache
        self._path = Path(path)
        self._interval = interval
        self._stop_event = stop_event

    @property
    def cache(self) -> FilteredCache:
        return self._cache

    def run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.poll()
            except Exception:  # pragma: no cover - logged below
                LOG.exception("file watcher encountered an error")
            self._stop_event.wait(self._interval)

    def poll(self) -> None:
        if not self._path.exists():
            LOG.debug("objects file %s does not exist yet", self._path)
            return

        try:
            # JSON is a subset of YAML so both formats load here.
            payload = yaml.safe_load(self._path.read_text())
        except yaml.YAMLError as exc:
            LOG.warning("failed to parse objects file %s: %s", self._path, exc)
            return

        try:
            objects = _extract_objects(payload)
        except ValueError as exc:
            LOG.warning("invalid objects file %s: %s", self._path, exc)
            return

        self._cache.sync(objects)
