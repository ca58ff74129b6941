"""Watcher implementations feeding :class:`~kcache_watch.cache.FilteredCache`."""

from .file import FileObjectWatcher  # noqa: F401

__all__ = ["FileObjectWatcher"]
