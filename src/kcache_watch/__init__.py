"""Filtered watch/cache runtime built on :mod:`kcache_filter`."""

from .cache import FilteredCache  # noqa: F401
from .config import WatchConfig, load_config  # noqa: F401
from .events import ObjectDelete, ObjectUpsert  # noqa: F401
from .registry import HandlerRegistry  # noqa: F401

__all__ = [
    "FilteredCache",
    "HandlerRegistry",
    "ObjectDelete",
    "ObjectUpsert",
    "WatchConfig",
    "load_config",
]
