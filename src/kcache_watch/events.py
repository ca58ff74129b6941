"""Event primitives published by the filtered cache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kcache_filter.nsname import NSName


@dataclass(frozen=True)
class ObjectUpsert:
    """An accepted object was added or changed."""

    nsname: NSName
    obj: Any


@dataclass(frozen=True)
class ObjectDelete:
    """A tracked object disappeared or no longer passes the filter."""

    nsname: NSName
    obj: Any
