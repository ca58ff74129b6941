"""YAML configuration loader for the kcache watcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Sequence

import yaml

from kcache_filter.builder import build_filter
from kcache_filter.filters import ComparableFilter, make_null


@dataclass
class WatcherConfig:
    type: str
    path: Path
    interval: float = 5.0


@dataclass
class WatchConfig:
    filter: ComparableFilter = field(default_factory=make_null)
    watchers: Sequence[WatcherConfig] = field(default_factory=list)


def _parse_watchers(entries: Iterable[Any]) -> List[WatcherConfig]:
    watchers: List[WatcherConfig] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError("watcher entries must be mappings")
        watchers.append(
            WatcherConfig(
                type=str(entry.get("type", "file")),
                path=Path(entry.get("path", ".")),
                interval=float(entry.get("interval", 5.0)),
            )
        )
    return watchers


def load_config(path: Path) -> WatchConfig:
    data = yaml.safe_load(Path(path).read_text())
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Watch configuration must be a mapping")

    object_filter = build_filter(data.get("filter"))

    watchers_section = data.get("watchers", [])
    if not isinstance(watchers_section, list):
        raise ValueError("'watchers' section must be a list")
    watchers = _parse_watchers(watchers_section)

    return WatchConfig(filter=object_filter, watchers=watchers)
