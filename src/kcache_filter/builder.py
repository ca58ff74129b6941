"""Build filters from configuration mappings (e.g. decoded YAML)."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from .filters import (
    ComparableFilter,
    make_all,
    make_labels,
    make_nsname,
    make_null,
    make_service_for,
)
from .objects import label_value


class FilterConfigError(ValueError):
    """Raised when a filter configuration section is invalid."""


def _parse_match(section: Mapping[str, Any]) -> Dict[str, str]:
    match = section.get("match", {})
    if match is None:
        return {}
    if not isinstance(match, Mapping):
        raise FilterConfigError("filter 'match' must be a mapping")
    parsed: Dict[str, str] = {}
    for key, value in match.items():
        if isinstance(value, (Mapping, list)):
            raise FilterConfigError(f"filter 'match' value for '{key}' must be a scalar")
        parsed[str(key)] = label_value(value)
    return parsed


def _build_labels(section: Mapping[str, Any]) -> ComparableFilter:
    return make_labels(_parse_match(section))


def _build_service_for(section: Mapping[str, Any]) -> ComparableFilter:
    return make_service_for(_parse_match(section))


def _build_nsname(section: Mapping[str, Any]) -> ComparableFilter:
    names = section.get("names", [])
    if not isinstance(names, list):
        raise FilterConfigError("filter 'names' must be a list")
    try:
        return make_nsname(*(str(n) for n in names))
    except ValueError as exc:
        raise FilterConfigError(str(exc)) from exc


_BUILDERS: Dict[str, Callable[[Mapping[str, Any]], ComparableFilter]] = {
    "null": lambda _section: make_null(),
    "all": lambda _section: make_all(),
    "labels": _build_labels,
    "service_for": _build_service_for,
    "nsname": _build_nsname,
}


def build_filter(section: Mapping[str, Any] | None) -> ComparableFilter:
    """Return the filter described by ``section``.

    ``None`` or an empty section yields the null filter. Examples::

        {"type": "labels", "match": {"app": "web"}}
        {"type": "nsname", "names": ["default/web", "kube-system/dns"]}
    """

    if not section:
        return make_null()
    if not isinstance(section, Mapping):
        raise FilterConfigError("filter section must be a mapping")

    filter_type = str(section.get("type", "null")).lower().replace("-", "_")
    builder = _BUILDERS.get(filter_type)
    if builder is None:
        raise FilterConfigError(f"unsupported filter type '{section.get('type')}'")
    return builder(section)
