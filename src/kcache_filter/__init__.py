"""Comparable object filters for watch/cache layers.

A filter decides whether a Kubernetes-style object (namespace, name, labels
and, for services, a selector) should be tracked by a downstream cache.
Filters are immutable value objects: two filters can be compared with
:meth:`~kcache_filter.filters.ComparableFilter.equals` so that callers only
rebuild their state when the filter configuration actually changes.
"""

from .builder import FilterConfigError, build_filter  # noqa: F401
from .filters import (  # noqa: F401
    AllFilter,
    ComparableFilter,
    Filter,
    LabelsFilter,
    NSNameFilter,
    NullFilter,
    ServiceForFilter,
    make_all,
    make_labels,
    make_nsname,
    make_null,
    make_service_for,
)
from .nsname import NSName  # noqa: F401
from .objects import Object, ObjectMeta, Service, from_manifest  # noqa: F401

__all__ = [
    "AllFilter",
    "ComparableFilter",
    "Filter",
    "FilterConfigError",
    "LabelsFilter",
    "NSName",
    "NSNameFilter",
    "NullFilter",
    "Object",
    "ObjectMeta",
    "Service",
    "ServiceForFilter",
    "build_filter",
    "from_manifest",
    "make_all",
    "make_labels",
    "make_nsname",
    "make_null",
    "make_service_for",
]
