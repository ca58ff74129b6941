"""Filter variants and their factory functions.

Every variant copies its configuration at construction time and never
mutates it afterwards, so instances can be shared between threads and
compared as values. ``accept`` and ``equals`` are total: an object of the
wrong kind, missing labels or an unrelated filter all resolve to ``False``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, FrozenSet, Hashable, Iterable, Mapping, Tuple, Union

from .nsname import NSName, for_object
from .objects import labels_for, selector_for

_MISSING = object()


def _is_subset(required: Mapping[str, str], current: Mapping[str, str]) -> bool:
    """Return True when every pair in ``required`` is present in ``current``."""

    for key, value in required.items():
        if current.get(key, _MISSING) != value:
            return False
    return True


class Filter(ABC):
    """Predicate deciding whether an object passes."""

    @abstractmethod
    def accept(self, obj: Any) -> bool:
        """Return True if ``obj`` passes the filter."""


class ComparableFilter(Filter):
    """Filter that can be structurally compared with another filter."""

    @abstractmethod
    def equals(self, other: Filter) -> bool:
        """Return True if ``other`` is the same variant with the same state."""

    def _key(self) -> Hashable:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class NullFilter(ComparableFilter):
    """Accepts every object."""

    def accept(self, obj: Any) -> bool:
        return True

    def equals(self, other: Filter) -> bool:
        return isinstance(other, NullFilter)

    def __repr__(self) -> str:
        return "NullFilter()"


class AllFilter(ComparableFilter):
    """Rejects every object."""

    def accept(self, obj: Any) -> bool:
        return False

    def equals(self, other: Filter) -> bool:
        return isinstance(other, AllFilter)

    def __repr__(self) -> str:
        return "AllFilter()"


class LabelsFilter(ComparableFilter):
    """Accepts objects whose labels contain every pair of ``target``.

    An empty ``target`` accepts everything.
    """

    def __init__(self, target: Mapping[str, str]) -> None:
        self._target: Mapping[str, str] = MappingProxyType(dict(target))

    @property
    def target(self) -> Mapping[str, str]:
        return self._target

    def accept(self, obj: Any) -> bool:
        if not self._target:
            return True
        return _is_subset(self._target, labels_for(obj))

    def equals(self, other: Filter) -> bool:
        if not isinstance(other, LabelsFilter):
            return False
        if len(self._target) != len(other._target):
            return False
        return _is_subset(self._target, other._target)

    def _key(self) -> Hashable:
        return frozenset(self._target.items())

    def __repr__(self) -> str:
        return f"LabelsFilter({dict(self._target)!r})"


class ServiceForFilter(ComparableFilter):
    """Accepts services whose selector is contained in ``target``.

    The direction is the reverse of :class:`LabelsFilter`: ``target`` is
    usually the label set of a pod and the filter answers "which services
    route to it". An empty selector or an empty target never matches.
    """

    def __init__(self, target: Mapping[str, str]) -> None:
        self._target: Mapping[str, str] = MappingProxyType(dict(target))

    @property
    def target(self) -> Mapping[str, str]:
        return self._target

    def accept(self, obj: Any) -> bool:
        selector = selector_for(obj)
        if not selector or not self._target:
            return False
        return _is_subset(selector, self._target)

    def equals(self, other: Filter) -> bool:
        if not isinstance(other, ServiceForFilter):
            return False
        return dict(self._target) == dict(other._target)

    def _key(self) -> Hashable:
        return frozenset(self._target.items())

    def __repr__(self) -> str:
        return f"ServiceForFilter({dict(self._target)!r})"


class NSNameFilter(ComparableFilter):
    """Accepts objects whose namespace/name is one of a fixed set."""

    def __init__(self, names: Iterable[NSName]) -> None:
        self._names: FrozenSet[NSName] = frozenset(names)

    @property
    def names(self) -> FrozenSet[NSName]:
        return self._names

    def accept(self, obj: Any) -> bool:
        key = for_object(obj)
        return key is not None and key in self._names

    def equals(self, other: Filter) -> bool:
        if not isinstance(other, NSNameFilter):
            return False
        return self._names == other._names

    def _key(self) -> Hashable:
        return self._names

    def __repr__(self) -> str:
        names = ", ".join(repr(str(n)) for n in sorted(self._names))
        return f"NSNameFilter([{names}])"


NSNameLike = Union[NSName, str, Tuple[str, str]]


def _coerce_nsname(value: NSNameLike) -> NSName:
    if isinstance(value, NSName):
        nsname = value
    elif isinstance(value, str):
        nsname = NSName.parse(value)
    else:
        namespace, name = value
        nsname = NSName(str(namespace), str(name))
    if not nsname.name:
        raise ValueError(f"identity {nsname!r} has an empty name")
    return nsname


def make_null() -> ComparableFilter:
    """Return a filter whose ``accept`` is always True."""

    return NullFilter()


def make_all() -> ComparableFilter:
    """Return a filter whose ``accept`` is always False."""

    return AllFilter()


def make_labels(target: Mapping[str, str]) -> ComparableFilter:
    """Return a filter accepting objects labelled with all of ``target``."""

    return LabelsFilter(target)


def make_service_for(target: Mapping[str, str]) -> ComparableFilter:
    """Return a filter accepting services whose selector matches ``target``."""

    return ServiceForFilter(target)


def make_nsname(*ids: NSNameLike) -> ComparableFilter:
    """Return a filter accepting only the given namespace/name identities.

    Identities may be :class:`NSName` instances, ``"ns/name"`` strings or
    ``(namespace, name)`` tuples. Duplicates collapse. An empty name raises
    ``ValueError``: objects without a name have no identity and could never
    match.
    """

    return NSNameFilter(_coerce_nsname(i) for i in ids)
