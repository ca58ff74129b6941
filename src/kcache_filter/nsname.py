"""Namespace/name identity for watched objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True, order=True)
class NSName:
    """Immutable ``(namespace, name)`` pair addressing a single object.

    Cluster scoped objects use an empty namespace.
    """

    namespace: str
    name: str

    @classmethod
    def parse(cls, value: str) -> "NSName":
        """Parse ``namespace/name`` (or a bare ``name``) into an identity."""

        parts = value.split("/")
        if len(parts) == 1 and parts[0]:
            return cls("", parts[0])
        if len(parts) == 2 and parts[1]:
            return cls(parts[0], parts[1])
        raise ValueError(f"invalid namespace/name '{value}'")

    def __str__(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}/{self.name}"


def _metadata_of(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return obj.get("metadata")
    return getattr(obj, "metadata", None)


def _field(metadata: Any, key: str) -> Any:
    if isinstance(metadata, Mapping):
        return metadata.get(key)
    return getattr(metadata, key, None)


def for_object(obj: Any) -> Optional[NSName]:
    """Return the identity of ``obj`` or ``None`` if it carries no metadata.

    ``obj`` may be a :class:`~kcache_filter.objects.Object`, any object with
    a ``metadata`` attribute exposing ``namespace``/``name`` (e.g. generated
    API client models) or a decoded manifest mapping.
    """

    metadata = _metadata_of(obj)
    if metadata is None:
        return None
    name = _field(metadata, "name")
    if not name:
        return None
    namespace = _field(metadata, "namespace") or ""
    return NSName(str(namespace), str(name))
