"""Light-weight object model consumed by the filters.

Filters never touch these classes directly; they go through the accessor
functions at the bottom of the module, which also understand decoded
manifests (plain mappings) and any object shaped like a Kubernetes API
model (``obj.metadata.labels``, ``obj.spec.selector``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .nsname import NSName

SERVICE_KIND = "Service"

_EMPTY: Mapping[str, str] = MappingProxyType({})


def _freeze(values: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class ObjectMeta:
    """Identity and labels of an object."""

    name: str
    namespace: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", _freeze(self.labels))

    @property
    def nsname(self) -> NSName:
        return NSName(self.namespace, self.name)


@dataclass(frozen=True)
class Object:
    """Generic watched object."""

    metadata: ObjectMeta
    kind: str = ""

    @property
    def nsname(self) -> NSName:
        return self.metadata.nsname


@dataclass(frozen=True)
class Service(Object):
    """Service object; ``selector`` picks the pods it routes to."""

    kind: str = SERVICE_KIND
    selector: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "selector", _freeze(self.selector))


def _as_mapping(value: Any) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return value
    return _EMPTY


def label_value(value: Any) -> str:
    """Render a decoded label/selector value the way the API serializes it.

    YAML turns unquoted ``true`` into a bool; the API only ever carries the
    string ``"true"``.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _string_mapping(value: Any) -> Mapping[str, str]:
    return {str(k): label_value(v) for k, v in _as_mapping(value).items()}


def from_manifest(manifest: Mapping[str, Any]) -> Object:
    """Build an :class:`Object` (or :class:`Service`) from a decoded manifest."""

    metadata = manifest.get("metadata")
    if not isinstance(metadata, Mapping):
        raise ValueError("manifest missing 'metadata' mapping")
    if not metadata.get("name"):
        raise ValueError("manifest metadata missing 'name'")

    meta = ObjectMeta(
        name=str(metadata["name"]),
        namespace=str(metadata.get("namespace") or ""),
        labels=_string_mapping(metadata.get("labels")),
    )
    kind = str(manifest.get("kind") or "")
    if kind == SERVICE_KIND:
        spec = _as_mapping(manifest.get("spec"))
        return Service(metadata=meta, selector=_string_mapping(spec.get("selector")))
    return Object(metadata=meta, kind=kind)


# ----------------------------------------------------------------------
# Accessors used by the filters. None of them raise.
# ----------------------------------------------------------------------
def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def labels_for(obj: Any) -> Mapping[str, str]:
    """Return the label mapping of ``obj``; empty when it has none."""

    if isinstance(obj, Object):
        return obj.metadata.labels
    return _string_mapping(_get(_get(obj, "metadata"), "labels"))


def is_service(obj: Any) -> bool:
    return _get(obj, "kind") == SERVICE_KIND


def selector_for(obj: Any) -> Optional[Mapping[str, str]]:
    """Return the selector of a service object, ``None`` for other kinds.

    A service without a selector (including an :class:`Object` whose kind
    is ``Service``) yields an empty mapping.
    """

    if isinstance(obj, Service):
        return obj.selector
    if not is_service(obj):
        return None
    return _string_mapping(_get(_get(obj, "spec"), "selector"))
