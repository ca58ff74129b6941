import pytest

from kcache_filter import NSName
from kcache_watch import HandlerRegistry, ObjectDelete, ObjectUpsert
from kcache_watch.handlers import ObjectHandler


class RecordingHandler(ObjectHandler):
    def __init__(self):
        self.events = []

    def on_object_upsert(self, nsname, obj):
        self.events.append(("upsert", nsname))

    def on_object_delete(self, nsname, obj):
        self.events.append(("delete", nsname))


def test_registry_dispatches_events():
    registry = HandlerRegistry()
    first, second = RecordingHandler(), RecordingHandler()
    registry.register("first", first)
    registry.register("second", second)

    key = NSName("default", "web")
    registry.handle(ObjectUpsert(key, object()))
    registry.handle(ObjectDelete(key, object()))

    assert first.events == [("upsert", key), ("delete", key)]
    assert second.events == first.events


def test_registry_rejects_duplicate_registration():
    registry = HandlerRegistry()
    registry.register("rec", RecordingHandler())

    with pytest.raises(ValueError):
        registry.register("rec", RecordingHandler())


def test_registry_unregister_and_unknown_events():
    registry = HandlerRegistry()
    handler = RecordingHandler()
    registry.register("rec", handler)
    registry.unregister("rec")
    registry.unregister("missing")

    registry.handle(ObjectUpsert(NSName("a", "b"), None))
    assert handler.events == []

    with pytest.raises(TypeError):
        registry.handle("bogus")  # type: ignore[arg-type]
