from types import SimpleNamespace

import pytest

from kcache_filter import (
    Filter,
    NSName,
    Object,
    ObjectMeta,
    Service,
    make_all,
    make_labels,
    make_nsname,
    make_null,
    make_service_for,
)


def pod(name: str, labels=None, namespace: str = "default") -> Object:
    return Object(ObjectMeta(name=name, namespace=namespace, labels=labels or {}), kind="Pod")


def service(name: str, selector=None, namespace: str = "default") -> Service:
    return Service(ObjectMeta(name=name, namespace=namespace), selector=selector or {})


SAMPLES = [
    pod("a"),
    pod("b", {"app": "web"}),
    service("svc", {"app": "web"}),
    {"metadata": {"name": "raw"}},
    {},
    None,
    object(),
]


@pytest.mark.parametrize("obj", SAMPLES)
def test_null_accepts_and_all_rejects_everything(obj):
    assert make_null().accept(obj) is True
    assert make_all().accept(obj) is False


def test_null_and_all_equality():
    assert make_null().equals(make_null())
    assert make_all().equals(make_all())
    assert not make_null().equals(make_all())
    assert not make_all().equals(make_null())


@pytest.mark.parametrize("obj", SAMPLES)
def test_empty_labels_filter_accepts_everything(obj):
    assert make_labels({}).accept(obj) is True


def test_labels_filter_is_subset_match():
    f = make_labels({"a": "1"})

    assert f.accept(pod("x", {"a": "1", "b": "2"}))
    assert not f.accept(pod("x", {"a": "2"}))
    assert not f.accept(pod("x"))
    assert not f.accept(None)


def test_labels_filter_reads_manifest_mappings():
    f = make_labels({"app": "web"})

    assert f.accept({"metadata": {"name": "x", "labels": {"app": "web"}}})
    assert not f.accept({"metadata": {"name": "x", "labels": None}})


def test_labels_filter_equality_ignores_order():
    first = make_labels({"a": "1", "b": "2"})
    second = make_labels({"b": "2", "a": "1"})

    assert first.equals(second)
    assert not first.equals(make_labels({"a": "1"}))
    assert not first.equals(make_labels({"a": "1", "b": "3"}))
    assert make_labels({}).equals(make_labels({}))
    assert not make_labels({}).equals(make_null())


def test_labels_filter_copies_target():
    target = {"a": "1"}
    f = make_labels(target)
    target["a"] = "2"

    assert f.accept(pod("x", {"a": "1"}))
    assert not f.accept(pod("x", {"a": "2"}))


def test_service_for_filter():
    f = make_service_for({"app": "x"})

    assert f.accept(service("svc", {"app": "x"}))
    assert not f.accept(service("svc", {}))
    assert not f.accept(pod("svc", {"app": "x"}))
    assert not f.accept(None)


def test_service_for_filter_direction():
    f = make_service_for({"app": "x", "tier": "y"})

    # selector must be contained in the target, not the other way around
    assert f.accept(service("svc", {"app": "x"}))
    assert not f.accept(service("svc", {"app": "x", "tier": "y", "zone": "z"}))
    assert not f.accept(service("svc", {"app": "other"}))


def test_service_for_empty_target_rejects():
    assert not make_service_for({}).accept(service("svc", {"app": "x"}))


def test_service_for_reads_manifest_mappings():
    f = make_service_for({"app": "x"})
    manifest = {
        "kind": "Service",
        "metadata": {"name": "svc"},
        "spec": {"selector": {"app": "x"}},
    }

    assert f.accept(manifest)
    assert not f.accept({**manifest, "kind": "Deployment"})
    assert not f.accept({"kind": "Service", "metadata": {"name": "svc"}})


def test_service_for_equality():
    first = make_service_for({"app": "x", "tier": "y"})

    assert first.equals(make_service_for({"tier": "y", "app": "x"}))
    assert not first.equals(make_service_for({"app": "x"}))
    assert not first.equals(make_labels({"app": "x", "tier": "y"}))
    assert make_service_for({}).equals(make_service_for({}))


def test_nsname_filter_collapses_duplicates():
    f = make_nsname(NSName("a", "b"), NSName("a", "b"))

    assert len(f.names) == 1
    assert f.accept(pod("b", namespace="a"))
    assert not f.accept(pod("c", namespace="a"))
    assert not f.accept(None)


def test_nsname_filter_accepts_strings_and_tuples():
    f = make_nsname("a/b", ("c", "d"), "cluster-scoped")

    assert f.names == frozenset(
        {NSName("a", "b"), NSName("c", "d"), NSName("", "cluster-scoped")}
    )


def test_nsname_filter_equality():
    f = make_nsname(NSName("a", "b"), NSName("c", "d"))

    assert f.equals(make_nsname(NSName("c", "d"), NSName("a", "b")))
    assert not f.equals(make_nsname(NSName("a", "b")))
    assert not f.equals(make_null())
    assert not f.equals(make_all())
    assert not f.equals(make_labels({}))
    assert not f.equals(make_service_for({}))


def test_empty_nsname_filter():
    f = make_nsname()

    assert not f.accept(pod("a"))
    assert f.equals(make_nsname())
    assert not f.equals(make_all())


def test_filters_behave_as_values():
    filters = {
        make_labels({"a": "1"}),
        make_labels({"a": "1"}),
        make_nsname("a/b"),
        make_nsname("a/b", "a/b"),
        make_null(),
        make_null(),
    }

    assert len(filters) == 3
    assert make_service_for({"a": "1"}) != make_labels({"a": "1"})
    assert make_null() != "null"


def test_service_for_filter_copies_target():
    target = {"app": "x"}
    f = make_service_for(target)
    target["app"] = "y"

    assert f.accept(service("svc", {"app": "x"}))
    assert not f.accept(service("svc", {"app": "y"}))
    assert f.equals(make_service_for({"app": "x"}))


def test_service_for_accepts_api_model_objects():
    f = make_service_for({"app": "x"})
    model = SimpleNamespace(
        kind="Service",
        metadata=SimpleNamespace(name="svc", namespace="default", labels=None),
        spec=SimpleNamespace(selector={"app": "x"}),
    )

    assert f.accept(model)
    assert not f.accept(SimpleNamespace(kind="Pod", metadata=model.metadata, spec=model.spec))
    # a generic object of kind Service has no selector and never matches
    assert not f.accept(Object(ObjectMeta(name="svc"), kind="Service"))


def test_service_for_normalizes_raw_selector_values():
    f = make_service_for({"port": "80", "public": "true"})
    manifest = {
        "kind": "Service",
        "metadata": {"name": "svc"},
        "spec": {"selector": {"port": 80, "public": True}},
    }

    assert f.accept(manifest)


def test_make_nsname_rejects_empty_names():
    for bad in [("a", ""), NSName("a", ""), "a/", ""]:
        with pytest.raises(ValueError):
            make_nsname(bad)


class CustomFilter(Filter):
    def accept(self, obj):
        return True


@pytest.mark.parametrize(
    "f",
    [
        make_null(),
        make_all(),
        make_labels({}),
        make_labels({"a": "1"}),
        make_service_for({}),
        make_service_for({"a": "1"}),
        make_nsname(),
        make_nsname("a/b"),
    ],
)
@pytest.mark.parametrize("other", [None, "null", CustomFilter()])
def test_equals_against_unknown_variants_is_false(f, other):
    assert f.equals(other) is False
