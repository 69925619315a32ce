from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from underbar import contains, each, filter_, map_, register_adapter, unregister_adapter
from underbar.errors import ERROR_CODE_UNSUPPORTED_COLLECTION, InvalidArgumentError
from underbar.iteration import MappingAdapter, SequenceAdapter, adapt


class Ring:
    def __init__(self, *items: Any) -> None:
        self.items = list(items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)


class RingAdapter:
    def __init__(self, ring: Ring) -> None:
        self.ring = ring

    def each(self, iterator: Any) -> None:
        for position, item in enumerate(self.ring.items):
            iterator(item, position, self.ring)


class Countdown:
    def __init__(self, start: int) -> None:
        self.start = start

    def each(self, iterator: Any) -> None:
        for step, value in enumerate(range(self.start, 0, -1)):
            iterator(value, step, self)


def test_each_visits_sequence_in_index_order() -> None:
    values = ["a", "b", "c"]
    seen: list[tuple[Any, Any, Any]] = []

    each(values, lambda value, index, collection: seen.append((value, index, collection)))

    assert seen == [("a", 0, values), ("b", 1, values), ("c", 2, values)]


def test_each_visits_mapping_in_insertion_order_with_keys() -> None:
    record = {"z": 1, "a": 2}
    seen: list[tuple[Any, Any]] = []

    each(record, lambda value, key, collection: seen.append((key, value)))

    assert seen == [("z", 1), ("a", 2)]


def test_each_returns_none_and_skips_empty_collections() -> None:
    calls: list[Any] = []
    assert each([], calls.append) is None
    assert each({}, calls.append) is None
    assert calls == []


def test_adapt_selects_builtin_adapters() -> None:
    assert isinstance(adapt([1]), SequenceAdapter)
    assert isinstance(adapt((1,)), SequenceAdapter)
    assert isinstance(adapt({"a": 1}), MappingAdapter)


def test_unsupported_collection_raises() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        each(42, lambda *_: None)
    assert excinfo.value.code == ERROR_CODE_UNSUPPORTED_COLLECTION
    assert excinfo.value.details["type"] == "builtins.int"


def test_registered_adapter_extends_every_collection_function() -> None:
    register_adapter(Ring, RingAdapter)
    try:
        ring = Ring(3, 4, 5)
        assert map_(ring, lambda item: item * 2) == [6, 8, 10]
        assert filter_(ring, lambda item: item % 2) == [3, 5]
        assert contains(ring, 4) is True
    finally:
        unregister_adapter(Ring)

    with pytest.raises(InvalidArgumentError):
        each(Ring(1), lambda *_: None)


def test_objects_with_each_method_are_used_directly() -> None:
    countdown = Countdown(3)
    assert adapt(countdown) is countdown
    assert map_(countdown, lambda value: value) == [3, 2, 1]


def test_registering_same_kind_replaces_previous_adapter() -> None:
    from underbar import iteration

    before = len(iteration._REGISTRY)
    register_adapter(Ring, RingAdapter)
    register_adapter(Ring, RingAdapter)
    try:
        assert len(iteration._REGISTRY) == before + 1
        assert map_(Ring(1, 2), lambda item: item) == [1, 2]
    finally:
        unregister_adapter(Ring)
    assert len(iteration._REGISTRY) == before
