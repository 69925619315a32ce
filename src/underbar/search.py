from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from underbar.canonical import strict_equals
from underbar.iteration import each


def index_of(seq: Sequence[Any], target: Any) -> int:
    result = -1

    def visit(item: Any, index: int, _collection: Any) -> None:
        nonlocal result
        if result == -1 and strict_equals(item, target):
            result = index

    each(seq, visit)
    return result


def filter_(collection: Any, predicate: Callable[[Any], Any]) -> list[Any]:
    kept: list[Any] = []

    def visit(element: Any, _key: Any, _collection: Any) -> None:
        if predicate(element):
            kept.append(element)

    each(collection, visit)
    return kept


def reject(collection: Any, predicate: Callable[[Any], Any]) -> list[Any]:
    # Falsy results of any type (False, 0, None, "") keep the element.
    return filter_(collection, lambda element: not predicate(element))


def uniq(seq: Sequence[Any]) -> list[Any]:
    """Sort, then drop strictly-equal adjacent duplicates.

    A list argument is sorted in place and stays sorted after the call;
    other sequences are copied first.
    """
    if isinstance(seq, list):
        seq.sort()
        ordered = seq
    else:
        ordered = sorted(seq)

    unique: list[Any] = []
    for index, item in enumerate(ordered):
        if index == 0 or not strict_equals(item, ordered[index - 1]):
            unique.append(item)
    return unique


__all__ = ["filter_", "index_of", "reject", "uniq"]
