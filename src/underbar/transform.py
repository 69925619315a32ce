from __future__ import annotations

from collections.abc import Callable
from typing import Any

from underbar.accessors import identity
from underbar.canonical import strict_equals
from underbar.constants import MISSING
from underbar.errors import ERROR_CODE_EMPTY_REDUCE, InvalidArgumentError
from underbar.iteration import each


def map_(collection: Any, iterator: Callable[[Any], Any]) -> list[Any]:
    mapped: list[Any] = []
    each(collection, lambda element, _key, _collection: mapped.append(iterator(element)))
    return mapped


def pluck(collection: Any, key: Any) -> list[Any]:
    return map_(collection, lambda item: item[key])


def reduce_(collection: Any, iterator: Callable[[Any, Any], Any], initial: Any = MISSING) -> Any:
    """Fold ``collection`` left to right with ``iterator(accumulator, element)``.

    Without ``initial`` the first element seeds the accumulator and folding
    starts at the second. An empty collection then has no result and
    raises ``InvalidArgumentError``.
    """
    accumulator = initial
    seeded = initial is not MISSING

    def visit(element: Any, _key: Any, _collection: Any) -> None:
        nonlocal accumulator, seeded
        if seeded:
            accumulator = iterator(accumulator, element)
        else:
            accumulator = element
            seeded = True

    each(collection, visit)
    if not seeded:
        raise InvalidArgumentError(
            code=ERROR_CODE_EMPTY_REDUCE,
            message="reduce() of an empty collection with no initial value",
            details={"type": type(collection).__name__},
        )
    return accumulator


def contains(collection: Any, target: Any) -> bool:
    return reduce_(
        collection,
        lambda found, item: True if found else strict_equals(item, target),
        False,
    )


def every(collection: Any, predicate: Callable[[Any], Any] | None = None) -> bool:
    test = predicate or identity
    return bool(reduce_(collection, lambda so_far, element: so_far and test(element), True))


def some(collection: Any, predicate: Callable[[Any], Any] | None = None) -> bool:
    test = predicate or identity
    return bool(reduce_(collection, lambda so_far, element: so_far or test(element), False))


__all__ = ["contains", "every", "map_", "pluck", "reduce_", "some"]
