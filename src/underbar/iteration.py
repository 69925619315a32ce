from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from underbar.config import load_settings
from underbar.errors import ERROR_CODE_UNSUPPORTED_COLLECTION, InvalidArgumentError
from underbar.plugins.interfaces import Eachable, ElementIterator
from underbar.plugins.loader import adapt_with_plugins

AdapterFactory = Callable[[Any], Eachable]


@dataclass(slots=True)
class SequenceAdapter:
    items: Sequence[Any]

    def each(self, iterator: ElementIterator) -> None:
        items = self.items
        for index in range(len(items)):
            iterator(items[index], index, items)


@dataclass(slots=True)
class MappingAdapter:
    entries: Mapping[Any, Any]

    def each(self, iterator: ElementIterator) -> None:
        entries = self.entries
        for key in list(entries):
            iterator(entries[key], key, entries)


# Later registrations take precedence over earlier ones.
_REGISTRY: list[tuple[type, AdapterFactory]] = []


def register_adapter(kind: type, factory: AdapterFactory) -> None:
    """Teach every collection function to iterate instances of ``kind``.

    ``factory`` receives the collection and returns an object with an
    ``each(iterator)`` method calling ``iterator(value, key, collection)``
    once per element.
    """
    unregister_adapter(kind)
    _REGISTRY.append((kind, factory))


def unregister_adapter(kind: type) -> None:
    _REGISTRY[:] = [(registered, factory) for registered, factory in _REGISTRY if registered is not kind]


def adapt(collection: Any) -> Eachable:
    for kind, factory in reversed(_REGISTRY):
        if isinstance(collection, kind):
            return factory(collection)
    if isinstance(collection, Eachable):
        return collection
    if load_settings().load_plugins:
        adapter = adapt_with_plugins(collection)
        if adapter is not None:
            return adapter
    raise InvalidArgumentError(
        code=ERROR_CODE_UNSUPPORTED_COLLECTION,
        message=f"cannot iterate over {type(collection).__name__}",
        details={"type": f"{type(collection).__module__}.{type(collection).__qualname__}"},
    )


def each(collection: Any, iterator: ElementIterator) -> None:
    """Call ``iterator(value, key, collection)`` for every element.

    Sequences are visited by ascending index, mappings in insertion order
    with the key in the second position.
    """
    adapt(collection).each(iterator)


register_adapter(Sequence, SequenceAdapter)
register_adapter(Mapping, MappingAdapter)


__all__ = [
    "MappingAdapter",
    "SequenceAdapter",
    "adapt",
    "each",
    "register_adapter",
    "unregister_adapter",
]
