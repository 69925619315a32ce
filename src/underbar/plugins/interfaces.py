from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

ElementIterator = Callable[[Any, Any, Any], Any]


@runtime_checkable
class Eachable(Protocol):
    # Anything that can visit its elements as iterator(value, key, collection)
    # works with every collection function in the package.
    def each(self, iterator: ElementIterator) -> None:
        ...


class AdapterPlugin(Protocol):
    def adapt(self, collection: Any) -> Eachable | None:
        """Return an adapter for ``collection`` or None when not handled."""
        ...
