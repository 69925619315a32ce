from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence, Set
from typing import Any


def strict_equals(left: Any, right: Any) -> bool:
    """Equality without coercion: both operands must share an exact type.

    ``1``, ``1.0`` and ``True`` compare equal under ``==`` but are distinct
    here, as are ``1`` and ``"1"``.
    """
    return type(left) is type(right) and left == right


def _tag_float(value: float) -> list[Any]:
    if math.isnan(value):
        return ["float", "NaN"]
    if math.isinf(value):
        return ["float", "Infinity" if value > 0 else "-Infinity"]
    return ["float", repr(value)]


def tag_for_key(value: Any, pinned: list[Any] | None = None) -> Any:
    """Convert ``value`` to a JSON-safe structure that records element types.

    Opaque objects are tagged by identity. When ``pinned`` is given they are
    appended to it; holding that list keeps their ids from being reused.
    """
    if value is None:
        return ["none"]
    if isinstance(value, bool):
        return ["bool", value]
    if isinstance(value, int):
        return ["int", str(value)]
    if isinstance(value, float):
        return _tag_float(value)
    if isinstance(value, str):
        return ["str", value]
    if isinstance(value, (bytes, bytearray)):
        return [type(value).__name__, value.hex()]
    if isinstance(value, Mapping):
        items = [[tag_for_key(key, pinned), tag_for_key(value[key], pinned)] for key in value]
        items.sort(key=lambda pair: json.dumps(pair[0], sort_keys=True))
        return ["mapping", items]
    if isinstance(value, Set):
        members = sorted(
            (tag_for_key(item, pinned) for item in value),
            key=lambda tag: json.dumps(tag, sort_keys=True),
        )
        return ["set", members]
    if isinstance(value, Sequence):
        return [type(value).__name__, [tag_for_key(item, pinned) for item in value]]
    if pinned is not None:
        pinned.append(value)
    return ["object", f"{type(value).__module__}.{type(value).__qualname__}", id(value)]


def canonical_key(
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any] | None = None,
    pinned: list[Any] | None = None,
) -> str:
    payload: dict[str, Any] = {"args": tag_for_key(list(args), pinned)}
    if kwargs:
        payload["kwargs"] = {str(name): tag_for_key(kwargs[name], pinned) for name in sorted(kwargs)}
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


__all__ = ["canonical_key", "strict_equals", "tag_for_key"]
