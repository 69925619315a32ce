from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


def extend(target: MutableMapping[Any, Any], *sources: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Copy every key of each source into ``target``; later sources win."""
    for source in sources:
        for key in source:
            target[key] = source[key]
    return target


def defaults(target: MutableMapping[Any, Any], *sources: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Fill in keys missing from ``target``; existing keys are never overwritten."""
    for source in sources:
        for key in source:
            if key not in target:
                target[key] = source[key]
    return target


__all__ = ["defaults", "extend"]
