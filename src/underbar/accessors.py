from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from underbar.constants import EMPTY
from underbar.errors import check_count

T = TypeVar("T")


def identity(value: T) -> T:
    return value


def first(seq: Sequence[Any], n: int | None = None) -> Any:
    """Return the first element, or the first ``n`` elements as a new sequence."""
    if n is None:
        return seq[0] if len(seq) else EMPTY
    count = check_count(n, operation="first")
    return seq[:count]


def last(seq: Sequence[Any], n: int | None = None) -> Any:
    """Return the last element, or the last ``n`` elements as a new sequence.

    Asking for more elements than exist returns a copy of the whole sequence.
    """
    if n is None:
        return seq[-1] if len(seq) else EMPTY
    count = check_count(n, operation="last")
    if count >= len(seq):
        return seq[:]
    return seq[len(seq) - count :]


__all__ = ["first", "identity", "last"]
