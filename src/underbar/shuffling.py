from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Any

from underbar.config import load_settings

logger = logging.getLogger(__name__)

_rng: random.Random | None = None


def _default_rng() -> random.Random:
    global _rng
    if _rng is None:
        _rng = random.Random(load_settings().random_seed)
    return _rng


def _has_distinct_permutation(items: list[Any]) -> bool:
    # Matches list equality: identity first, then ==.
    head = items[0] if items else None
    return len(items) >= 2 and any(not (item is head or item == head) for item in items[1:])


def _fisher_yates(items: list[Any], rng: random.Random) -> list[Any]:
    shuffled = list(items)
    for index in range(len(shuffled) - 1, 0, -1):
        swap = rng.randint(0, index)
        shuffled[index], shuffled[swap] = shuffled[swap], shuffled[index]
    return shuffled


def shuffle(seq: Sequence[Any], rng: random.Random | None = None) -> list[Any]:
    """Return a new list holding ``seq``'s elements in random order.

    Whenever some other ordering exists, the result is guaranteed to differ
    from the input order; a draw equal to the input is thrown away.
    """
    generator = rng if rng is not None else _default_rng()
    original = list(seq)
    shuffled = _fisher_yates(original, generator)
    if not _has_distinct_permutation(original):
        return shuffled

    attempts = 1
    while shuffled == original:
        attempts += 1
        shuffled = _fisher_yates(original, generator)
    if attempts > 1:
        logger.debug("shuffle: %d draw(s) needed for %d elements", attempts, len(original))
    return shuffled


def reset_for_tests() -> None:
    global _rng
    _rng = None


__all__ = ["shuffle"]
