from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable, Hashable
from functools import wraps
from typing import Any, TypeVar

from underbar.canonical import canonical_key
from underbar.config import load_settings
from underbar.constants import (
    DELAY_BACKEND_ASYNCIO,
    DELAY_BACKEND_THREAD,
    MILLISECONDS_PER_SECOND,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


def once(fn: Callable[..., T]) -> Callable[..., T]:
    """Run ``fn`` on the first call only; later calls return that result.

    A first call that raises caches nothing, so the next call runs ``fn``
    again. There is no locking.
    """
    called = False
    result: Any = None

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        nonlocal called, result
        if not called:
            result = fn(*args, **kwargs)
            called = True
        return result

    return wrapper


def string_key(*args: Any, **kwargs: Any) -> str:
    """Join the string forms of the arguments with commas.

    Argument lists that print the same share a cache entry, for example
    ``(1, "2")`` and ``("1", 2)``.
    """
    parts = [str(arg) for arg in args]
    parts.extend(f"{name}={kwargs[name]}" for name in sorted(kwargs))
    return ",".join(parts)


def memoize(fn: Callable[..., T], hasher: Callable[..., Hashable] | None = None) -> Callable[..., T]:
    """Cache ``fn``'s results per argument list.

    By default the key is structural and type-aware (see
    ``underbar.canonical.canonical_key``), so unhashable arguments such as
    lists and dicts work and ``1`` never shares an entry with ``"1"``. Pass
    ``hasher`` to derive keys differently; it receives the call's arguments.
    The cache dict is available as ``wrapper.cache``.

    Arguments keyed by identity stay referenced for the life of the wrapper
    so their ids cannot be reused by later, different objects.
    """
    cache: dict[Hashable, Any] = {}
    pinned: dict[Hashable, list[Any]] = {}

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        opaque: list[Any] = []
        if hasher is not None:
            key = hasher(*args, **kwargs)
        else:
            key = canonical_key(args, kwargs, opaque)
        if key in cache:
            return cache[key]
        logger.debug("memoize miss for %s", getattr(fn, "__qualname__", fn))
        value = fn(*args, **kwargs)
        cache[key] = value
        if opaque:
            pinned[key] = opaque
        return value

    wrapper.cache = cache  # type: ignore[attr-defined]
    return wrapper


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def delay(fn: Callable[..., Any], wait_ms: float, *args: Any) -> None:
    """Call ``fn(*args)`` once, no earlier than ``wait_ms`` milliseconds from now.

    Inside a running asyncio loop the call is scheduled on that loop;
    elsewhere a daemon timer thread runs it. The result is discarded.
    """
    seconds = max(0.0, float(wait_ms)) / MILLISECONDS_PER_SECOND
    backend = load_settings().delay_backend
    loop = None if backend == DELAY_BACKEND_THREAD else _running_loop()

    if backend == DELAY_BACKEND_ASYNCIO and loop is None:
        raise RuntimeError("delay() with the asyncio backend requires a running event loop")

    if loop is not None:
        logger.debug("delay: scheduling %s on event loop in %.3fs", getattr(fn, "__qualname__", fn), seconds)
        loop.call_later(seconds, fn, *args)
        return

    logger.debug("delay: scheduling %s on timer thread in %.3fs", getattr(fn, "__qualname__", fn), seconds)
    timer = threading.Timer(seconds, fn, args=args)
    timer.daemon = True
    timer.start()


__all__ = ["delay", "memoize", "once", "string_key"]
