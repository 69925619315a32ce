from __future__ import annotations


class _Empty:
    """Returned by `first`/`last` when the sequence has no elements."""

    _instance: _Empty | None = None

    def __new__(cls) -> _Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self) -> str:
        return "EMPTY"


EMPTY = _Empty()

# Distinguishes "argument omitted" from an explicit None.
MISSING: object = object()

# Environment-driven settings.
ENV_RANDOM_SEED = "UNDERBAR_RANDOM_SEED"
ENV_DELAY_BACKEND = "UNDERBAR_DELAY_BACKEND"
ENV_LOAD_PLUGINS = "UNDERBAR_LOAD_PLUGINS"

DELAY_BACKEND_AUTO = "auto"
DELAY_BACKEND_THREAD = "thread"
DELAY_BACKEND_ASYNCIO = "asyncio"
DELAY_BACKENDS = (
    DELAY_BACKEND_AUTO,
    DELAY_BACKEND_THREAD,
    DELAY_BACKEND_ASYNCIO,
)

ADAPTER_ENTRY_POINT_GROUP = "underbar.collection_adapters"

MILLISECONDS_PER_SECOND = 1000.0
