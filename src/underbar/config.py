from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from underbar.constants import (
    DELAY_BACKEND_AUTO,
    DELAY_BACKENDS,
    ENV_DELAY_BACKEND,
    ENV_LOAD_PLUGINS,
    ENV_RANDOM_SEED,
)
from underbar.errors import ERROR_CODE_INVALID_SETTING, InvalidArgumentError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True, frozen=True)
class Settings:
    random_seed: int | None = None
    delay_backend: str = DELAY_BACKEND_AUTO
    load_plugins: bool = True


def _invalid(name: str, raw: str, expected: str) -> InvalidArgumentError:
    return InvalidArgumentError(
        code=ERROR_CODE_INVALID_SETTING,
        message=f"{name} must be {expected}, got {raw!r}",
        details={"variable": name, "value": raw},
    )


def _parse_seed(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise _invalid(ENV_RANDOM_SEED, raw, "an integer") from None


def _parse_backend(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return DELAY_BACKEND_AUTO
    backend = raw.strip().lower()
    if backend not in DELAY_BACKENDS:
        raise _invalid(ENV_DELAY_BACKEND, raw, "one of " + ", ".join(DELAY_BACKENDS))
    return backend


def _parse_flag(name: str, raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise _invalid(name, raw, "a boolean flag")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        random_seed=_parse_seed(env.get(ENV_RANDOM_SEED)),
        delay_backend=_parse_backend(env.get(ENV_DELAY_BACKEND)),
        load_plugins=_parse_flag(ENV_LOAD_PLUGINS, env.get(ENV_LOAD_PLUGINS), True),
    )


__all__ = ["Settings", "load_settings"]
