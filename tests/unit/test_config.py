from __future__ import annotations

import pytest

from underbar.config import Settings, load_settings
from underbar.constants import (
    DELAY_BACKEND_AUTO,
    DELAY_BACKEND_THREAD,
    ENV_DELAY_BACKEND,
    ENV_LOAD_PLUGINS,
    ENV_RANDOM_SEED,
)
from underbar.errors import ERROR_CODE_INVALID_SETTING, InvalidArgumentError


def test_load_settings_defaults_for_empty_environment() -> None:
    assert load_settings({}) == Settings()
    assert Settings().random_seed is None
    assert Settings().delay_backend == DELAY_BACKEND_AUTO
    assert Settings().load_plugins is True


def test_load_settings_parses_values() -> None:
    settings = load_settings(
        {
            ENV_RANDOM_SEED: " 99 ",
            ENV_DELAY_BACKEND: "Thread",
            ENV_LOAD_PLUGINS: "off",
        }
    )

    assert settings.random_seed == 99
    assert settings.delay_backend == DELAY_BACKEND_THREAD
    assert settings.load_plugins is False


def test_load_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_RANDOM_SEED, "5")
    assert load_settings().random_seed == 5


@pytest.mark.parametrize(
    ("name", "value"),
    [
        (ENV_RANDOM_SEED, "abc"),
        (ENV_DELAY_BACKEND, "greenlet"),
        (ENV_LOAD_PLUGINS, "maybe"),
    ],
)
def test_load_settings_rejects_malformed_values(name: str, value: str) -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        load_settings({name: value})
    assert excinfo.value.code == ERROR_CODE_INVALID_SETTING
    assert excinfo.value.details == {"variable": name, "value": value}
