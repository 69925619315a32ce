from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Any

from underbar.constants import ADAPTER_ENTRY_POINT_GROUP
from underbar.plugins.interfaces import AdapterPlugin, Eachable

logger = logging.getLogger(__name__)

_loaded: list[AdapterPlugin] | None = None


def _load_group(group: str) -> list[Any]:
    loaded: list[Any] = []
    for entry in entry_points().select(group=group):
        loaded.append(entry.load())
    return loaded


def load_adapter_plugins() -> list[AdapterPlugin]:
    global _loaded
    if _loaded is None:
        plugins: list[AdapterPlugin] = []
        for plugin in _load_group(ADAPTER_ENTRY_POINT_GROUP):
            instance: AdapterPlugin
            instance = plugin() if callable(plugin) else plugin
            plugins.append(instance)
        logger.debug("loaded %d collection adapter plugin(s)", len(plugins))
        _loaded = plugins
    return _loaded


def adapt_with_plugins(collection: Any) -> Eachable | None:
    for plugin in load_adapter_plugins():
        adapter = plugin.adapt(collection)
        if adapter is not None:
            return adapter
    return None


def reset_for_tests() -> None:
    global _loaded
    _loaded = None
