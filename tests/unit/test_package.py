from __future__ import annotations

import underbar


def test_builtin_named_aliases_point_at_underscored_functions() -> None:
    assert underbar.map is underbar.map_
    assert underbar.filter is underbar.filter_
    assert underbar.reduce is underbar.reduce_


def test_star_import_does_not_shadow_builtins() -> None:
    namespace: dict[str, object] = {}
    exec("from underbar import *", namespace)

    assert "map" not in namespace
    assert "filter" not in namespace
    assert namespace["map_"] is underbar.map_


def test_public_names_are_importable() -> None:
    for name in underbar.__all__:
        assert hasattr(underbar, name), name
