"""underbar: eager collection utilities over sequences and mappings.

Every function is a plain module-level callable; import what you need::

    from underbar import each, map_, reduce_

``map``, ``filter`` and ``reduce`` are also bound here as aliases of the
underscored names but are kept out of ``__all__`` so star imports never
shadow the builtins.
"""

from __future__ import annotations

import logging

from underbar.accessors import first, identity, last
from underbar.canonical import canonical_key, strict_equals
from underbar.config import Settings, load_settings
from underbar.constants import EMPTY
from underbar.control import delay, memoize, once, string_key
from underbar.errors import InvalidArgument, InvalidArgumentError
from underbar.iteration import adapt, each, register_adapter, unregister_adapter
from underbar.objects import defaults, extend
from underbar.plugins.interfaces import Eachable
from underbar.search import filter_, index_of, reject, uniq
from underbar.shuffling import shuffle
from underbar.transform import contains, every, map_, pluck, reduce_, some

logging.getLogger(__name__).addHandler(logging.NullHandler())

map = map_  # noqa: A001
filter = filter_  # noqa: A001
reduce = reduce_

__all__ = [
    "EMPTY",
    "Eachable",
    "InvalidArgument",
    "InvalidArgumentError",
    "Settings",
    "adapt",
    "canonical_key",
    "contains",
    "defaults",
    "delay",
    "each",
    "every",
    "extend",
    "filter_",
    "first",
    "identity",
    "index_of",
    "last",
    "load_settings",
    "map_",
    "memoize",
    "once",
    "pluck",
    "reduce_",
    "register_adapter",
    "reject",
    "shuffle",
    "some",
    "strict_equals",
    "string_key",
    "uniq",
    "unregister_adapter",
]
