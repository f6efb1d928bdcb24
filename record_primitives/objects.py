# =============================================================================
# record_primitives/objects.py - Object Shape Transform
# =============================================================================

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_primitives.combinators import curry
from record_primitives.types import KeyMap


@curry
def rename_keys(key_map: KeyMap, obj: Any) -> dict:
    """
    Return a new dict with obj's keys renamed through key_map.

    Keys absent from key_map (or mapped to a falsy name) are kept as is.
    Keys are written in obj's iteration order, so when two keys are renamed
    to the same name the later one wins:

        rename_keys({"a": "x"}, {"a": 1, "b": 2})            # {"x": 1, "b": 2}
        rename_keys({"a": "x", "b": "x"}, {"a": 1, "b": 2})  # {"x": 2}

    A nil or non-mapping obj gives an empty dict.
    """
    if not isinstance(obj, Mapping):
        return {}
    if not isinstance(key_map, Mapping):
        key_map = {}

    renamed = {}
    for key, value in obj.items():
        renamed[key_map.get(key) or key] = value
    return renamed
