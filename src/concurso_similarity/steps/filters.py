from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from concurso_similarity.schema import BLOCKS_KEY, BlockFlag

BooleanFilterSet = Mapping[BlockFlag | str, bool | None]


def coerce_filters(filters: BooleanFilterSet) -> dict[BlockFlag, bool]:
    """Drop "don't care" entries; unknown keys raise ValueError."""
    return {BlockFlag(key): value for key, value in filters.items() if value is not None}


def matches_filters(attributes: Mapping[str, Any], filters: BooleanFilterSet) -> bool:
    blocks = attributes.get(BLOCKS_KEY)
    if not isinstance(blocks, Mapping):
        blocks = {}
    for flag, required in coerce_filters(filters).items():
        if bool(blocks.get(flag.value)) != required:
            return False
    return True
