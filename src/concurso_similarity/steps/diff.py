from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from concurso_similarity.models import DifferenceDetail
from concurso_similarity.schema import TRACKED_FIELDS, TrackedField

MISSING_VALUE = "N/A"


def diff_documents(
    new_doc: Mapping[str, Any] | None,
    old_doc: Mapping[str, Any] | None,
    fields: Sequence[TrackedField] = TRACKED_FIELDS,
) -> list[DifferenceDetail]:
    """Tracked fields whose formatted values differ, in ``fields`` order."""
    differences: list[DifferenceDetail] = []
    for tracked in fields:
        previous = tracked.format(old_doc)
        current = tracked.format(new_doc)
        if previous == current:
            continue
        differences.append(
            DifferenceDetail(
                label=tracked.label,
                previous=previous or MISSING_VALUE,
                current=current or MISSING_VALUE,
            )
        )
    return differences
