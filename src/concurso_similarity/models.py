from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from concurso_similarity.errors import InvalidRecordError


@dataclass(slots=True, frozen=True)
class ConcursoRecord:
    """One extracted form as supplied by the record store."""

    record_id: int | None
    filename: str
    attributes: dict[str, Any]

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ConcursoRecord":
        filename = raw.get("nombre_archivo")
        if not isinstance(filename, str) or not filename:
            raise InvalidRecordError(f"record {raw.get('id')!r} has no nombre_archivo")
        attributes = raw.get("json_datos")
        if attributes is None:
            attributes = {}
        if not isinstance(attributes, Mapping):
            raise InvalidRecordError(f"record {filename!r}: json_datos must be an object")
        record_id = raw.get("id")
        if record_id is not None and (isinstance(record_id, bool) or not isinstance(record_id, int)):
            raise InvalidRecordError(f"record {filename!r}: id must be an integer")
        return cls(record_id=record_id, filename=filename, attributes=dict(attributes))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"nombre_archivo": self.filename, "json_datos": self.attributes}
        if self.record_id is not None:
            payload = {"id": self.record_id, **payload}
        return payload


@dataclass(slots=True, frozen=True)
class TermVector:
    """Bag-of-words frequencies plus the normalized text they came from."""

    summary: str
    frequencies: dict[str, float]


@dataclass(slots=True, frozen=True)
class VectorizedItem:
    """A record reduced to what clustering needs."""

    record_id: int | None
    filename: str
    vector: TermVector


@dataclass(slots=True)
class ClusterGroup:
    """A group of records that look alike."""

    label: str
    size: int = 0
    record_ids: list[int] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)

    def add(self, record_id: int | None, filename: str, max_examples: int = 3) -> None:
        self.size += 1
        if record_id is not None:
            self.record_ids.append(record_id)
        if len(self.examples) < max_examples:
            self.examples.append(filename)

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "size": self.size, "ids": list(self.record_ids), "ejemplos": list(self.examples)}


@dataclass(slots=True, frozen=True)
class DifferenceDetail:
    """A tracked field whose formatted value changed between two documents."""

    label: str
    previous: str
    current: str

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "previous": self.previous, "current": self.current}


@dataclass(slots=True)
class MatchResult:
    """Existing record scored against a newly supplied document."""

    record_id: int
    filename: str
    score: float
    specialty: str | None = None
    differences: list[DifferenceDetail] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.record_id,
            "nombre_archivo": self.filename,
            "score": self.score,
        }
        if self.specialty is not None:
            payload["descripcion"] = self.specialty
        if self.differences is not None:
            payload["diferencias"] = [difference.to_dict() for difference in self.differences]
        return payload
