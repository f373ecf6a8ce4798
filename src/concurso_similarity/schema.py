from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

BLOCKS_KEY = "bloques_detectados"
SPECIALTY_KEYS = ("especialidad", "descripcion_convocatoria")


class BlockFlag(StrEnum):
    """Boolean blocks the extractor reports under ``bloques_detectados``."""

    PIDE_TASAS = "pide_tasas"
    SOLICITA_ADAPTACION_DISCAPACIDAD = "solicita_adaptacion_discapacidad"
    ESPECIALIDAD_CARNET_BOMBERO = "especialidad_carnet_bombero"
    ESPECIALIDAD_MEDICINA = "especialidad_medicina"


@dataclass(frozen=True, slots=True)
class Present:
    value: Any


class Absent:
    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()
PathValue = Present | Absent


def lookup_path(document: object, path: Sequence[str]) -> PathValue:
    """Descend ``path`` through nested mappings; missing segments yield ABSENT."""
    current: object = document
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return ABSENT
        current = current[key]
    return Present(current)


def stringify(value: PathValue) -> str:
    if isinstance(value, Absent) or value.value is None:
        return ""
    raw = value.value
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    if isinstance(raw, (Mapping, list, tuple)):
        return json.dumps(raw, ensure_ascii=False, sort_keys=True, default=str)
    return str(raw)


def yes_no(value: PathValue) -> str:
    if isinstance(value, Absent):
        return "No"
    return "Sí" if value.value else "No"


@dataclass(frozen=True, slots=True)
class TrackedField:
    """A semantically meaningful JSON path compared by the diff engine."""

    label: str
    path: tuple[str, ...]
    formatter: Callable[[PathValue], str] = stringify

    def format(self, document: Mapping[str, Any] | None) -> str:
        return self.formatter(lookup_path(document, self.path))


TRACKED_FIELDS: tuple[TrackedField, ...] = (
    TrackedField("Especialidad", ("especialidad",)),
    TrackedField("Tasas", (BLOCKS_KEY, BlockFlag.PIDE_TASAS.value), yes_no),
    TrackedField("Adaptación discapacidad", (BLOCKS_KEY, BlockFlag.SOLICITA_ADAPTACION_DISCAPACIDAD.value), yes_no),
    TrackedField("Carnet Bombero", (BLOCKS_KEY, BlockFlag.ESPECIALIDAD_CARNET_BOMBERO.value), yes_no),
    TrackedField("Carnet Medicina", (BLOCKS_KEY, BlockFlag.ESPECIALIDAD_MEDICINA.value), yes_no),
    TrackedField("Comentarios", ("comentarios",)),
)


def specialty_of(attributes: Mapping[str, Any]) -> str:
    """First non-empty specialty/description value, trimmed.

    A whitespace-only specialty still wins over the description and trims to "".
    """
    for key in SPECIALTY_KEYS:
        value = attributes.get(key)
        if isinstance(value, str) and value:
            return value.strip()
    return ""
