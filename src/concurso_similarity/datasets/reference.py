from __future__ import annotations

import random
from typing import Any

from concurso_similarity.datasets.profiles import COMMENTS, PROVINCES, SPECIALTY_PROFILES
from concurso_similarity.models import ConcursoRecord
from concurso_similarity.schema import BLOCKS_KEY, BlockFlag


class ReferenceDatasetGenerator:
    """Generate synthetic convocatoria records (with intentional near-duplicates) for tests and benchmarks."""

    def __init__(self, seed: int = 7) -> None:
        self._rng = random.Random(seed)

    def generate(self, size: int, duplicate_rate: float = 0.15) -> list[ConcursoRecord]:
        if size <= 0:
            return []

        unique_count = int(size * (1.0 - duplicate_rate))
        unique_count = max(1, min(unique_count, size))

        records = [self._record(i, self._attributes(i)) for i in range(unique_count)]

        while len(records) < size:
            source = self._rng.choice(records[:unique_count])
            records.append(self._record(len(records), self._perturb(source.attributes)))

        self._rng.shuffle(records)
        return records

    def _record(self, idx: int, attributes: dict[str, Any]) -> ConcursoRecord:
        slug = str(attributes.get("especialidad", "concurso")).lower().replace(" ", "_")
        return ConcursoRecord(record_id=idx + 1, filename=f"{idx + 1:05d}_{slug}.pdf", attributes=attributes)

    def _attributes(self, idx: int) -> dict[str, Any]:
        profile = self._rng.choice(SPECIALTY_PROFILES)
        flags = profile["flags"]
        province = self._rng.choice(PROVINCES)
        return {
            "especialidad": profile["especialidad"],
            "descripcion_convocatoria": f"{profile['organismo']} de {province}: {idx % 40 + 1} plazas",
            BLOCKS_KEY: {flag.value: flag in flags for flag in BlockFlag},
            "comentarios": self._rng.choice(COMMENTS),
        }

    def _perturb(self, attributes: dict[str, Any]) -> dict[str, Any]:
        variant = dict(attributes)
        variant[BLOCKS_KEY] = dict(attributes.get(BLOCKS_KEY, {}))

        mutation = self._rng.choice(["flag", "comment", "specialty", "mixed"])

        if mutation in {"flag", "mixed"}:
            flag = self._rng.choice(list(BlockFlag)).value
            variant[BLOCKS_KEY][flag] = not variant[BLOCKS_KEY].get(flag, False)

        if mutation in {"comment", "mixed"}:
            variant["comentarios"] = self._rng.choice(COMMENTS)

        if mutation in {"specialty", "mixed"}:
            specialty = str(variant.get("especialidad", ""))
            variant["especialidad"] = self._rng.choice([specialty.upper(), f"{specialty} (turno libre)", specialty])

        return variant
