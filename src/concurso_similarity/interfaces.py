from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, Sequence

from concurso_similarity.models import ClusterGroup, ConcursoRecord, MatchResult, TermVector, VectorizedItem
from concurso_similarity.schema import BlockFlag


class Vectorizer(Protocol):
    """Step 1: flatten records into term-frequency vectors."""

    def vectorize_document(self, attributes: Any) -> TermVector:
        ...

    def vectorize_record(self, record: ConcursoRecord, text_source: str = "specialty") -> TermVector:
        ...


class Clusterer(Protocol):
    """Step 2: group vectorized records."""

    def cluster(self, items: Sequence[VectorizedItem]) -> list[ClusterGroup]:
        ...


class Ranker(Protocol):
    """Step 3: score stored records against a new document."""

    def rank(self, new_document: Mapping[str, Any], corpus: Sequence[ConcursoRecord]) -> list[MatchResult]:
        ...

    def compare(self, new_document: Mapping[str, Any], corpus: Sequence[ConcursoRecord]) -> list[MatchResult]:
        ...


class SimilarityPipeline(Protocol):
    """Filter-then-cluster entry point used by the UI layer."""

    def run(
        self,
        records: Sequence[ConcursoRecord],
        filters: Mapping[BlockFlag | str, bool | None] | None = None,
    ) -> list[ClusterGroup]:
        ...
