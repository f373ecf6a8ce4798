from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from concurso_similarity.models import ConcursoRecord, MatchResult
from concurso_similarity.schema import specialty_of
from concurso_similarity.steps.diff import diff_documents
from concurso_similarity.steps.similarity import cosine_similarity
from concurso_similarity.steps.vectorize import TermFrequencyVectorizer

logger = logging.getLogger(__name__)

MAX_RESULTS = 10


class MatchRanker:
    """Ranks stored records by similarity to a newly supplied document."""

    def __init__(self, vectorizer: TermFrequencyVectorizer | None = None, limit: int = MAX_RESULTS) -> None:
        self._vectorizer = vectorizer or TermFrequencyVectorizer()
        self._limit = limit

    def rank(self, new_document: Mapping[str, Any], corpus: Sequence[ConcursoRecord]) -> list[MatchResult]:
        return self._score(new_document, corpus, with_differences=False)

    def compare(self, new_document: Mapping[str, Any], corpus: Sequence[ConcursoRecord]) -> list[MatchResult]:
        """Like ``rank``, with field-level differences attached to every result."""
        return self._score(new_document, corpus, with_differences=True)

    def _score(
        self,
        new_document: Mapping[str, Any],
        corpus: Sequence[ConcursoRecord],
        *,
        with_differences: bool,
    ) -> list[MatchResult]:
        query = self._vectorizer.vectorize_document(new_document)
        if not query.summary:
            return []

        scored: list[tuple[float, ConcursoRecord]] = []
        for record in corpus:
            score = cosine_similarity(query, self._vectorizer.vectorize_document(record.attributes))
            if score > 0:
                scored.append((score, record))
        scored.sort(key=lambda entry: -entry[0])

        results = [
            MatchResult(
                record_id=record.record_id if record.record_id is not None else 0,
                filename=record.filename,
                score=score,
                specialty=specialty_of(record.attributes),
                differences=diff_documents(new_document, record.attributes) if with_differences else None,
            )
            for score, record in scored[: self._limit]
        ]
        logger.debug("ranked corpus", extra={"corpus": len(corpus), "matches": len(scored), "returned": len(results)})
        return results
