from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from concurso_similarity.config import ClusterOptions
from concurso_similarity.interfaces import Vectorizer
from concurso_similarity.models import ClusterGroup, ConcursoRecord, VectorizedItem
from concurso_similarity.schema import BlockFlag
from concurso_similarity.steps.clustering import cluster_items
from concurso_similarity.steps.filters import coerce_filters, matches_filters
from concurso_similarity.steps.vectorize import TermFrequencyVectorizer

logger = logging.getLogger(__name__)


class LocalSimilarityPipeline:
    """In-process runner: apply the boolean filters, then cluster what is left."""

    def __init__(self, vectorizer: Vectorizer | None = None, options: ClusterOptions | None = None) -> None:
        self._vectorizer = vectorizer or TermFrequencyVectorizer()
        self._options = options or ClusterOptions()

    def run(
        self,
        records: Sequence[ConcursoRecord],
        filters: Mapping[BlockFlag | str, bool | None] | None = None,
    ) -> list[ClusterGroup]:
        active = coerce_filters(filters or {})
        selected = [record for record in records if matches_filters(record.attributes, active)]
        items = [
            VectorizedItem(
                record_id=record.record_id,
                filename=record.filename,
                vector=self._vectorizer.vectorize_record(record, self._options.text_source),
            )
            for record in selected
        ]
        logger.debug("clustering filtered records", extra={"records": len(records), "selected": len(selected)})
        return cluster_items(items, self._options)
