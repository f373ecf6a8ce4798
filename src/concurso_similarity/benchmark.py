"""Timing of clustering runs across thresholds and strategies."""
from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from concurso_similarity.config import STRATEGIES, ClusterOptions
from concurso_similarity.interfaces import SimilarityPipeline
from concurso_similarity.models import ConcursoRecord
from concurso_similarity.runners.local import LocalSimilarityPipeline
from concurso_similarity.steps.vectorize import TermFrequencyVectorizer

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS = (0.4, 0.5, 0.6, 0.7)


@dataclass(slots=True, frozen=True)
class BenchmarkResult:
    strategy: str
    threshold: float
    duration_ms: float
    clusters: int

    def to_dict(self) -> dict[str, object]:
        return {
            "strategy": self.strategy,
            "threshold": self.threshold,
            "durationMs": round(self.duration_ms, 3),
            "clusters": self.clusters,
        }


def _timed_run(
    records: Sequence[ConcursoRecord],
    options: ClusterOptions,
    vectorizer: TermFrequencyVectorizer,
) -> BenchmarkResult:
    pipeline: SimilarityPipeline = LocalSimilarityPipeline(vectorizer=vectorizer, options=options)
    start = time.perf_counter()
    groups = pipeline.run(records)
    duration_ms = (time.perf_counter() - start) * 1000.0
    return BenchmarkResult(
        strategy=options.strategy,
        threshold=options.similarity_threshold,
        duration_ms=duration_ms,
        clusters=len(groups),
    )


def run_similarity_benchmarks(
    records: Sequence[ConcursoRecord],
    thresholds: Sequence[float],
    strategy: str = "threshold",
) -> list[BenchmarkResult]:
    vectorizer = TermFrequencyVectorizer()
    return [
        _timed_run(records, ClusterOptions(similarity_threshold=threshold, strategy=strategy), vectorizer)
        for threshold in thresholds
    ]


def run_strategy_matrix(
    records: Sequence[ConcursoRecord],
    thresholds: Sequence[float] = DEFAULT_THRESHOLDS,
) -> list[BenchmarkResult]:
    vectorizer = TermFrequencyVectorizer()
    results: list[BenchmarkResult] = []
    for threshold in thresholds:
        for strategy in STRATEGIES:
            result = _timed_run(records, ClusterOptions(similarity_threshold=threshold, strategy=strategy), vectorizer)
            logger.info(
                "cluster benchmark",
                extra={
                    "strategy": result.strategy,
                    "threshold": result.threshold,
                    "duration_ms": round(result.duration_ms, 2),
                    "clusters": result.clusters,
                },
            )
            results.append(result)
    return results
