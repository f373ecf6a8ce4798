from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from math import sqrt

from concurso_similarity.config import ClusterOptions
from concurso_similarity.interfaces import Clusterer
from concurso_similarity.models import ClusterGroup, TermVector, VectorizedItem
from concurso_similarity.steps.similarity import cosine_similarity

logger = logging.getLogger(__name__)

UNCLASSIFIED_LABEL = "Sin clasificar"
LABEL_TOKENS = 4
MAX_CENTROIDS = 8


def build_label(vector: TermVector, fallback: str) -> str:
    """The most frequent tokens of ``vector``; ``fallback`` when it has none."""
    ranked = sorted(vector.frequencies.items(), key=lambda entry: -entry[1])
    tokens = [token for token, _ in ranked[:LABEL_TOKENS]]
    if not tokens:
        return fallback or UNCLASSIFIED_LABEL
    return " ".join(tokens)


def average_vectors(vectors: Sequence[TermVector]) -> TermVector:
    totals: dict[str, float] = defaultdict(float)
    for vector in vectors:
        for token, count in vector.frequencies.items():
            totals[token] += count
    return TermVector(summary="", frequencies={token: total / len(vectors) for token, total in totals.items()})


def _by_size(groups: Sequence[ClusterGroup]) -> list[ClusterGroup]:
    return sorted(groups, key=lambda group: -group.size)


class ThresholdClusterer:
    """Single-pass clustering against representatives fixed at cluster creation.

    Each item joins the first existing cluster (in creation order) whose
    representative is at least ``similarity_threshold`` similar, or opens a
    new one. The result depends on input order.
    """

    def __init__(self, similarity_threshold: float = 0.6) -> None:
        self._similarity_threshold = similarity_threshold

    def cluster(self, items: Sequence[VectorizedItem]) -> list[ClusterGroup]:
        clusters: list[tuple[TermVector, ClusterGroup]] = []

        for item in items:
            target: ClusterGroup | None = None
            for representative, group in clusters:
                if cosine_similarity(representative, item.vector) >= self._similarity_threshold:
                    target = group
                    break

            if target is None:
                target = ClusterGroup(label=build_label(item.vector, item.vector.summary))
                clusters.append((item.vector, target))

            target.add(item.record_id, item.filename)

        logger.debug(
            "threshold clustering finished",
            extra={"items": len(items), "clusters": len(clusters), "threshold": self._similarity_threshold},
        )
        return _by_size([group for _, group in clusters])


class CentroidClusterer:
    """Deterministic k-means over term-frequency vectors.

    ``k = clamp(round(sqrt(n / 2)), 1, 8)`` and the first ``k`` items seed the
    centroids. Every item starts on centroid 0, so a first round that changes
    nothing stops before any centroid is recomputed. ``max_iterations`` is a hard cap, not a convergence promise.
    """

    def __init__(self, max_iterations: int = 5) -> None:
        self._max_iterations = max_iterations

    @staticmethod
    def centroid_count(item_count: int) -> int:
        return max(1, min(MAX_CENTROIDS, round(sqrt(item_count / 2))))

    def cluster(self, items: Sequence[VectorizedItem]) -> list[ClusterGroup]:
        if not items:
            return []

        k = self.centroid_count(len(items))
        centroids = [item.vector for item in items[:k]]
        assignments = [0] * len(items)

        for iteration in range(self._max_iterations):
            current = [self._nearest(item.vector, centroids) for item in items]
            if current == assignments:
                logger.debug("k-means assignments stable", extra={"iteration": iteration, "k": k})
                break
            assignments = current

            members: dict[int, list[TermVector]] = defaultdict(list)
            for item, index in zip(items, assignments):
                members[index].append(item.vector)
            for index, vectors in members.items():
                centroids[index] = average_vectors(vectors)

        groups: dict[int, ClusterGroup] = {}
        for item, index in zip(items, assignments):
            group = groups.get(index)
            if group is None:
                group = ClusterGroup(label=build_label(centroids[index], item.vector.summary))
                groups[index] = group
            group.add(item.record_id, item.filename)

        logger.debug("k-means clustering finished", extra={"items": len(items), "k": k, "clusters": len(groups)})
        return _by_size(list(groups.values()))

    @staticmethod
    def _nearest(vector: TermVector, centroids: Sequence[TermVector]) -> int:
        best = 0
        best_score = -1.0
        for index, centroid in enumerate(centroids):
            score = cosine_similarity(vector, centroid)
            if score > best_score:
                best = index
                best_score = score
        return best


def cluster_items(items: Sequence[VectorizedItem], options: ClusterOptions) -> list[ClusterGroup]:
    """Cluster with the strategy named in ``options``; k-means needs more than two items."""
    clusterer: Clusterer
    if options.strategy == "kmeans" and len(items) > 2:
        clusterer = CentroidClusterer(max_iterations=options.max_iterations)
    else:
        clusterer = ThresholdClusterer(similarity_threshold=options.similarity_threshold)
    return clusterer.cluster(items)
