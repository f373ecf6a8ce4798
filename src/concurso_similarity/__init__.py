"""Similarity, clustering and field-level diffing for extracted convocatoria forms."""

from concurso_similarity.config import ClusterOptions, Settings
from concurso_similarity.models import ClusterGroup, ConcursoRecord, DifferenceDetail, MatchResult, TermVector
from concurso_similarity.schema import BlockFlag, TrackedField

__all__ = [
    "ClusterOptions",
    "Settings",
    "ClusterGroup",
    "ConcursoRecord",
    "DifferenceDetail",
    "MatchResult",
    "TermVector",
    "BlockFlag",
    "TrackedField",
]
