from concurso_similarity.models import VectorizedItem
from concurso_similarity.steps.clustering import CentroidClusterer, ThresholdClusterer, build_label, cluster_items
from concurso_similarity.steps.diff import diff_documents
from concurso_similarity.steps.filters import matches_filters
from concurso_similarity.steps.normalize import TextNormalizer, flatten_json
from concurso_similarity.steps.ranking import MatchRanker
from concurso_similarity.steps.similarity import cosine_similarity
from concurso_similarity.steps.vectorize import TermFrequencyVectorizer, tokenize

__all__ = [
    "CentroidClusterer",
    "ThresholdClusterer",
    "VectorizedItem",
    "build_label",
    "cluster_items",
    "diff_documents",
    "matches_filters",
    "TextNormalizer",
    "flatten_json",
    "MatchRanker",
    "cosine_similarity",
    "TermFrequencyVectorizer",
    "tokenize",
]
