from concurso_similarity.runners.local import LocalSimilarityPipeline

__all__ = ["LocalSimilarityPipeline"]
