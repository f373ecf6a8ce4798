from concurso_similarity.datasets.profiles import SPECIALTY_PROFILES
from concurso_similarity.datasets.reference import ReferenceDatasetGenerator

__all__ = ["SPECIALTY_PROFILES", "ReferenceDatasetGenerator"]
