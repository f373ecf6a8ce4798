from __future__ import annotations

import re
from collections import Counter
from functools import lru_cache
from typing import Any

from concurso_similarity.models import ConcursoRecord, TermVector
from concurso_similarity.schema import specialty_of
from concurso_similarity.steps.normalize import TextNormalizer

_SEPARATOR_RE = re.compile(r"[^a-zA-Z0-9áéíóúñÁÉÍÓÚÑ]+")


def tokenize(text: str) -> list[str]:
    return [token for token in _SEPARATOR_RE.split(text.lower()) if token]


@lru_cache(maxsize=4096)
def _cached_vector(text: str) -> TermVector:
    return TermVector(summary=text, frequencies=dict(Counter(tokenize(text))))


class TermFrequencyVectorizer:
    """Turns records and documents into bag-of-words term-frequency vectors.

    Vectors are memoized by their normalized text, so unchanged records are
    not re-tokenized on repeated queries.
    """

    def __init__(self, normalizer: TextNormalizer | None = None) -> None:
        self._normalizer = normalizer or TextNormalizer()

    def normalize(self, value: Any) -> str:
        return self._normalizer.normalize(value)

    def vectorize_text(self, text: str) -> TermVector:
        return _cached_vector(self._normalizer.normalize(text))

    def vectorize_document(self, attributes: Any) -> TermVector:
        return _cached_vector(self._normalizer.normalize(attributes))

    def vectorize_record(self, record: ConcursoRecord, text_source: str = "specialty") -> TermVector:
        if text_source == "document":
            return self.vectorize_document(record.attributes)
        text = specialty_of(record.attributes) or record.filename
        if text:
            return self.vectorize_text(text)
        return self.vectorize_document(record.attributes)
