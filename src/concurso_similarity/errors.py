from __future__ import annotations


class InvalidRecordError(ValueError):
    """Raised when a record store entry cannot be turned into a ConcursoRecord."""
