from __future__ import annotations

from math import sqrt

from concurso_similarity.models import TermVector


def cosine_similarity(left: TermVector, right: TermVector) -> float:
    """Cosine of the angle between two frequency vectors; 0.0 if either is empty."""
    left_freq = left.frequencies
    right_freq = right.frequencies
    if not left_freq or not right_freq:
        return 0.0

    smaller, larger = (left_freq, right_freq) if len(left_freq) <= len(right_freq) else (right_freq, left_freq)
    dot = sum(count * larger.get(token, 0.0) for token, count in smaller.items())
    mag_left = sum(count * count for count in left_freq.values())
    mag_right = sum(count * count for count in right_freq.values())
    if mag_left == 0 or mag_right == 0:
        return 0.0
    return min(1.0, dot / sqrt(mag_left * mag_right))
