"""Engine defaults read from the environment, and the per-call options built from them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ClusterStrategy = Literal["threshold", "kmeans"]
TextSource = Literal["specialty", "document"]

STRATEGIES: tuple[str, ...] = ("threshold", "kmeans")
TEXT_SOURCES: tuple[str, ...] = ("specialty", "document")
RECOMMENDED_THRESHOLD_RANGE = (0.3, 0.9)


class Settings(BaseSettings):
    """Process-wide defaults, sourced from ``CONCURSO_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CONCURSO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Clustering ──
    SIMILARITY_THRESHOLD: float = Field(default=0.6, ge=0.0, le=1.0)
    CLUSTER_STRATEGY: ClusterStrategy = "threshold"
    MAX_ITERATIONS: int = Field(default=5, ge=1)
    TEXT_SOURCE: TextSource = "specialty"

    # ── Normalizer guards ──
    NORMALIZE_MAX_DEPTH: int = Field(default=64, ge=1)
    NORMALIZE_MAX_NODES: int = Field(default=100_000, ge=1)

    # ── Logging ──
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


@dataclass(frozen=True, slots=True)
class ClusterOptions:
    """Parameters for one clustering call."""

    similarity_threshold: float = 0.6
    strategy: str = "threshold"
    max_iterations: int = 5
    text_source: str = "specialty"

    def __post_init__(self) -> None:
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(f"similarity_threshold must be within [0, 1], got {self.similarity_threshold}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"unknown clustering strategy {self.strategy!r}")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")
        if self.text_source not in TEXT_SOURCES:
            raise ValueError(f"unknown text source {self.text_source!r}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClusterOptions":
        return cls(
            similarity_threshold=settings.SIMILARITY_THRESHOLD,
            strategy=settings.CLUSTER_STRATEGY,
            max_iterations=settings.MAX_ITERATIONS,
            text_source=settings.TEXT_SOURCE,
        )

    @property
    def within_recommended_range(self) -> bool:
        low, high = RECOMMENDED_THRESHOLD_RANGE
        return low <= self.similarity_threshold <= high
