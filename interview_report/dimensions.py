from __future__ import annotations  # Per-answer evaluation dimensions and their session means

from dataclasses import dataclass
from typing import Iterator, Tuple

from .scoring import mean

DIMENSIONS: Tuple[str, ...] = ("clarity", "completeness", "relevance", "confidence")  # Evaluation order


@dataclass(frozen=True)
class DimensionMeans:  # Session-level mean for each dimension
    clarity: float = 0.0
    completeness: float = 0.0
    relevance: float = 0.0
    confidence: float = 0.0

    @classmethod
    def from_session(cls, session) -> "DimensionMeans":  # Average each score sequence on a session snapshot
        return cls(
            clarity=mean(session.clarity_scores),
            completeness=mean(session.completeness_scores),
            relevance=mean(session.relevance_scores),
            confidence=mean(session.confidence_scores),
        )

    def items(self) -> Iterator[Tuple[str, float]]:  # Yield (dimension, mean) in evaluation order
        for name in DIMENSIONS:
            yield name, getattr(self, name)


__all__ = ["DIMENSIONS", "DimensionMeans"]
