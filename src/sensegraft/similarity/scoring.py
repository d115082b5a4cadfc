"""Gloss-to-gloss scorers usable as the attachment proposer's ``scorer``."""
from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable

import numpy as np

from .cache import GlossAnnotationCache

logger = logging.getLogger(__name__)


class VectorCosineScorer:
    """Cosine of the summed word vectors of two glosses; 0.0 when either has none."""

    def __init__(self, cache: GlossAnnotationCache):
        self.cache = cache

    def __call__(self, gloss: str, other: str) -> float:
        left = self.cache.vector_of(gloss)
        right = self.cache.vector_of(other)
        if left is None or right is None:
            return 0.0
        magnitude = float(np.linalg.norm(left) * np.linalg.norm(right))
        if magnitude == 0.0:
            return 0.0
        return float(np.dot(left, right)) / magnitude


class InverseFrequencyScorer:
    """
    Sum of the weights of the lemmas two glosses share.

    A lemma's weight is ``log(N / count)`` over the ``N`` glosses given to
    :meth:`fit`, so rare shared words count for more than common ones.
    Lemmas never seen during fitting weigh as if seen once.
    """

    def __init__(self, cache: GlossAnnotationCache):
        self.cache = cache
        self.weights: dict[str, float] = {}
        self._unseen_weight = 0.0

    def fit(self, glosses: Iterable[str]) -> "InverseFrequencyScorer":
        counts: Counter[str] = Counter()
        total = 0
        for gloss in glosses:
            total += 1
            counts.update(self.cache.lemmas_of(gloss))

        self.weights = {lemma: math.log(total / count) for lemma, count in counts.items()}
        self._unseen_weight = math.log(total) if total else 0.0
        logger.info(
            "Fitted lemma weights", extra={"glosses": total, "lemmas": len(self.weights)}
        )
        return self

    def __call__(self, gloss: str, other: str) -> float:
        shared = self.cache.lemmas_of(gloss) & self.cache.lemmas_of(other)
        return sum(self.weights.get(lemma, self._unseen_weight) for lemma in shared)


__all__ = ["InverseFrequencyScorer", "VectorCosineScorer"]
