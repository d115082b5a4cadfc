"""Per-gloss memoisation and gloss similarity.

``embeddings`` imports gensim; it is loaded on demand rather than from here.
"""

from .cache import GlossAnnotationCache, gloss_words
from .scoring import InverseFrequencyScorer, VectorCosineScorer

__all__ = [
    "GlossAnnotationCache",
    "InverseFrequencyScorer",
    "VectorCosineScorer",
    "gloss_words",
]
