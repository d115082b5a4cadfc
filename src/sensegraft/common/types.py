"""Shared type definitions for the sensegraft toolchain.

Aliases and protocols used across modules so that collaborators such as
vector tables and gloss scorers can be swapped without reaching for Any.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

import numpy as np
from numpy.typing import NDArray

Vector: TypeAlias = NDArray[np.floating]

# Similarity between a harvested gloss and an inventory gloss; larger is closer.
GlossScorer: TypeAlias = Callable[[str, str], float]


@runtime_checkable
class KeyedVectorsLike(Protocol):
    """Protocol for gensim KeyedVectors-like word vector tables.

    Satisfied by ``gensim.models.KeyedVectors`` and by plain mappings
    wrapped to expose ``__contains__`` and ``get_vector``.
    """

    def __contains__(self, word: object) -> bool:
        ...

    def get_vector(self, word: str) -> Vector:
        """Return the embedding vector for a word."""
        ...


__all__ = ["GlossScorer", "KeyedVectorsLike", "Vector"]
