"""Memoised per-gloss lemma sets and vectors.

Every distinct gloss string is processed at most once per retained entry and
the result is shared by all threads. Storage is a bounded LRU: the
least-recently used gloss is dropped once ``max_entries`` is exceeded.
"""
from __future__ import annotations

import logging
import re
from collections import OrderedDict
from collections.abc import Callable, Hashable
from threading import Lock
from typing import Any

import numpy as np

from sensegraft.common.config import get_limits
from sensegraft.common.types import KeyedVectorsLike, Vector
from sensegraft.gloss.stopwords import STOP_VERBS, STOP_WORDS
from sensegraft.inventory.base import PartOfSpeech
from sensegraft.resolution.resolver import LemmaResolver

logger = logging.getLogger(__name__)

_EDGE_PUNCT_RE = re.compile(r"^[^\w]+|[^\w]+$")

# Tokens are reduced to the first of these parts of speech that indexes them.
LEMMA_POS = (PartOfSpeech.NOUN, PartOfSpeech.VERB)


def gloss_words(gloss: str) -> list[str]:
    """Whitespace tokens of ``gloss`` with surrounding punctuation removed."""

    words = (_EDGE_PUNCT_RE.sub("", token) for token in gloss.split())
    return [word for word in words if word]


class _LRUMemo:
    def __init__(self, max_entries: int):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self.hits += 1
                return self._entries[key]
            self.misses += 1

        # Computed unlocked; a racing thread's result may already be stored.
        value = compute()

        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                return self._entries[key]
            self._entries[key] = value
            if len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
            return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class GlossAnnotationCache:
    """Thread-safe memo of :meth:`lemmas_of` and :meth:`vector_of` per gloss.

    ``resolver`` reduces tokens to their indexed base forms; without it the
    lowercased tokens are used as they are. ``vectors`` is any table with
    ``__contains__`` and ``get_vector`` (see
    :func:`sensegraft.similarity.embeddings.get_keyed_vectors`).
    """

    def __init__(
        self,
        vectors: KeyedVectorsLike | None = None,
        resolver: LemmaResolver | None = None,
        *,
        max_entries: int | None = None,
    ):
        if max_entries is None:
            max_entries = get_limits().cache_max_entries
        self.vectors = vectors
        self.resolver = resolver
        self._lemmas = _LRUMemo(max_entries)
        self._vector_memo = _LRUMemo(max_entries)

    def lemmas_of(self, gloss: str) -> frozenset[str]:
        return self._lemmas.get_or_compute(gloss, lambda: self._compute_lemmas(gloss))

    def vector_of(self, gloss: str) -> Vector | None:
        if self.vectors is None:
            return None
        return self._vector_memo.get_or_compute(gloss, lambda: self._compute_vector(gloss))

    def _lemmatize(self, word: str) -> str:
        if self.resolver is None:
            return word
        for pos in LEMMA_POS:
            base = self.resolver.base_form(word, pos)
            if base is not None:
                return base
        return word

    def _compute_lemmas(self, gloss: str) -> frozenset[str]:
        lemmas = set()
        for word in gloss_words(gloss):
            word = word.lower()
            if word in STOP_WORDS or word in STOP_VERBS:
                continue
            lemmas.add(self._lemmatize(word))
        return frozenset(lemmas)

    def _compute_vector(self, gloss: str) -> Vector | None:
        total: Vector | None = None
        for word in gloss_words(gloss):
            if word not in self.vectors:
                continue
            vector = np.asarray(self.vectors.get_vector(word), dtype=np.float64)
            total = vector.copy() if total is None else total + vector

        if total is None:
            logger.debug("No vectors for gloss words", extra={"gloss": gloss})
        return total

    def __len__(self) -> int:
        return max(len(self._lemmas), len(self._vector_memo))

    def stats(self) -> dict[str, int]:
        return {
            "lemma_entries": len(self._lemmas),
            "lemma_hits": self._lemmas.hits,
            "lemma_misses": self._lemmas.misses,
            "vector_entries": len(self._vector_memo),
            "vector_hits": self._vector_memo.hits,
            "vector_misses": self._vector_memo.misses,
        }

    def clear(self) -> None:
        self._lemmas.clear()
        self._vector_memo.clear()


__all__ = ["GlossAnnotationCache", "LEMMA_POS", "gloss_words"]
