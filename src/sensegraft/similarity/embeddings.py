"""Process-wide access to word vectors.

The vector table is heavyweight, so it is loaded once per process and shared
by every cache and scorer that asks for it.
"""
from __future__ import annotations

from pathlib import Path
from threading import Lock
from typing import Mapping, Optional

import numpy as np
from gensim.models import KeyedVectors

from sensegraft.common.config import get_config_paths
from sensegraft.common.types import Vector

__all__ = ["VectorTable", "get_keyed_vectors", "load_keyed_vectors"]

# word2vec text/binary exports; anything else is a native gensim save.
_WORD2VEC_SUFFIXES = {".bin": True, ".txt": False, ".vec": False}


class VectorTable:
    """
    Uniform ``__contains__`` / ``get_vector`` access to word vectors.

    Accepts gensim ``KeyedVectors``, a gensim model exposing them as ``.wv``,
    or a plain ``{word: array}`` mapping. Vectors come back unit length when
    ``normalize`` is set, so gloss vectors sum words on an equal footing.
    """

    def __init__(self, model, *, normalize: bool = True):
        self._vectors = getattr(model, "wv", model)
        self.normalize = normalize

    def __contains__(self, word: object) -> bool:
        return word in self._vectors

    def get_vector(self, word: str) -> Vector:
        vectors = self._vectors
        if isinstance(vectors, Mapping):
            vector = np.asarray(vectors[word], dtype=np.float32)
            if self.normalize:
                norm = np.linalg.norm(vector)
                if norm:
                    vector = vector / norm
            return vector
        return vectors.get_vector(word, norm=self.normalize)

    def __getattr__(self, name: str):
        # most_similar, vector_size, etc. stay reachable on the real table
        return getattr(self._vectors, name)


def load_keyed_vectors(path: Path | str) -> KeyedVectors:
    path = Path(path)
    binary = _WORD2VEC_SUFFIXES.get(path.suffix.lower())
    if binary is None:
        return KeyedVectors.load(str(path), mmap="r")
    return KeyedVectors.load_word2vec_format(str(path), binary=binary)


_VECTORS_LOCK = Lock()
_VECTORS: Optional[VectorTable] = None
_VECTORS_PATH: Optional[str] = None


def _resolve_vectors_path(path: Optional[Path | str]) -> str:
    if path is not None:
        return str(path)
    return str(get_config_paths()["vectors"])


def get_keyed_vectors(path: Optional[Path | str] = None) -> VectorTable:
    """Return the process-wide vector table, loading it on first use."""

    global _VECTORS, _VECTORS_PATH

    desired_path = _resolve_vectors_path(path)

    with _VECTORS_LOCK:
        if _VECTORS is not None and _VECTORS_PATH == desired_path:
            return _VECTORS

        table = VectorTable(load_keyed_vectors(desired_path))
        _VECTORS = table
        _VECTORS_PATH = desired_path
        return table
