"""Shared infrastructure for the sensegraft toolchain."""

from __future__ import annotations

from .config import ResolverLimits, get_config_paths, get_limits
from .types import GlossScorer, KeyedVectorsLike, Vector

__all__ = [
    "GlossScorer",
    "KeyedVectorsLike",
    "ResolverLimits",
    "Vector",
    "get_config_paths",
    "get_limits",
]
