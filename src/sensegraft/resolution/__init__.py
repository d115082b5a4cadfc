"""Lemma resolution and graph-proximity checks over the sense inventory."""

from .proximity import MAX_DISTANCE, GraphProximityChecker
from .resolver import LemmaResolver

__all__ = ["GraphProximityChecker", "LemmaResolver", "MAX_DISTANCE"]
