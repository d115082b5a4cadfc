"""Graph-distance checks against the inventory's relation graph."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sensegraft.inventory.base import (
    HYPERNYM_POINTERS,
    PartOfSpeech,
    Pointer,
    SATELLITE_POINTERS,
    SenseInventory,
    Synset,
    TAXONOMIC_POINTERS,
)

from .resolver import LemmaResolver

logger = logging.getLogger(__name__)

# Candidate is hop 0; targets up to this many edges away count as present.
MAX_DISTANCE = 2


class GraphProximityChecker:
    """
    Decides whether a lemma already has a sense close to a proposed attachment
    point, and answers hypernym-ancestry questions.

    The relation graph is not assumed to be acyclic; every traversal keeps a
    visited set.
    """

    def __init__(
        self,
        inventory: SenseInventory,
        resolver: LemmaResolver | None = None,
    ):
        self.inventory = inventory
        self.resolver = resolver or LemmaResolver(inventory)

    def _related_ids(self, synset: Synset, pointer: Pointer) -> set[str]:
        try:
            return set(self.inventory.related(synset, pointer))
        except Exception as exc:
            logger.debug(
                "Relation lookup failed",
                extra={"synset_id": synset.id, "pointer": pointer.name, "error": str(exc)},
            )
            return set()

    def _fetch(self, synset_id: str) -> Synset | None:
        try:
            return self.inventory.synset(synset_id)
        except Exception as exc:
            logger.debug("Synset fetch failed", extra={"synset_id": synset_id, "error": str(exc)})
            return None

    def neighbours(self, synset: Synset, pos: PartOfSpeech) -> set[Synset]:
        """Synsets one edge away over hypernym/hyponym pointers, plus
        similar-to and also-see for adjectives and adverbs."""

        pointers = TAXONOMIC_POINTERS
        if pos in (PartOfSpeech.ADJECTIVE, PartOfSpeech.ADVERB):
            pointers = TAXONOMIC_POINTERS + SATELLITE_POINTERS

        ids: set[str] = set()
        for pointer in pointers:
            ids |= self._related_ids(synset, pointer)

        result: set[Synset] = set()
        for synset_id in ids:
            neighbour = self._fetch(synset_id)
            if neighbour is not None:
                result.add(neighbour)
        return result

    def already_present(
        self,
        lemma: str,
        pos: PartOfSpeech,
        candidates: Iterable[Synset],
    ) -> bool:
        """True if a sense of ``lemma`` lies within two edges of any candidate."""

        targets = set(self.resolver.resolve_all(lemma, pos))
        if not targets:
            return False

        for candidate in candidates:
            if candidate in targets:
                return True
            visited = {candidate}
            frontier = {candidate}
            for _ in range(MAX_DISTANCE):
                next_frontier: set[Synset] = set()
                for synset in frontier:
                    for neighbour in self.neighbours(synset, pos):
                        if neighbour in targets:
                            return True
                        if neighbour not in visited:
                            visited.add(neighbour)
                            next_frontier.add(neighbour)
                frontier = next_frontier
        return False

    def is_descendant(self, start: Synset, goal_id: str) -> bool:
        """True if ``goal_id`` is reachable from ``start`` along hypernym edges."""

        if start.id == goal_id:
            return True

        visited: set[str] = {start.id}
        frontier: set[str] = set()
        for pointer in HYPERNYM_POINTERS:
            frontier |= self._related_ids(start, pointer)

        while frontier:
            if goal_id in frontier:
                return True
            visited |= frontier

            next_frontier: set[str] = set()
            for synset_id in frontier:
                synset = self._fetch(synset_id)
                if synset is None:
                    continue
                for pointer in HYPERNYM_POINTERS:
                    next_frontier |= self._related_ids(synset, pointer) - visited
            frontier = next_frontier
        return False


__all__ = ["GraphProximityChecker", "MAX_DISTANCE"]
