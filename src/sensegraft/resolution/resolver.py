"""Map a lemma and part of speech to the inventory senses it denotes.

Resolution falls back through four stages, in order:

1. the lemma itself;
2. its morphological stems;
3. for compounds without stems, the cross product of each token's stems;
4. the roots listed for it as an irregular (exception) form.

Inventory failures never escape: a lookup that raises is logged at DEBUG and
treated as a miss.
"""
from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator

from sensegraft.common.config import ResolverLimits, get_limits
from sensegraft.inventory.base import IndexWord, PartOfSpeech, SenseInventory, Synset

logger = logging.getLogger(__name__)


class LemmaResolver:
    def __init__(
        self,
        inventory: SenseInventory,
        *,
        limits: ResolverLimits | None = None,
    ):
        self.inventory = inventory
        self.limits = limits or get_limits()

    # --- guarded inventory access ----------------------------------------

    def _lookup(self, lemma: str, pos: PartOfSpeech) -> IndexWord | None:
        try:
            return self.inventory.lookup(lemma, pos)
        except Exception as exc:
            logger.debug(
                "Inventory lookup failed", extra={"lemma": lemma, "pos": pos.name, "error": str(exc)}
            )
            return None

    def _stems(self, lemma: str, pos: PartOfSpeech) -> list[str]:
        try:
            return list(self.inventory.stems(lemma, pos))
        except Exception as exc:
            logger.debug(
                "Stemming failed", extra={"lemma": lemma, "pos": pos.name, "error": str(exc)}
            )
            return []

    def _exception_roots(self, lemma: str, pos: PartOfSpeech) -> list[str] | None:
        try:
            return self.inventory.exception_roots(lemma, pos)
        except Exception as exc:
            logger.debug(
                "Exception-list lookup failed",
                extra={"lemma": lemma, "pos": pos.name, "error": str(exc)},
            )
            return None

    def _senses(self, lemma: str, pos: PartOfSpeech) -> list[Synset]:
        index_word = self._lookup(lemma, pos)
        if index_word is None:
            return []
        senses: list[Synset] = []
        for synset_id in index_word.synset_ids:
            try:
                senses.append(self.inventory.synset(synset_id))
            except Exception as exc:
                logger.debug(
                    "Synset fetch failed", extra={"synset_id": synset_id, "error": str(exc)}
                )
        return senses

    # --- fallback chain ---------------------------------------------------

    def compound_stems(self, lemma: str, pos: PartOfSpeech) -> list[str]:
        """Space-joined variants built from every token's stems (or the token).

        Capped by ``limits.max_compound_tokens`` tokens and
        ``limits.max_compound_variants`` variants.
        """

        tokens = lemma.split()
        if len(tokens) > self.limits.max_compound_tokens:
            logger.debug(
                "Compound too long to expand",
                extra={"lemma": lemma, "tokens": len(tokens)},
            )
            return []

        choices = [self._stems(token, pos) or [token] for token in tokens]
        variants = (" ".join(combo) for combo in itertools.product(*choices))
        return list(itertools.islice(variants, self.limits.max_compound_variants))

    def _stages(self, lemma: str, pos: PartOfSpeech) -> Iterator[list[str]]:
        yield [lemma]

        stems = self._stems(lemma, pos)
        yield [stem for stem in stems if stem != lemma]

        if not stems and " " in lemma.strip():
            yield self.compound_stems(lemma, pos)

        yield self._exception_roots(lemma, pos) or []

    @staticmethod
    def _usable(lemma: str | None) -> bool:
        return bool(lemma and lemma.strip())

    def resolve(self, lemma: str, pos: PartOfSpeech) -> Synset | None:
        """Return the first sense found by the earliest successful stage."""

        if not self._usable(lemma):
            return None
        for stage in self._stages(lemma, pos):
            for candidate in stage:
                senses = self._senses(candidate, pos)
                if senses:
                    return senses[0]

        logger.debug("Unresolvable lemma", extra={"lemma": lemma, "pos": pos.name})
        return None

    def resolve_all(self, lemma: str, pos: PartOfSpeech) -> list[Synset]:
        """Return every sense reachable through any stage, first-seen order, no repeats."""

        if not self._usable(lemma):
            return []
        found: dict[Synset, None] = {}
        for stage in self._stages(lemma, pos):
            for candidate in stage:
                for synset in self._senses(candidate, pos):
                    found.setdefault(synset, None)

        if not found:
            logger.debug("Unresolvable lemma", extra={"lemma": lemma, "pos": pos.name})
        return list(found)

    def resolve_many(self, lemmas: Iterable[str], pos: PartOfSpeech) -> list[Synset]:
        found: dict[Synset, None] = {}
        for lemma in lemmas:
            for synset in self.resolve_all(lemma, pos):
                found.setdefault(synset, None)
        return list(found)

    def base_form(self, lemma: str, pos: PartOfSpeech) -> str | None:
        """The indexed form of ``lemma``: itself, a stem, or an exception root."""

        if not self._usable(lemma):
            return None
        if self._lookup(lemma, pos) is not None:
            return lemma
        for stem in self._stems(lemma, pos):
            if stem != lemma and self._lookup(stem, pos) is not None:
                return stem
        for root in self._exception_roots(lemma, pos) or []:
            if self._lookup(root, pos) is not None:
                return root
        return None

    def is_attested(self, lemma: str, pos: PartOfSpeech) -> bool:
        """True if the inventory indexes ``lemma`` directly, as an exception
        form, or through a stem other than the lemma itself."""

        if not self._usable(lemma):
            return False
        if self._lookup(lemma, pos) is not None:
            return True
        if self._exception_roots(lemma, pos) is not None:
            return True
        return any(
            stem != lemma and self._lookup(stem, pos) is not None
            for stem in self._stems(lemma, pos)
        )


__all__ = ["LemmaResolver"]
