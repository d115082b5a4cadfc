"""Propose where a harvested sense attaches in the inventory.

The raw gloss's wiki links mark the likely genus term ("A [[dog]] bred
for..."). That term is grown into candidates, each candidate is resolved to
inventory senses, the sense closest to the harvested gloss is chosen, and the
proposal is dropped if the harvested lemma already has a sense near it.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

from sensegraft.common.config import get_limits
from sensegraft.common.types import GlossScorer
from sensegraft.gloss.annotations import TRAILING_PUNCT_RE, is_slang_gloss
from sensegraft.gloss.candidates import extract_noun_candidates
from sensegraft.gloss.cleaner import strip_annotations
from sensegraft.gloss.stopwords import HYPERNYM_WORDS_TO_AVOID
from sensegraft.ingest.records import LexicalEntry
from sensegraft.inventory.base import PartOfSpeech, SenseInventory, Synset
from sensegraft.resolution.proximity import GraphProximityChecker
from sensegraft.resolution.resolver import LemmaResolver

logger = logging.getLogger(__name__)

# Tried in order; a pattern whose candidates all fail falls through to the next.
NOUN_PATTERNS: Tuple[Tuple[str, re.Pattern[str]], ...] = (
    ("linked-noun", re.compile(r"\b(?:An?|The|Those) \[\[([^\]]+)\]\]")),
    ("initial-noun", re.compile(r"^\[\[([^\]]+)\]\](?:$|[,.;:])")),
    (
        "prep-phrase-linked-noun",
        re.compile(
            r"^(?:In|Of|When|Because|From|On|Above|At)\b .*, (?:the|an?) \[\[([^\]]+)\]\]s?"
        ),
    ),
)
VERB_PATTERN = ("to-verb-link", re.compile(r"\bTo (?:[a-z\-]+ly)?\s?\[\[([^\]]+)\]\]"))

QUOTE_RUN_RE = re.compile(r"'{2,}")


@dataclass(frozen=True)
class AttachmentProposal:
    entry: LexicalEntry
    parent: Synset
    heuristic: str
    candidate: str
    score: Optional[float] = None
    slang: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.entry.id,
            "lemma": self.entry.lemma,
            "pos": self.entry.pos.tag,
            "parent": self.parent.id,
            "parent_gloss": self.parent.gloss,
            "heuristic": self.heuristic,
            "candidate": self.candidate,
            "score": self.score,
            "slang": self.slang,
        }


def _link_target(link_text: str) -> str:
    # [[target|shown]] attaches to what the reader sees.
    return link_text.rsplit("|", 1)[-1]


class AttachmentProposer:
    """
    Proposes a hypernym sense for NOUN and VERB entries not yet in the inventory.

    ``scorer`` compares the harvested gloss with each candidate sense's gloss;
    without one the candidate's first sense is taken. With a scorer, a noun
    candidate whose best sense scores zero or less is skipped.
    """

    def __init__(
        self,
        inventory: SenseInventory,
        scorer: Optional[GlossScorer] = None,
        *,
        resolver: Optional[LemmaResolver] = None,
        checker: Optional[GraphProximityChecker] = None,
    ):
        self.inventory = inventory
        self.scorer = scorer
        self.resolver = resolver or LemmaResolver(inventory)
        self.checker = checker or GraphProximityChecker(inventory, self.resolver)

    def propose(self, entry: LexicalEntry) -> Optional[AttachmentProposal]:
        if entry.pos is PartOfSpeech.NOUN:
            return self._propose_noun(entry)
        if entry.pos is PartOfSpeech.VERB:
            return self._propose_verb(entry)
        return None

    def _best_sense(
        self, senses: List[Synset], cleaned_gloss: str
    ) -> Tuple[Optional[Synset], Optional[float]]:
        if self.scorer is None:
            return senses[0], None

        best: Optional[Synset] = None
        best_score = float("-inf")
        for synset in senses:
            score = self.scorer(cleaned_gloss, synset.gloss)
            if score > best_score:
                best, best_score = synset, score
        return best, best_score

    def _attach(
        self,
        entry: LexicalEntry,
        pos: PartOfSpeech,
        candidate: str,
        cleaned_gloss: str,
        *,
        require_positive: bool,
    ) -> Tuple[Optional[Synset], Optional[float]]:
        if not self.resolver.is_attested(candidate, pos):
            return None, None

        senses = self.resolver.resolve_all(candidate, pos)
        if not senses:
            return None, None

        best, score = self._best_sense(senses, cleaned_gloss)
        if best is None or (require_positive and score is not None and score <= 0):
            return None, None

        if self.checker.already_present(entry.lemma, pos, {best}):
            logger.debug(
                "Lemma already near proposed parent",
                extra={"lemma": entry.lemma, "parent": best.id},
            )
            return None, None
        return best, score

    def _propose_noun(self, entry: LexicalEntry) -> Optional[AttachmentProposal]:
        pos = PartOfSpeech.NOUN
        if self.resolver.is_attested(entry.lemma, pos):
            return None

        for raw_gloss, cleaned_gloss in entry.annotations.raw_gloss_to_cleaned.items():
            if not cleaned_gloss:
                continue
            text = QUOTE_RUN_RE.sub("", strip_annotations(raw_gloss)).strip()

            for heuristic, pattern in NOUN_PATTERNS:
                match = pattern.search(text)
                if match is None:
                    continue

                term = _link_target(match.group(1))
                for candidate in extract_noun_candidates(self.resolver, cleaned_gloss, term):
                    if candidate.lower() in HYPERNYM_WORDS_TO_AVOID:
                        continue
                    parent, score = self._attach(
                        entry, pos, candidate, cleaned_gloss, require_positive=True
                    )
                    if parent is not None:
                        return AttachmentProposal(
                            entry, parent, heuristic, candidate, score, is_slang_gloss(raw_gloss)
                        )
        return None

    def _propose_verb(self, entry: LexicalEntry) -> Optional[AttachmentProposal]:
        pos = PartOfSpeech.VERB
        if self.resolver.is_attested(entry.lemma, pos):
            return None

        heuristic, pattern = VERB_PATTERN
        for raw_gloss, cleaned_gloss in entry.annotations.raw_gloss_to_cleaned.items():
            match = pattern.search(raw_gloss)
            if match is None:
                continue

            candidate = TRAILING_PUNCT_RE.sub("", _link_target(match.group(1)))
            parent, score = self._attach(
                entry, pos, candidate, cleaned_gloss, require_positive=False
            )
            if parent is not None:
                return AttachmentProposal(
                    entry, parent, heuristic, candidate, score, is_slang_gloss(raw_gloss)
                )
        return None


def propose_all(
    proposer: AttachmentProposer,
    entries: Iterable[LexicalEntry],
    *,
    max_workers: Optional[int] = None,
) -> List[Optional[AttachmentProposal]]:
    """Run ``proposer`` over ``entries`` on a thread pool; output follows input order."""

    entries = list(entries)
    workers = max_workers or get_limits().max_workers
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(proposer.propose, entries))

    logger.info(
        "Proposed attachments",
        extra={
            "entries": len(entries),
            "proposals": sum(result is not None for result in results),
            "workers": workers,
        },
    )
    return results


__all__ = [
    "AttachmentProposal",
    "AttachmentProposer",
    "NOUN_PATTERNS",
    "VERB_PATTERN",
    "propose_all",
]
