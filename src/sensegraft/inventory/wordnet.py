"""NLTK WordNet corpus reader adapted to :class:`SenseInventory`."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from nltk.corpus import wordnet as nltk_wordnet
from nltk.corpus.reader.wordnet import WordNetError

from sensegraft.errors import InventoryError

from .base import IndexWord, PartOfSpeech, Pointer, Synset, lemma_key

logger = logging.getLogger(__name__)

_POINTER_METHODS = {
    Pointer.HYPERNYM: "hypernyms",
    Pointer.HYPERNYM_INSTANCE: "instance_hypernyms",
    Pointer.HYPONYM: "hyponyms",
    Pointer.HYPONYM_INSTANCE: "instance_hyponyms",
    Pointer.SIMILAR_TO: "similar_tos",
    Pointer.ALSO_SEE: "also_sees",
}


class WordNetInventory:
    """
    Exposes an NLTK ``WordNetCorpusReader`` through the inventory contract.

    Synset ids are NLTK synset names (``dog.n.01``). ``lookup`` is exact: the
    reader's own morphy fallback is filtered out so that stemming stays under
    the resolver's control. Not thread-safe; wrap in :class:`LockedInventory`
    when shared across worker threads.
    """

    def __init__(self, reader: Any = None):
        # The corpus is loaded lazily by NLTK on first attribute access.
        self._reader = reader if reader is not None else nltk_wordnet

    def _to_synset(self, nltk_synset: Any) -> Synset:
        return Synset(
            id=nltk_synset.name(),
            pos=PartOfSpeech.parse(nltk_synset.pos()),
            gloss=nltk_synset.definition(),
            lemmas=tuple(nltk_synset.lemma_names()),
        )

    def lookup(self, lemma: str, pos: PartOfSpeech) -> IndexWord | None:
        key = lemma_key(lemma)
        if not key:
            return None
        matches = [
            s.name()
            for s in self._reader.synsets(key, pos=pos.tag)
            if key in {name.lower() for name in s.lemma_names()}
        ]
        if not matches:
            return None
        return IndexWord(lemma=key, pos=pos, synset_ids=tuple(matches))

    def stems(self, lemma: str, pos: PartOfSpeech) -> list[str]:
        # Index-filtered morphy; exceptions are served by exception_roots.
        key = lemma_key(lemma)
        if not key:
            return []
        forms = self._reader._morphy(key, pos.tag, check_exceptions=False)
        return [form for form in dict.fromkeys(forms) if form != key]

    def exception_roots(self, lemma: str, pos: PartOfSpeech) -> list[str] | None:
        # NLTK keeps the *.exc files in a private map keyed by pos tag.
        exception_map = getattr(self._reader, "_exception_map", None) or {}
        roots = exception_map.get(pos.tag, {}).get(lemma_key(lemma))
        return list(roots) if roots else None

    def synset(self, synset_id: str) -> Synset:
        try:
            return self._to_synset(self._reader.synset(synset_id))
        except (WordNetError, ValueError) as exc:
            raise InventoryError(f"Unknown synset id: {synset_id}") from exc

    def related(self, synset: Synset, pointer: Pointer) -> set[str]:
        try:
            nltk_synset = self._reader.synset(synset.id)
        except (WordNetError, ValueError) as exc:
            raise InventoryError(f"Unknown synset id: {synset.id}") from exc
        neighbours = getattr(nltk_synset, _POINTER_METHODS[pointer])()
        return {s.name() for s in neighbours}

    def all_synsets(self, pos: PartOfSpeech) -> Iterator[Synset]:
        for nltk_synset in self._reader.all_synsets(pos.tag):
            yield self._to_synset(nltk_synset)


__all__ = ["WordNetInventory"]
