from __future__ import annotations

from collections.abc import Iterator
from threading import Lock

from .base import IndexWord, PartOfSpeech, Pointer, SenseInventory, Synset


class LockedInventory:
    """
    Serialises every call into an inventory that is not safe for concurrent use.

    One coarse lock guards the whole contract; lookups are in-memory so the
    contention cost is small next to the work done between calls.
    ``all_synsets`` is materialised under the lock and iterated outside it.
    """

    def __init__(self, inventory: SenseInventory):
        self._inventory = inventory
        self._lock = Lock()

    @property
    def wrapped(self) -> SenseInventory:
        return self._inventory

    def lookup(self, lemma: str, pos: PartOfSpeech) -> IndexWord | None:
        with self._lock:
            return self._inventory.lookup(lemma, pos)

    def stems(self, lemma: str, pos: PartOfSpeech) -> list[str]:
        with self._lock:
            return self._inventory.stems(lemma, pos)

    def exception_roots(self, lemma: str, pos: PartOfSpeech) -> list[str] | None:
        with self._lock:
            return self._inventory.exception_roots(lemma, pos)

    def synset(self, synset_id: str) -> Synset:
        with self._lock:
            return self._inventory.synset(synset_id)

    def related(self, synset: Synset, pointer: Pointer) -> set[str]:
        with self._lock:
            return self._inventory.related(synset, pointer)

    def all_synsets(self, pos: PartOfSpeech) -> Iterator[Synset]:
        with self._lock:
            synsets = list(self._inventory.all_synsets(pos))
        return iter(synsets)


__all__ = ["LockedInventory"]
