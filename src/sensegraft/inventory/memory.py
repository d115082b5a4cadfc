"""Dictionary-backed :class:`SenseInventory` for fixtures and small batches."""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from sensegraft.errors import InventoryError

from .base import IndexWord, PartOfSpeech, Pointer, Synset, lemma_key
from .morphology import detach_suffixes

logger = logging.getLogger(__name__)


class InMemoryInventory:
    """
    A mutable-at-build-time, read-only-at-use-time sense inventory.

    Synsets are indexed under each of their lemmas in insertion order, so the
    first synset added for a lemma is its first sense. Stemming uses the
    morphy suffix rules; irregular forms are registered with
    :meth:`add_exception`.

    Not thread-safe while being built. Wrap in :class:`LockedInventory` if
    builders and readers may overlap.
    """

    def __init__(self) -> None:
        self._synsets: dict[str, Synset] = {}
        self._index: dict[tuple[str, PartOfSpeech], list[str]] = {}
        self._pointers: dict[tuple[str, Pointer], set[str]] = {}
        self._exceptions: dict[tuple[str, PartOfSpeech], list[str]] = {}
        self._stem_rules: dict[PartOfSpeech, list[tuple[str, str]]] = {}

    # --- building -----------------------------------------------------------

    def add_synset(
        self,
        synset_id: str,
        pos: PartOfSpeech | str,
        lemmas: Iterable[str],
        gloss: str = "",
    ) -> Synset:
        pos = PartOfSpeech.parse(pos)
        if synset_id in self._synsets:
            raise ValueError(f"Duplicate synset id: {synset_id}")
        synset = Synset(id=synset_id, pos=pos, gloss=gloss, lemmas=tuple(lemmas))
        self._synsets[synset_id] = synset
        for lemma in synset.lemmas:
            ids = self._index.setdefault((lemma_key(lemma), pos), [])
            if synset_id not in ids:
                ids.append(synset_id)
        return synset

    def add_pointer(
        self,
        source: Synset | str,
        pointer: Pointer | str,
        target: Synset | str,
        *,
        symmetric: bool = True,
    ) -> None:
        """Add ``source -pointer-> target``; with ``symmetric`` also the inverse edge."""

        source_id = source.id if isinstance(source, Synset) else source
        target_id = target.id if isinstance(target, Synset) else target
        pointer = pointer if isinstance(pointer, Pointer) else Pointer[str(pointer).upper()]
        for synset_id in (source_id, target_id):
            if synset_id not in self._synsets:
                raise KeyError(f"Unknown synset id: {synset_id}")

        self._pointers.setdefault((source_id, pointer), set()).add(target_id)
        if symmetric:
            self._pointers.setdefault((target_id, pointer.inverse), set()).add(source_id)

    def add_exception(
        self, form: str, pos: PartOfSpeech | str, roots: Iterable[str]
    ) -> None:
        """Register ``form`` as an irregular inflection of ``roots``."""

        key = (lemma_key(form), PartOfSpeech.parse(pos))
        existing = self._exceptions.setdefault(key, [])
        for root in roots:
            if root not in existing:
                existing.append(root)

    def add_stem_rule(self, pos: PartOfSpeech | str, suffix: str, ending: str = "") -> None:
        """Detach ``suffix`` and append ``ending``, after the built-in rules."""

        if not suffix:
            raise ValueError("Stem rule needs a non-empty suffix")
        rules = self._stem_rules.setdefault(PartOfSpeech.parse(pos), [])
        if (suffix, ending) not in rules:
            rules.append((suffix, ending))

    # --- SenseInventory -----------------------------------------------------

    def lookup(self, lemma: str, pos: PartOfSpeech) -> IndexWord | None:
        ids = self._index.get((lemma_key(lemma), pos))
        if not ids:
            return None
        return IndexWord(lemma=lemma_key(lemma), pos=pos, synset_ids=tuple(ids))

    def stems(self, lemma: str, pos: PartOfSpeech) -> list[str]:
        return detach_suffixes(lemma, pos, self._stem_rules.get(pos, ()))

    def exception_roots(self, lemma: str, pos: PartOfSpeech) -> list[str] | None:
        roots = self._exceptions.get((lemma_key(lemma), pos))
        return list(roots) if roots else None

    def synset(self, synset_id: str) -> Synset:
        try:
            return self._synsets[synset_id]
        except KeyError:
            raise InventoryError(f"Unknown synset id: {synset_id}") from None

    def related(self, synset: Synset, pointer: Pointer) -> set[str]:
        return set(self._pointers.get((synset.id, pointer), ()))

    def all_synsets(self, pos: PartOfSpeech) -> Iterator[Synset]:
        for synset in list(self._synsets.values()):
            if synset.pos is pos:
                yield synset

    def __len__(self) -> int:
        return len(self._synsets)

    # --- fixtures -----------------------------------------------------------

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "InMemoryInventory":
        """
        Build an inventory from a plain mapping:

        ``{"synsets": [{"id", "pos", "lemmas", "gloss"}],
        "pointers": [{"source", "type", "target"}],
        "exceptions": [{"form", "pos", "roots"}],
        "stem_rules": [{"pos", "suffix", "ending"}]}``

        Pointers listed here are taken as given (no inverse is added), which
        matches how WordNet data files store both directions explicitly.
        """

        inventory = cls()
        for item in payload.get("synsets", []):
            inventory.add_synset(
                item["id"], item["pos"], item.get("lemmas", []), item.get("gloss", "")
            )
        for item in payload.get("pointers", []):
            inventory.add_pointer(
                item["source"], item["type"], item["target"], symmetric=False
            )
        for item in payload.get("exceptions", []):
            inventory.add_exception(item["form"], item["pos"], item.get("roots", []))
        for item in payload.get("stem_rules", []):
            inventory.add_stem_rule(item["pos"], item["suffix"], item.get("ending", ""))

        logger.info(
            "Built in-memory inventory",
            extra={
                "synsets": len(inventory._synsets),
                "pointers": sum(len(v) for v in inventory._pointers.values()),
            },
        )
        return inventory

    @classmethod
    def from_json(cls, json_path: str | Path) -> "InMemoryInventory":
        raw = json.loads(Path(json_path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Inventory JSON must be an object, got {type(raw).__name__}")
        return cls.from_dict(raw)


__all__ = ["InMemoryInventory"]
