"""Read-only contract for the sense inventory the resolver works against.

The inventory is an external, hierarchical store of synsets linked by typed
pointers (WordNet or something shaped like it). Everything in sensegraft
reaches it through :class:`SenseInventory`; nothing here mutates it.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class PartOfSpeech(str, Enum):
    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | PartOfSpeech") -> "PartOfSpeech":
        """Accept an enum member, its name in any case, or its one-letter tag."""

        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls[text.upper()]
        except KeyError:
            pass
        lowered = text.lower()
        if lowered == "s":  # WordNet adjective satellite
            return cls.ADJECTIVE
        for member in cls:
            if member.value == lowered:
                return member
        raise ValueError(f"Unknown part of speech: {value!r}")


class Pointer(str, Enum):
    """Typed synset-to-synset edges, valued by their WordNet pointer symbol."""

    HYPERNYM = "@"
    HYPERNYM_INSTANCE = "@i"
    HYPONYM = "~"
    HYPONYM_INSTANCE = "~i"
    SIMILAR_TO = "&"
    ALSO_SEE = "^"

    @property
    def inverse(self) -> "Pointer":
        return _INVERSE_POINTERS[self]


_INVERSE_POINTERS = {
    Pointer.HYPERNYM: Pointer.HYPONYM,
    Pointer.HYPONYM: Pointer.HYPERNYM,
    Pointer.HYPERNYM_INSTANCE: Pointer.HYPONYM_INSTANCE,
    Pointer.HYPONYM_INSTANCE: Pointer.HYPERNYM_INSTANCE,
    Pointer.SIMILAR_TO: Pointer.SIMILAR_TO,
    Pointer.ALSO_SEE: Pointer.ALSO_SEE,
}

TAXONOMIC_POINTERS: tuple[Pointer, ...] = (
    Pointer.HYPERNYM,
    Pointer.HYPERNYM_INSTANCE,
    Pointer.HYPONYM,
    Pointer.HYPONYM_INSTANCE,
)

SATELLITE_POINTERS: tuple[Pointer, ...] = (Pointer.SIMILAR_TO, Pointer.ALSO_SEE)

HYPERNYM_POINTERS: tuple[Pointer, ...] = (Pointer.HYPERNYM, Pointer.HYPERNYM_INSTANCE)


@dataclass(frozen=True, eq=False)
class Synset:
    """A single inventory node. Identity is its ``id``."""

    id: str
    pos: PartOfSpeech
    gloss: str = ""
    lemmas: tuple[str, ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Synset):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Synset({self.id!r})"


@dataclass(frozen=True)
class IndexWord:
    """Index entry for a lemma: the synsets it denotes, most frequent first."""

    lemma: str
    pos: PartOfSpeech
    synset_ids: tuple[str, ...]


def lemma_key(lemma: str) -> str:
    """Normalise a lemma the way WordNet indexes it (lowercase, ``_`` for spaces)."""

    return "_".join(lemma.strip().lower().split())


@runtime_checkable
class SenseInventory(Protocol):
    """The narrow read-only view of the inventory used by the resolver."""

    def lookup(self, lemma: str, pos: PartOfSpeech) -> IndexWord | None:
        """Exact lemma + part-of-speech index lookup."""
        ...

    def stems(self, lemma: str, pos: PartOfSpeech) -> list[str]:
        """Morphological base forms; empty on failure, never raises."""
        ...

    def exception_roots(self, lemma: str, pos: PartOfSpeech) -> list[str] | None:
        """Roots for an irregular surface form, or ``None`` if it is regular."""
        ...

    def synset(self, synset_id: str) -> Synset:
        ...

    def related(self, synset: Synset, pointer: Pointer) -> set[str]:
        """Ids of synsets reached from ``synset`` over ``pointer`` edges."""
        ...

    def all_synsets(self, pos: PartOfSpeech) -> Iterator[Synset]:
        ...


__all__ = [
    "HYPERNYM_POINTERS",
    "IndexWord",
    "PartOfSpeech",
    "Pointer",
    "SATELLITE_POINTERS",
    "SenseInventory",
    "Synset",
    "TAXONOMIC_POINTERS",
    "lemma_key",
]
