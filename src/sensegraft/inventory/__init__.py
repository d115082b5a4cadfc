"""Sense-inventory contract and the adapters that implement it."""

from .base import (
    HYPERNYM_POINTERS,
    IndexWord,
    PartOfSpeech,
    Pointer,
    SATELLITE_POINTERS,
    SenseInventory,
    Synset,
    TAXONOMIC_POINTERS,
    lemma_key,
)
from .locked import LockedInventory
from .memory import InMemoryInventory
from .morphology import detach_suffixes

__all__ = [
    "HYPERNYM_POINTERS",
    "InMemoryInventory",
    "IndexWord",
    "LockedInventory",
    "PartOfSpeech",
    "Pointer",
    "SATELLITE_POINTERS",
    "SenseInventory",
    "Synset",
    "TAXONOMIC_POINTERS",
    "detach_suffixes",
    "lemma_key",
]
