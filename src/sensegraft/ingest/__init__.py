"""Ingestion of harvested sense records."""

from .loader import LoadStats, build_entry, entries_from_records, load_entries
from .records import (
    EntryAnnotations,
    LexicalEntry,
    RawRelation,
    RawSenseRecord,
    Relation,
    RelationType,
)

__all__ = [
    "EntryAnnotations",
    "LexicalEntry",
    "LoadStats",
    "RawRelation",
    "RawSenseRecord",
    "Relation",
    "RelationType",
    "build_entry",
    "entries_from_records",
    "load_entries",
]
