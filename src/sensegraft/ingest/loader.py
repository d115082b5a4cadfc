import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from sensegraft.errors import MalformedRecordError
from sensegraft.gloss.cleaner import clean_gloss
from sensegraft.ingest.records import (
    EntryAnnotations,
    LexicalEntry,
    RawSenseRecord,
    Relation,
)

# Module-level logger
logger = logging.getLogger(__name__)


@dataclass
class LoadStats:
    records: int = 0
    entries: int = 0
    duplicates: int = 0


def build_entry(record: RawSenseRecord) -> LexicalEntry:
    """
    Turn one validated record into a LexicalEntry.
    - Each raw gloss is cleaned; cleaned glosses are de-duplicated in order.
    - The combined gloss is the cleaned glosses joined by a space.
    - Relations keep their upstream order.
    """
    raw_to_cleaned: dict[str, str] = {}
    glosses: dict[str, None] = {}
    for raw_gloss in record.glosses:
        cleaned = clean_gloss(raw_gloss)
        glosses.setdefault(cleaned, None)
        raw_to_cleaned[raw_gloss] = cleaned

    relations = tuple(
        Relation(
            target_lemma=rel.target_lemma,
            target_sense=rel.target_sense,
            type=rel.type,
        )
        for rel in record.relations
    )

    annotations = EntryAnnotations(
        gloss=" ".join(glosses),
        glosses=tuple(glosses),
        raw_gloss_to_cleaned=raw_to_cleaned,
        relations=relations,
    )
    return LexicalEntry(
        lemma=record.lemma, id=record.id, pos=record.pos, annotations=annotations
    )


def _validate(raw: Union[Mapping[str, Any], RawSenseRecord], line_number: Optional[int]) -> RawSenseRecord:
    if isinstance(raw, RawSenseRecord):
        return raw
    if not isinstance(raw, Mapping):
        raise MalformedRecordError(
            f"expected a JSON object, got {type(raw).__name__}", line_number=line_number
        )
    try:
        return RawSenseRecord.model_validate(dict(raw))
    except ValidationError as e:
        raise MalformedRecordError(str(e), line_number=line_number) from e


def entries_from_records(
    records: Iterable[Union[Mapping[str, Any], RawSenseRecord]],
    stats: Optional[LoadStats] = None,
) -> List[LexicalEntry]:
    """
    Build entries from raw records, dropping duplicates of (lemma, pos, id).
    The first occurrence wins. Any malformed record aborts the whole batch
    with MalformedRecordError.
    """
    return _build_entries(enumerate(records, start=1), stats)


def _build_entries(
    numbered: Iterable[tuple[int, Any]], stats: Optional[LoadStats]
) -> List[LexicalEntry]:
    stats = stats if stats is not None else LoadStats()
    seen: set[tuple] = set()
    entries: List[LexicalEntry] = []

    for line_number, raw in numbered:
        stats.records += 1
        record = _validate(raw, line_number=line_number)
        key = (record.lemma, record.pos, record.id)
        if key in seen:
            stats.duplicates += 1
            continue
        seen.add(key)
        entries.append(build_entry(record))

    stats.entries = len(entries)
    logger.info(
        "Built lexical entries",
        extra={"records": stats.records, "entries": stats.entries, "duplicates": stats.duplicates},
    )
    return entries


def _read_json_lines(path: Path) -> List[tuple[int, Any]]:
    rows: List[tuple[int, Any]] = []
    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                rows.append((line_number, json.loads(line)))
            except json.JSONDecodeError as e:
                raise MalformedRecordError(f"invalid JSON ({e.msg})", line_number=line_number) from e
    return rows


def load_entries(json_path: Union[str, Path], stats: Optional[LoadStats] = None) -> List[LexicalEntry]:
    """
    Load a JSON-lines file of sense records into LexicalEntry objects.
    Blank lines are skipped; anything else that is not a valid record is fatal.
    """
    path = Path(json_path)
    rows = _read_json_lines(path)
    logger.info(f"Loading {len(rows)} sense records from {path}")
    return _build_entries(rows, stats)
