"""Harvested-sense records: the raw upstream schema and the immutable entries built from it."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sensegraft.inventory.base import PartOfSpeech


class RelationType(str, Enum):
    SYNONYM = "SYNONYM"
    ANTONYM = "ANTONYM"
    HYPERNYM = "HYPERNYM"
    HYPONYM = "HYPONYM"
    HOLONYM = "HOLONYM"
    MERONYM = "MERONYM"
    COORDINATE_TERM = "COORDINATE_TERM"
    TROPONYM = "TROPONYM"
    SEE_ALSO = "SEE_ALSO"
    DERIVED_TERM = "DERIVED_TERM"
    ETYMOLOGICALLY_RELATED_TERM = "ETYMOLOGICALLY_RELATED_TERM"
    DESCENDANT = "DESCENDANT"
    # A word that habitually co-occurs with the lemma ("strong" for "tea").
    CHARACTERISTIC_WORD_COMBINATION = "CHARACTERISTIC_WORD_COMBINATION"


@dataclass(frozen=True)
class Relation:
    """A typed edge to another lemma (and optionally one of its senses),
    not yet resolved against the inventory."""

    target_lemma: str
    type: RelationType
    target_sense: Optional[str] = None

    def __str__(self) -> str:
        return f"Relation[{self.target_lemma} ({self.target_sense}): {self.type.value}]"


@dataclass(frozen=True, eq=False)
class EntryAnnotations:
    gloss: str = ""
    glosses: tuple[str, ...] = ()
    raw_gloss_to_cleaned: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    relations: tuple[Relation, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.raw_gloss_to_cleaned, MappingProxyType):
            frozen = MappingProxyType(dict(self.raw_gloss_to_cleaned))
            object.__setattr__(self, "raw_gloss_to_cleaned", frozen)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryAnnotations):
            return NotImplemented
        return (
            self.gloss == other.gloss
            and self.glosses == other.glosses
            and list(self.raw_gloss_to_cleaned.items())
            == list(other.raw_gloss_to_cleaned.items())
            and self.relations == other.relations
        )


@dataclass(frozen=True, eq=False)
class LexicalEntry:
    """One harvested sense. Equal on content, hashed on ``id`` alone."""

    lemma: str
    id: str
    pos: PartOfSpeech
    annotations: EntryAnnotations = field(default_factory=EntryAnnotations)

    @property
    def dedup_key(self) -> tuple[str, PartOfSpeech, str]:
        return (self.lemma, self.pos, self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexicalEntry):
            return NotImplemented
        return (
            self.pos == other.pos
            and self.lemma == other.lemma
            and self.id == other.id
            and self.annotations == other.annotations
        )

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.lemma} ({self.pos.name}): {self.annotations.gloss}"


class RawRelation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    target_lemma: str = Field(alias="targetLemma")
    target_sense: Optional[str] = Field(default=None, alias="targetSense")
    type: RelationType

    @field_validator("type", mode="before")
    def normalize_type(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("target_sense", mode="before")
    def empty_sense_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class RawSenseRecord(BaseModel):
    """One sense as written by the upstream dictionary extractor."""

    model_config = ConfigDict(extra="ignore")

    sense: Optional[str] = None
    id: str
    lemma: str
    pos: PartOfSpeech
    glosses: list[str]
    examples: list[str] = Field(default_factory=list)
    relations: list[RawRelation]

    @field_validator("pos", mode="before")
    def parse_pos(cls, v: object) -> object:
        if isinstance(v, (str, PartOfSpeech)):
            return PartOfSpeech.parse(v)
        return v

    @field_validator("lemma", "id", mode="after")
    def require_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


__all__ = [
    "EntryAnnotations",
    "LexicalEntry",
    "RawRelation",
    "RawSenseRecord",
    "Relation",
    "RelationType",
]
