"""Structured tags and link runs recovered from raw glosses."""
from __future__ import annotations

import re

from .cleaner import LINK_RE, TEMPLATE_RE

TRAILING_PUNCT_RE = re.compile(r"[^\w\s]+$")

SLANG_LABELS = frozenset(
    {
        "informal",
        "euphemistic",
        "slang",
        "internet slang",
        "vulgar",
        "offensive",
        "pejorative",
        "ethnic slur",
    }
)

# Column holding the main value for tags that do not use the first argument.
TAG_VALUE_COLUMNS: dict[str, int] = {
    "surname": 0,
    "form of": 2,
}
DEFAULT_VALUE_COLUMN = 1


def extract_annotations(gloss: str) -> list[str]:
    """Return the inner text of each template that leads the gloss, in order.

    ``{{form of|...}} {{surname|en}} A name`` yields
    ``["form of|...", "surname|en"]``. Stops at the first non-template text
    or at an unterminated ``{{``.
    """

    annotations: list[str] = []
    gloss = gloss.strip()
    while gloss.startswith("{{"):
        end = gloss.find("}}")
        if end < 0:
            break
        annotations.append(gloss[2:end])
        gloss = gloss[end + 2 :].strip()
    return annotations


def _looks_like_markup(value: str) -> bool:
    return "=" in value or "{" in value


def annotation_values(annotations: list[str]) -> dict[str, str]:
    """Map each tag's type to its main value.

    Values that look like ``key=value`` pairs or nested markup are skipped in
    favour of the next column. Tags with no arguments are dropped.
    """

    type_to_value: dict[str, str] = {}
    for annotation in annotations:
        cols = annotation.split("|")
        tag_type = cols[0].strip()
        if len(cols) < 2:
            continue

        col = TAG_VALUE_COLUMNS.get(tag_type, DEFAULT_VALUE_COLUMN)
        if col >= len(cols):
            continue
        value = cols[col]
        while _looks_like_markup(value) and col < len(cols) - 1:
            col += 1
            value = cols[col]
        type_to_value[tag_type] = value
    return type_to_value


def is_slang_gloss(raw_gloss: str) -> bool:
    """True if a ``{{context|...}}`` template carries a slang or register label."""

    for match in TEMPLATE_RE.finditer(raw_gloss):
        annotation = match.group(1)
        if not annotation.startswith("context"):
            continue
        if any(token.strip() in SLANG_LABELS for token in annotation.split("|")):
            return True
    return False


def extract_contiguous_linked_terms(text: str, start: int = 0) -> list[str]:
    """Return the first link at or after ``start`` and any links that follow it
    separated only by whitespace, e.g. ``[[integrated]] [[circuit]]``.
    """

    match = LINK_RE.search(text, start)
    if match is None:
        return []

    terms = [TRAILING_PUNCT_RE.sub("", match.group(1))]
    end = match.end()
    for match in LINK_RE.finditer(text, end):
        if text[end : match.start()].strip():
            break
        terms.append(TRAILING_PUNCT_RE.sub("", match.group(1)))
        end = match.end()
    return terms


__all__ = [
    "SLANG_LABELS",
    "TAG_VALUE_COLUMNS",
    "annotation_values",
    "extract_annotations",
    "extract_contiguous_linked_terms",
    "is_slang_gloss",
]
