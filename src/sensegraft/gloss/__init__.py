"""Text-side processing of harvested glosses."""

from .annotations import (
    annotation_values,
    extract_annotations,
    extract_contiguous_linked_terms,
    is_slang_gloss,
)
from .candidates import extract_noun_candidates
from .cleaner import clean_gloss, strip_annotations
from .stopwords import HYPERNYM_WORDS_TO_AVOID, STOP_VERBS, STOP_WORDS

__all__ = [
    "HYPERNYM_WORDS_TO_AVOID",
    "STOP_VERBS",
    "STOP_WORDS",
    "annotation_values",
    "clean_gloss",
    "extract_annotations",
    "extract_contiguous_linked_terms",
    "extract_noun_candidates",
    "is_slang_gloss",
    "strip_annotations",
]
