from __future__ import annotations

import logging
import re

from sensegraft.inventory.base import PartOfSpeech, SenseInventory
from sensegraft.resolution.resolver import LemmaResolver

from .annotations import TRAILING_PUNCT_RE

logger = logging.getLogger(__name__)

CLAUSE_ENDING = frozenset(".,;:")
MAX_WINDOW = 3


def _term_window(gloss: str, location: int, term: str) -> list[str]:
    """Collect ``term`` plus up to two following tokens, cut at clause punctuation."""

    end = location + len(term)
    tokens = [term] + gloss[end:].split()[: MAX_WINDOW - 1]

    window: list[str] = []
    for token in tokens:
        match = TRAILING_PUNCT_RE.search(token)
        if match is None:
            window.append(token)
            continue
        stripped = token[: match.start()]
        if not stripped:
            break
        window.append(stripped)
        if CLAUSE_ENDING.intersection(match.group(0)):
            break
    return window


def _locate(gloss: str, term: str) -> int:
    # Prefer a word start, so "cat" is not found inside "domesticated".
    match = re.search(rf"(?<!\w){re.escape(term)}", gloss)
    return match.start() if match else gloss.find(term)


def extract_noun_candidates(
    inventory: SenseInventory | LemmaResolver,
    cleaned_gloss: str,
    first_linked_term: str,
) -> list[str]:
    """
    Return hypernym candidates for a noun gloss, most likely first.

    ``first_linked_term`` is the first wiki-linked term of the raw gloss; it is
    located in the cleaned gloss and grown into a window of at most three
    tokens that does not cross clause-ending punctuation. Multi-word
    candidates come before single words, and later tokens attested as nouns
    (the head of the phrase) come before the linked term itself.

    A link whose text is followed by glued characters, as in ``[[dog]]s``,
    is widened to the whole whitespace-delimited word.
    """

    resolver = inventory if isinstance(inventory, LemmaResolver) else LemmaResolver(inventory)

    location = _locate(cleaned_gloss, first_linked_term)
    if location < 0:
        logger.warning(
            "Linked term not found in cleaned gloss",
            extra={"term": first_linked_term, "gloss": cleaned_gloss},
        )
        return [first_linked_term]

    term = first_linked_term
    end = location + len(term)
    if end < len(cleaned_gloss) and not cleaned_gloss[end].isspace():
        while end < len(cleaned_gloss) and not cleaned_gloss[end].isspace():
            end += 1
        term = cleaned_gloss[location:end]

    terms = _term_window(cleaned_gloss, location, term)
    if not terms:
        return [first_linked_term]

    candidates: list[str] = []
    if len(terms) == 3:
        candidates.append(" ".join(terms))
        candidates.append(f"{terms[0]} {terms[1]}")
        candidates.append(f"{terms[1]} {terms[2]}")
    elif len(terms) == 2:
        candidates.append(f"{terms[0]} {terms[1]}")

    def is_noun(index: int) -> bool:
        return len(terms) > index and resolver.is_attested(terms[index], PartOfSpeech.NOUN)

    trailing_nouns: list[str] = []
    if is_noun(1):
        if is_noun(2):
            trailing_nouns.append(terms[2])
        trailing_nouns.append(terms[1])

    head = terms[0]
    words = head.split()
    if len(words) > 1:
        candidates.append(head)
        candidates.append(words[-1])
        candidates.append(words[0])
        candidates.extend(trailing_nouns)
    else:
        candidates.extend(trailing_nouns)
        candidates.append(head)

    return list(dict.fromkeys(candidates))


__all__ = ["extract_noun_candidates"]
