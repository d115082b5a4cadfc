"""Suffix-detachment stemming with the rule table of NLTK's morphy."""
from __future__ import annotations

from collections.abc import Iterable

from nltk.corpus.reader.wordnet import WordNetCorpusReader

from .base import PartOfSpeech

# Class attribute; reading it does not load the corpus.
SUFFIX_RULES: dict[PartOfSpeech, tuple[tuple[str, str], ...]] = {
    pos: tuple(WordNetCorpusReader.MORPHOLOGICAL_SUBSTITUTIONS.get(pos.tag, ()))
    for pos in PartOfSpeech
}


def detach_suffixes(
    word: str,
    pos: PartOfSpeech,
    extra_rules: Iterable[tuple[str, str]] = (),
) -> list[str]:
    """Return every base form the suffix rules produce for a single word.

    Candidates are not checked against any index. Multi-word input yields
    nothing; compounds are stemmed token by token by the resolver. ``extra_rules``
    are tried after the built-in rules for ``pos``.
    """

    word = word.strip().lower()
    if not word or any(ch.isspace() or ch == "_" for ch in word):
        return []

    stems: list[str] = []
    for suffix, ending in (*SUFFIX_RULES.get(pos, ()), *extra_rules):
        if word.endswith(suffix) and len(word) > len(suffix):
            stem = word[: -len(suffix)] + ending
            if stem and stem not in stems:
                stems.append(stem)
    return stems


__all__ = ["SUFFIX_RULES", "detach_suffixes"]
