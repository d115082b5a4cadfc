"""Normalisation of raw dictionary glosses into plain text.

Raw glosses carry two kinds of wiki markup:

* templates, ``{{name|arg1|arg2|...}}``
* links, ``[[target|display]]``

Known templates are replaced by the argument that carries their text;
anything else collapses to a single space. Links optionally collapse to their
display text. Cleaning is idempotent.
"""
from __future__ import annotations

import re
from collections.abc import Callable

TEMPLATE_RE = re.compile(r"\{\{([^}]+)\}\}")
LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
TYPOGRAPHIC_QUOTES_RE = re.compile("[“”]")
SOED_FOOTNOTE = "<ref name=SOED/>"

TemplateHandler = Callable[[list[str]], str]


def _join_arguments(parts: list[str]) -> str:
    # {{soplink|deep|water}} links the words as one term when it exists.
    return " ".join(parts[1:])


def _second_argument(parts: list[str]) -> str:
    return parts[1] if len(parts) > 1 else parts[0]


def _rank_argument(parts: list[str]) -> str:
    # {{taxlink|Larrea tridentata|species}} reads as its rank.
    return parts[min(len(parts) - 1, 2)]


def _unknown_template(parts: list[str]) -> str:
    return " "


TEMPLATE_HANDLERS: dict[str, TemplateHandler] = {
    "soplink": _join_arguments,
    "taxlink": _rank_argument,
    "term": _second_argument,
    "w": _second_argument,
    "unsupported": _second_argument,
    "gloss": _second_argument,
    "non-gloss definition": _second_argument,
}


def _template_name(parts: list[str]) -> str:
    return parts[0].strip().lower()


def _replace_template(match: re.Match[str]) -> str:
    parts = match.group(1).split("|")
    handler = TEMPLATE_HANDLERS.get(_template_name(parts), _unknown_template)
    return handler(parts)


def _replace_link(match: re.Match[str]) -> str:
    return match.group(1).split("|")[-1]


def clean_gloss(raw_gloss: str, remove_links: bool = True) -> str:
    """Return ``raw_gloss`` with templates resolved and, optionally, links flattened.

    Replacements go through callables, so ``$`` and ``\\`` in the substituted
    text are copied literally rather than read as group references.
    """

    gloss = _clean_once(raw_gloss, remove_links)
    # Nested or malformed markup can surface new templates once the outer
    # layer is replaced; every pass that changes the text shortens it.
    while True:
        again = _clean_once(gloss, remove_links)
        if again == gloss:
            return gloss
        gloss = again


def _clean_once(gloss: str, remove_links: bool) -> str:
    gloss = TEMPLATE_RE.sub(_replace_template, gloss)
    gloss = TYPOGRAPHIC_QUOTES_RE.sub('"', gloss)
    gloss = gloss.replace(SOED_FOOTNOTE, "").strip()

    if not remove_links:
        return gloss

    return LINK_RE.sub(_replace_link, gloss).strip()


def strip_annotations(gloss: str) -> str:
    """Remove every ``{{...}}`` template outright."""

    return TEMPLATE_RE.sub("", gloss).strip()


__all__ = [
    "LINK_RE",
    "TEMPLATE_HANDLERS",
    "TEMPLATE_RE",
    "clean_gloss",
    "strip_annotations",
]
