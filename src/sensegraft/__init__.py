"""Attach harvested dictionary senses to an existing sense inventory."""

from .attachment import AttachmentProposal, AttachmentProposer, propose_all
from .gloss import clean_gloss, extract_noun_candidates
from .resolution import GraphProximityChecker, LemmaResolver

__all__ = [
    "AttachmentProposal",
    "AttachmentProposer",
    "GraphProximityChecker",
    "LemmaResolver",
    "clean_gloss",
    "extract_noun_candidates",
    "propose_all",
]
