"""Word lists used when comparing glosses and choosing attachments."""
from __future__ import annotations

STOP_WORDS = frozenset(
    """
    a about above after again against all am an and any are aren't as at be
    because been before being below between both but by can't cannot could
    couldn't did didn't do does doesn't doing don't down during each few for
    from further had hadn't has hasn't have haven't having he he'd he'll he's
    her here here's hers herself him himself his how how's i i'd i'll i'm i've
    if in into is isn't it it's its itself let's me more most mustn't my myself
    no nor not of off on once only or other ought our ours ourselves out over
    own same shan't she she'd she'll she's should shouldn't so some such than
    that that's the their theirs them themselves then there there's these they
    they'd they'll they're they've this those through to too under until up
    very was wasn't we we'd we'll we're we've were weren't what what's when
    when's where where's which while who who's whom why why's with won't would
    wouldn't you you'd you'll you're you've your yours yourself yourselves
    """.split()
)

# Generic heads that make noisy hypernyms when nothing else supports them.
HYPERNYM_WORDS_TO_AVOID = frozenset(
    {
        "city",
        "person",
        "military",
        "physics",
        "plural",
        "town",
        "law",
        "mineral",
        "enzyme",
        "protein",
        "body",
        "act",
        "compound",
        "drug",
        "kind",
        "form",
        "state",
        "member",
        "type",
        "condition",
        "computer science",
        "term",
        "word",
    }
)

# Auxiliaries and modals carry no content when comparing glosses.
STOP_VERBS = frozenset(
    """
    is am are was were have has had will would shall should may might must
    be been being
    """.split()
)

__all__ = ["HYPERNYM_WORDS_TO_AVOID", "STOP_VERBS", "STOP_WORDS"]
