import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from sensegraft.inventory.base import PartOfSpeech, Pointer  # noqa: E402
from sensegraft.inventory.memory import InMemoryInventory  # noqa: E402


def _chain(inventory: InMemoryInventory, ids: list[str]) -> None:
    """Link ids[0] -HYPERNYM-> ids[1] -HYPERNYM-> ... with inverse hyponym edges."""

    for child, parent in zip(ids, ids[1:]):
        inventory.add_pointer(child, Pointer.HYPERNYM, parent)


@pytest.fixture()
def animals() -> InMemoryInventory:
    """A small noun taxonomy plus two verbs and one irregular plural."""

    inventory = InMemoryInventory()
    n = PartOfSpeech.NOUN
    inventory.add_synset("n-entity", n, ["entity"], "that which exists")
    inventory.add_synset("n-organism", n, ["organism", "being"], "a living thing")
    inventory.add_synset("n-animal", n, ["animal", "beast"], "a living organism that moves")
    inventory.add_synset(
        "n-domestic-animal", n, ["domestic animal"], "any animal kept by humans"
    )
    inventory.add_synset("n-dog", n, ["dog", "domestic dog"], "a domesticated animal that barks")
    inventory.add_synset("n-hound", n, ["hound"], "a dog used for hunting by scent")
    inventory.add_synset("n-pet", n, ["pet"], "an animal kept for companionship")
    inventory.add_synset("n-mouse", n, ["mouse"], "a small rodent")
    inventory.add_synset("n-glass", n, ["glass"], "a brittle transparent solid")
    inventory.add_synset("n-glasses", n, ["glasses", "spectacles"], "lenses worn to aid vision")
    inventory.add_synset("n-bark", n, ["bark"], "the outer covering of a tree")

    _chain(inventory, ["n-hound", "n-dog", "n-domestic-animal", "n-animal", "n-organism", "n-entity"])
    inventory.add_pointer("n-pet", Pointer.HYPERNYM, "n-animal")
    inventory.add_pointer("n-mouse", Pointer.HYPERNYM, "n-animal")
    inventory.add_exception("mice", n, ["mouse"])

    v = PartOfSpeech.VERB
    inventory.add_synset("v-make-noise", v, ["make noise", "noise"], "emit a noise")
    inventory.add_synset("v-bark", v, ["bark"], "make a barking sound, as of dogs")
    inventory.add_synset("v-bark-2", v, ["bark", "yap"], "speak in an unfriendly tone")
    inventory.add_pointer("v-bark", Pointer.HYPERNYM, "v-make-noise")
    return inventory


@pytest.fixture()
def chain_inventory():
    """Build a straight hypernym chain ``x0 -> x1 -> ...``; lemma of ``xi`` is ``wi``."""

    def build(length: int) -> InMemoryInventory:
        inventory = InMemoryInventory()
        ids = [f"x{i}" for i in range(length)]
        for i, synset_id in enumerate(ids):
            inventory.add_synset(synset_id, PartOfSpeech.NOUN, [f"w{i}"])
        _chain(inventory, ids)
        return inventory

    return build
