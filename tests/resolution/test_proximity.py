import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from sensegraft.errors import InventoryError  # noqa: E402
from sensegraft.inventory.base import PartOfSpeech, Pointer  # noqa: E402
from sensegraft.inventory.memory import InMemoryInventory  # noqa: E402
from sensegraft.resolution.proximity import GraphProximityChecker  # noqa: E402

NOUN = PartOfSpeech.NOUN


class BrokenRelations:
    def __init__(self, inventory):
        self._inventory = inventory

    def related(self, synset, pointer):
        raise InventoryError("relations unavailable")

    def __getattr__(self, name):
        return getattr(self._inventory, name)


def _cycle() -> InMemoryInventory:
    inventory = InMemoryInventory()
    for synset_id in ("a", "b", "c"):
        inventory.add_synset(synset_id, NOUN, [f"lemma-{synset_id}"])
    inventory.add_pointer("a", Pointer.HYPERNYM, "b")
    inventory.add_pointer("b", Pointer.HYPERNYM, "a")
    return inventory


def test_two_hops_away_is_already_present(chain_inventory):
    inventory = chain_inventory(3)
    checker = GraphProximityChecker(inventory)
    assert checker.already_present("w2", NOUN, {inventory.synset("x0")})


def test_four_hops_away_is_not(chain_inventory):
    inventory = chain_inventory(5)
    checker = GraphProximityChecker(inventory)
    start = {inventory.synset("x0")}
    assert not checker.already_present("w4", NOUN, start)
    assert not checker.already_present("w3", NOUN, start)
    assert checker.already_present("w2", NOUN, start)


def test_candidate_that_is_a_sense_of_the_lemma(animals):
    checker = GraphProximityChecker(animals)
    assert checker.already_present("dogs", NOUN, {animals.synset("n-dog")})


def test_unresolvable_lemma_is_never_present(animals):
    checker = GraphProximityChecker(animals)
    assert not checker.already_present("unicorn", NOUN, {animals.synset("n-dog")})


def test_cycles_terminate():
    inventory = _cycle()
    checker = GraphProximityChecker(inventory)
    a = inventory.synset("a")
    assert checker.is_descendant(a, "b")
    assert checker.is_descendant(a, "a")
    assert not checker.is_descendant(a, "c")
    assert not checker.already_present("lemma-c", NOUN, {a})
    assert checker.already_present("lemma-b", NOUN, {a})


def test_is_descendant_follows_hypernyms_only(animals):
    checker = GraphProximityChecker(animals)
    assert checker.is_descendant(animals.synset("n-hound"), "n-entity")
    assert not checker.is_descendant(animals.synset("n-entity"), "n-hound")
    assert not checker.is_descendant(animals.synset("n-hound"), "n-pet")


def test_satellite_pointers_only_for_adjectives_and_adverbs():
    inventory = InMemoryInventory()
    hot = inventory.add_synset("hot", "a", ["hot"])
    inventory.add_synset("warm", "a", ["warm"])
    inventory.add_pointer("hot", Pointer.SIMILAR_TO, "warm")
    checker = GraphProximityChecker(inventory)

    assert {s.id for s in checker.neighbours(hot, PartOfSpeech.ADJECTIVE)} == {"warm"}
    assert checker.neighbours(hot, NOUN) == set()
    assert checker.already_present("warm", PartOfSpeech.ADJECTIVE, {hot})


def test_relation_failures_mean_no_neighbours(animals):
    checker = GraphProximityChecker(BrokenRelations(animals))
    dog = animals.synset("n-dog")
    assert checker.neighbours(dog, NOUN) == set()
    assert not checker.already_present("hound", NOUN, {dog})
    assert not checker.is_descendant(dog, "n-animal")
