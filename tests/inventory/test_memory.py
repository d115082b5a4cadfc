import json
import sys
from pathlib import Path

import pytest
from nltk.corpus.reader.wordnet import WordNetCorpusReader

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from sensegraft.errors import InventoryError  # noqa: E402
from sensegraft.inventory.base import PartOfSpeech, Pointer, SenseInventory  # noqa: E402
from sensegraft.inventory.memory import InMemoryInventory  # noqa: E402
from sensegraft.inventory.morphology import SUFFIX_RULES, detach_suffixes  # noqa: E402
from sensegraft.resolution.resolver import LemmaResolver  # noqa: E402

NOUN = PartOfSpeech.NOUN
VERB = PartOfSpeech.VERB


def test_satisfies_inventory_protocol(animals):
    assert isinstance(animals, SenseInventory)


def test_lookup_normalises_case_and_spaces(animals):
    index_word = animals.lookup("Domestic  Animal", NOUN)
    assert index_word is not None
    assert index_word.lemma == "domestic_animal"
    assert index_word.synset_ids == ("n-domestic-animal",)


def test_senses_keep_insertion_order_per_part_of_speech(animals):
    assert animals.lookup("bark", VERB).synset_ids == ("v-bark", "v-bark-2")
    assert animals.lookup("bark", NOUN).synset_ids == ("n-bark",)
    assert animals.lookup("bark", PartOfSpeech.ADJECTIVE) is None


def test_duplicate_synset_id_is_rejected(animals):
    with pytest.raises(ValueError):
        animals.add_synset("n-dog", NOUN, ["cur"])


def test_pointer_adds_inverse_edge(animals):
    animal = animals.synset("n-animal")
    assert animals.related(animal, Pointer.HYPONYM) == {"n-domestic-animal", "n-pet", "n-mouse"}
    assert animals.related(animal, Pointer.HYPERNYM) == {"n-organism"}


def test_pointer_by_name_and_unknown_ids():
    inventory = InMemoryInventory()
    inventory.add_synset("a", "adjective", ["hot"])
    inventory.add_synset("b", "a", ["warm"])
    inventory.add_pointer("a", "similar_to", "b")
    assert inventory.related(inventory.synset("b"), Pointer.SIMILAR_TO) == {"a"}

    with pytest.raises(KeyError):
        inventory.add_pointer("a", Pointer.HYPERNYM, "missing")


def test_related_returns_a_copy(animals):
    dog = animals.synset("n-dog")
    animals.related(dog, Pointer.HYPERNYM).add("n-entity")
    assert animals.related(dog, Pointer.HYPERNYM) == {"n-domestic-animal"}


def test_unknown_synset_raises_inventory_error(animals):
    with pytest.raises(InventoryError):
        animals.synset("n-unicorn")


def test_exception_roots(animals):
    assert animals.exception_roots("Mice", NOUN) == ["mouse"]
    assert animals.exception_roots("mice", VERB) is None
    assert animals.exception_roots("dogs", NOUN) is None


def test_stems_follow_suffix_rules(animals):
    assert animals.stems("boxes", NOUN) == ["boxe", "box"]
    assert animals.stems("women", NOUN) == ["woman"]
    assert animals.stems("domestic animals", NOUN) == []


def test_stems_cover_ves_plurals():
    inventory = InMemoryInventory()
    inventory.add_synset("n-wolf", NOUN, ["wolf"], "a wild canid")
    assert inventory.stems("wolves", NOUN) == ["wolve", "wolf"]
    assert LemmaResolver(inventory).resolve("wolves", NOUN).id == "n-wolf"


def test_suffix_rules_match_nltk_morphy():
    for pos in PartOfSpeech:
        expected = WordNetCorpusReader.MORPHOLOGICAL_SUBSTITUTIONS.get(pos.tag, [])
        assert list(SUFFIX_RULES[pos]) == list(expected)


def test_custom_stem_rules_run_after_builtins():
    inventory = InMemoryInventory()
    inventory.add_stem_rule(NOUN, "ae", "a")
    assert inventory.stems("larvae", NOUN) == ["larva"]
    assert inventory.stems("larvae", VERB) == []
    with pytest.raises(ValueError):
        inventory.add_stem_rule(NOUN, "")


def test_detach_suffixes_needs_a_remaining_stem():
    assert detach_suffixes("s", NOUN) == []
    assert detach_suffixes("running", VERB) == ["runne", "runn"]
    assert detach_suffixes("quickly", PartOfSpeech.ADVERB) == []


def test_all_synsets_filters_by_pos(animals):
    verbs = {synset.id for synset in animals.all_synsets(VERB)}
    assert verbs == {"v-make-noise", "v-bark", "v-bark-2"}


def test_from_json_takes_pointers_as_given(tmp_path):
    payload = {
        "synsets": [
            {"id": "n1", "pos": "n", "lemmas": ["cat"], "gloss": "a feline"},
            {"id": "n2", "pos": "NOUN", "lemmas": ["feline"]},
        ],
        "pointers": [{"source": "n1", "type": "HYPERNYM", "target": "n2"}],
        "exceptions": [{"form": "kine", "pos": "n", "roots": ["cow"]}],
        "stem_rules": [{"pos": "n", "suffix": "i", "ending": "us"}],
    }
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    inventory = InMemoryInventory.from_json(path)

    assert len(inventory) == 2
    assert inventory.related(inventory.synset("n1"), Pointer.HYPERNYM) == {"n2"}
    assert inventory.related(inventory.synset("n2"), Pointer.HYPONYM) == set()
    assert inventory.exception_roots("kine", NOUN) == ["cow"]
    assert "cactus" in inventory.stems("cacti", NOUN)


def test_from_json_rejects_non_objects(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        InMemoryInventory.from_json(path)
