import sys
import threading
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from sensegraft.resolution.resolver import LemmaResolver  # noqa: E402
from sensegraft.similarity.cache import GlossAnnotationCache, gloss_words  # noqa: E402
from sensegraft.similarity.embeddings import VectorTable  # noqa: E402
from sensegraft.similarity.scoring import InverseFrequencyScorer, VectorCosineScorer  # noqa: E402

WORD_VECTORS = {
    "dog": [1.0, 0.0, 0.0],
    "hound": [0.0, 2.0, 0.0],
    "tree": [0.0, 0.0, 3.0],
}


class CountingVectors:
    def __init__(self, vectors):
        self._vectors = {word: np.asarray(v) for word, v in vectors.items()}
        self.calls = 0
        self._lock = threading.Lock()

    def __contains__(self, word):
        return word in self._vectors

    def get_vector(self, word):
        with self._lock:
            self.calls += 1
        return self._vectors[word]


def test_gloss_words_strip_edge_punctuation():
    assert gloss_words('"A dog," (mostly) -- barks.') == ["A", "dog", "mostly", "barks"]


def test_lemmas_drop_stop_words_and_lowercase():
    cache = GlossAnnotationCache()
    assert cache.lemmas_of("The Dogs that will bark at a Tree") == frozenset(
        {"dogs", "bark", "tree"}
    )


def test_lemmas_reduce_to_indexed_base_forms(animals):
    cache = GlossAnnotationCache(resolver=LemmaResolver(animals))
    assert cache.lemmas_of("hounds chasing mice") == frozenset({"hound", "chasing", "mouse"})


def test_vector_is_the_sum_of_known_words():
    cache = GlossAnnotationCache(VectorTable(WORD_VECTORS, normalize=False))
    vector = cache.vector_of("a dog and a hound, unicorn")
    np.testing.assert_allclose(vector, [1.0, 2.0, 0.0])
    assert cache.vector_of("only unicorns here") is None


def test_vector_table_normalises_mappings():
    table = VectorTable(WORD_VECTORS)
    np.testing.assert_allclose(table.get_vector("tree"), [0.0, 0.0, 1.0])
    assert "tree" in table
    assert "oak" not in table


def test_no_vector_table_means_no_vectors():
    assert GlossAnnotationCache().vector_of("a dog") is None


def test_each_gloss_is_computed_once():
    vectors = CountingVectors(WORD_VECTORS)
    cache = GlossAnnotationCache(vectors)

    first = cache.vector_of("dog hound")
    second = cache.vector_of("dog hound")

    assert first is second
    assert vectors.calls == 2
    assert cache.stats()["vector_hits"] == 1


def test_least_recently_used_gloss_is_evicted():
    cache = GlossAnnotationCache(max_entries=2)
    cache.lemmas_of("dog")
    cache.lemmas_of("hound")
    cache.lemmas_of("dog")
    cache.lemmas_of("tree")

    assert cache.stats()["lemma_entries"] == 2
    cache.lemmas_of("dog")
    assert cache.stats()["lemma_hits"] == 2
    cache.lemmas_of("hound")
    assert cache.stats()["lemma_misses"] == 4


def test_max_entries_must_be_positive():
    with pytest.raises(ValueError):
        GlossAnnotationCache(max_entries=0)


def test_concurrent_callers_share_one_result():
    cache = GlossAnnotationCache(CountingVectors(WORD_VECTORS))
    barrier = threading.Barrier(8)
    results = []
    lock = threading.Lock()

    def worker():
        barrier.wait()
        lemmas = cache.lemmas_of("the dog and the hound")
        vector = cache.vector_of("the dog and the hound")
        with lock:
            results.append((lemmas, vector))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 1
    assert len({id(lemmas) for lemmas, _ in results}) == 1
    assert len({id(vector) for _, vector in results}) == 1


def test_cosine_scorer():
    scorer = VectorCosineScorer(GlossAnnotationCache(VectorTable(WORD_VECTORS)))
    assert scorer("a dog", "the dog") == pytest.approx(1.0)
    assert scorer("a dog", "a tree") == pytest.approx(0.0)
    assert scorer("a dog", "a unicorn") == 0.0


def test_inverse_frequency_scorer_favours_rare_shared_lemmas():
    scorer = InverseFrequencyScorer(GlossAnnotationCache()).fit(
        ["a small dog", "a small cat", "a small bird", "a hunting dog"]
    )
    assert scorer("small hunting animal", "hunting bird") > scorer(
        "small hunting animal", "small bird"
    )
    assert scorer("a dog", "a tree") == 0.0
