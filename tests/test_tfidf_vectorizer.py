import math

import numpy as np
import pytest

from hope_chatbot.errors import ConfigurationError
from hope_chatbot.tfidf_vectorizer import NO_MATCH, best_match, build_index, match, top_matches
from tests.conftest import split_words


@pytest.fixture
def fruit_index():
    return build_index(["apple banana apple", "banana cherry", "cherry durian"], split_words)


def test_vocabulary_and_document_frequency(fruit_index):
    assert fruit_index.vocabulary == {"apple", "banana", "cherry", "durian"}
    assert fruit_index.vocabulary_size == 4
    assert fruit_index.document_count == 3
    assert fruit_index.document_frequency("banana") == 2
    assert fruit_index.document_frequency("apple") == 1
    assert fruit_index.document_frequency("kiwi") == 0


def test_idf_is_unsmoothed_log(fruit_index):
    idf = fruit_index.idf_table()
    assert idf["apple"] == pytest.approx(math.log(3))
    assert idf["banana"] == pytest.approx(math.log(1.5))


def test_document_vector_is_tf_times_idf(fruit_index):
    vector = fruit_index.document_vector(0)
    assert vector["apple"] == pytest.approx(2 / 3 * math.log(3))
    assert vector["banana"] == pytest.approx(1 / 3 * math.log(1.5))
    assert "cherry" not in vector


def test_term_in_every_document_weighs_zero():
    index = build_index(["common alpha", "common beta"], split_words)
    assert index.idf_table()["common"] == 0.0


def test_empty_corpus_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_index([], split_words)


def test_corpus_without_terms_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_index(["", "   "], split_words)


def test_query_length_counts_unknown_terms():
    index = build_index(["alpha beta", "gamma delta"], split_words)
    vector = index.vectorize("alpha unknown")
    assert vector.nnz == 1
    assert vector.sum() == pytest.approx(0.5 * math.log(2))


def test_match_finds_most_similar_document(fruit_index):
    found = match("durian", fruit_index)
    assert found.best_index == 2
    assert 0 < found.best_score <= 1


def test_identical_text_scores_one(fruit_index):
    found = match("banana cherry", fruit_index)
    assert found.best_index == 1
    assert found.best_score == pytest.approx(1.0)


def test_ties_keep_first_document():
    index = build_index(["alpha beta", "alpha beta", "gamma"], split_words)
    assert match("alpha beta", index).best_index == 0


def test_unknown_terms_give_no_match(fruit_index):
    found = match("kiwi mango", fruit_index)
    assert found.best_index == NO_MATCH
    assert found.best_score == 0.0
    assert not found.scores.any()


def test_document_without_terms_scores_zero():
    index = build_index(["alpha", "", "beta"], split_words)
    scores = index.similarities("alpha beta")
    assert scores[1] == 0.0
    assert match("alpha", index).best_index == 0


def test_scores_stay_within_bounds(fruit_index):
    for text in ["apple", "apple apple banana", "cherry durian apple", "nothing"]:
        scores = fruit_index.similarities(text)
        assert ((scores >= 0) & (scores <= 1)).all()


def test_best_match_on_empty_scores():
    assert best_match(np.array([])).best_index == NO_MATCH


def test_top_matches_ranks_and_filters():
    scores = np.array([0.05, 0.5, 0.3, 0.5, 0.2])
    assert top_matches(scores, limit=3, min_score=0.1) == [(1, 0.5), (3, 0.5), (2, 0.3)]
    assert top_matches(scores, limit=5, min_score=0.4) == [(1, 0.5), (3, 0.5)]
    assert top_matches(scores, limit=0) == []
