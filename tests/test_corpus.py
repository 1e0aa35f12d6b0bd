from collections import Counter

import pytest

from hope_chatbot.corpus import TrainingExample, build_corpus, load_corpus
from hope_chatbot.errors import ConfigurationError
from hope_chatbot.intents import IntentLabel


def test_packaged_corpus():
    corpus = load_corpus()
    assert len(corpus) == 156
    assert corpus[0] == TrainingExample("How can I donate to the foundation?", IntentLabel.DONATION)
    assert corpus[-1].intent is IntentLabel.GENERAL

    counts = Counter(example.intent for example in corpus)
    assert counts[IntentLabel.DONATION] == 12
    assert counts[IntentLabel.VALUES] == 8
    assert set(counts) == set(IntentLabel)


def test_packaged_corpus_is_loaded_once():
    assert load_corpus() is load_corpus()


def test_build_corpus_pairs_questions_with_labels():
    corpus = build_corpus(["Where are you?", "How do I give?"], ["location", IntentLabel.DONATION])
    assert corpus == (
        TrainingExample("Where are you?", IntentLabel.LOCATION),
        TrainingExample("How do I give?", IntentLabel.DONATION),
    )


@pytest.mark.parametrize("questions, intents", [
    (["one", "two"], ["general"]),
    ([], []),
    (["one"], ["weather"]),
    (["  "], ["general"]),
    ([None], ["general"]),
])
def test_build_corpus_rejects_malformed_input(questions, intents):
    with pytest.raises(ConfigurationError):
        build_corpus(questions, intents)


def test_load_corpus_from_csv(tmp_path):
    path = tmp_path / "corpus.csv"
    path.write_text(
        'Question,Intent\n"Where is your office?",location\n"What events, if any?", Events \n',
        encoding="utf-8",
    )
    corpus = load_corpus(str(path))
    assert corpus[1] == TrainingExample("What events, if any?", IntentLabel.EVENTS)


def test_load_corpus_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_corpus(str(tmp_path / "missing.csv"))


def test_load_corpus_missing_column(tmp_path):
    path = tmp_path / "corpus.csv"
    path.write_text("Question,Answer\nWhere?,Here\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_corpus(str(path))


def test_load_corpus_missing_intent_cell(tmp_path):
    path = tmp_path / "corpus.csv"
    path.write_text("Question,Intent\nWhere?,location\nWho?,\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_corpus(str(path))


def test_corpus_file_is_read_again_after_edits(tmp_path):
    path = tmp_path / "corpus.csv"
    path.write_text("Question,Intent\nWhere is your office?,location\n", encoding="utf-8")
    assert len(load_corpus(str(path))) == 1

    path.write_text(
        "Question,Intent\nWhere is your office?,location\nHow do I give?,donation\n",
        encoding="utf-8",
    )
    assert load_corpus(str(path))[1] == TrainingExample("How do I give?", IntentLabel.DONATION)
