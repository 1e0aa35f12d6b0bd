import pytest

from hope_chatbot import Chatbot, IntentLabel, TrainingExample


def split_words(text):
    """Whitespace tokenizer so index arithmetic can be checked by hand"""
    return text.lower().split()


@pytest.fixture
def small_corpus():
    return [
        TrainingExample("donate money online", IntentLabel.DONATION),
        TrainingExample("donate by bank transfer", IntentLabel.DONATION),
        TrainingExample("volunteer for events", IntentLabel.VOLUNTEER),
        TrainingExample("office location address", IntentLabel.LOCATION),
    ]


@pytest.fixture
def small_chatbot(small_corpus):
    bot = Chatbot(corpus=small_corpus, normalizer=split_words)
    assert bot.initialize()
    return bot


@pytest.fixture(scope="session")
def ready_chatbot():
    bot = Chatbot()
    assert bot.initialize()
    return bot
