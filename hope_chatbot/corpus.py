"""Training corpus: example questions paired with their intent label."""

import functools
from importlib import resources
from typing import NamedTuple

import pandas as pd

from hope_chatbot.errors import ConfigurationError
from hope_chatbot.intents import IntentLabel

QUESTION_COLUMN = "Question"
INTENT_COLUMN = "Intent"
PACKAGED_CORPUS = "training_corpus.csv"


class TrainingExample(NamedTuple):
    text: str
    intent: IntentLabel


def build_corpus(questions, intents):
    """Pair parallel question/intent sequences into a validated corpus"""
    questions = list(questions)
    intents = list(intents)

    if len(questions) != len(intents):
        raise ConfigurationError(
            f"Corpus has {len(questions)} questions but {len(intents)} intents"
        )
    if not questions:
        raise ConfigurationError("Corpus is empty")

    corpus = []
    for position, (question, intent) in enumerate(zip(questions, intents)):
        if not isinstance(question, str) or not question.strip():
            raise ConfigurationError(f"Corpus row {position} has no question text")
        try:
            label = IntentLabel(intent)
        except ValueError:
            raise ConfigurationError(
                f"Corpus row {position} has unknown intent {intent!r}"
            ) from None
        corpus.append(TrainingExample(question, label))

    return tuple(corpus)


def _read_csv(source):
    try:
        frame = pd.read_csv(source, encoding="utf-8", dtype=str, keep_default_na=False)
    except FileNotFoundError:
        raise ConfigurationError(f"Corpus file not found: {source}") from None
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Corpus file {source} cannot be read: {e}") from e

    missing = {QUESTION_COLUMN, INTENT_COLUMN} - set(frame.columns)
    if missing:
        raise ConfigurationError(
            f"Corpus file {source} must contain {QUESTION_COLUMN} and {INTENT_COLUMN} columns"
        )
    return frame


def _frame_to_corpus(frame):
    return build_corpus(
        frame[QUESTION_COLUMN].str.strip(),
        frame[INTENT_COLUMN].str.strip().str.lower(),
    )


@functools.lru_cache(maxsize=None)
def _packaged_corpus():
    resource = resources.files("hope_chatbot") / "data" / PACKAGED_CORPUS
    with resources.as_file(resource) as packaged:
        return _frame_to_corpus(_read_csv(packaged))


def load_corpus(path=None):
    """Load the corpus from a CSV file, or the packaged one when path is None.

    The packaged corpus is read once per process; a CSV file is re-read on
    every call so edits show up on the next initialize().
    """
    if path is None:
        return _packaged_corpus()
    return _frame_to_corpus(_read_csv(path))
