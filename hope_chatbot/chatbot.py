"""Intent-matching chatbot engine.

A ``Chatbot`` is either uninitialized or ready. ``initialize()`` builds a fresh
corpus/index pair off to the side and publishes it with a single assignment,
so a concurrent ``process_message()`` sees either the old index or the new
one, never a partial build. Messages that arrive before the first successful
``initialize()`` get the fallback reply.
"""

import threading
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from hope_chatbot.config import Settings
from hope_chatbot.corpus import build_corpus, load_corpus
from hope_chatbot.errors import ConfigurationError, NotInitializedError
from hope_chatbot.intents import ERROR_INTENT, FALLBACK_REPLY, RESPONSES, check_response_table
from hope_chatbot.logger import logger
from hope_chatbot.resolver import resolve
from hope_chatbot.text import tokenize
from hope_chatbot.tfidf_vectorizer import build_index, match, top_matches


class Suggestion(NamedTuple):
    question: str
    intent: str
    similarity: float


@dataclass(frozen=True)
class ChatReply:
    reply: str
    intent: str
    confidence: float
    suggestions: Tuple[Suggestion, ...] = ()

    success = True

    def to_dict(self):
        return {
            "reply": self.reply,
            "intent": self.intent,
            "confidence": self.confidence,
            "suggestions": [s._asdict() for s in self.suggestions],
            "success": True,
        }


@dataclass(frozen=True)
class ChatFailure:
    reply: str
    error: str
    intent: str = ERROR_INTENT
    confidence: float = 0.0

    success = False

    def to_dict(self):
        return {
            "reply": self.reply,
            "intent": self.intent,
            "confidence": self.confidence,
            "success": False,
            "error": self.error,
        }


class _Ready(NamedTuple):
    corpus: tuple
    index: object


class Chatbot:
    """Classifies messages against a training corpus and answers with canned replies.

    ``corpus`` is a sequence of TrainingExample; when omitted the corpus named by
    ``settings.corpus_file`` (or the packaged one) is loaded on initialize().
    """

    def __init__(self, corpus=None, responses=RESPONSES, settings=None, normalizer=tokenize):
        check_response_table(responses)
        self._corpus = tuple(corpus) if corpus is not None else None
        self._responses = responses
        self._settings = settings or Settings()
        self._normalizer = normalizer
        self._state = None
        self._lock = threading.Lock()

    @property
    def initialized(self):
        return self._state is not None

    def _load_corpus(self):
        if self._corpus is None:
            return load_corpus(self._settings.corpus_file)
        return build_corpus(
            [example.text for example in self._corpus],
            [example.intent for example in self._corpus],
        )

    def initialize(self, raise_on_error=False):
        """(Re)build the index; returns False and keeps the old one on failure"""
        logger.info("🤖 Initializing chatbot...")
        with self._lock:
            try:
                corpus = self._load_corpus()
                index = build_index([example.text for example in corpus], self._normalizer)
            except Exception:
                logger.exception("❌ Error initializing chatbot")
                if raise_on_error:
                    raise
                return False
            self._state = _Ready(corpus, index)

        logger.info(
            "✅ Chatbot initialized: %d training documents, vocabulary size %d",
            index.document_count, index.vocabulary_size,
        )
        return True

    def process_message(self, message):
        """Classify one message; never raises, failures come back as ChatFailure"""
        try:
            state = self._state
            if state is None:
                raise NotInitializedError("Chatbot not initialized")

            found = match(message, state.index)
            resolution = resolve(found.best_index, found.best_score, state.corpus, self._responses)
            suggestions = tuple(
                Suggestion(state.corpus[position].text, state.corpus[position].intent.value, score)
                for position, score in top_matches(
                    found.scores,
                    self._settings.suggestion_limit,
                    self._settings.suggestion_min_score,
                )
            )
            return ChatReply(resolution.reply, resolution.intent, resolution.confidence, suggestions)

        except NotInitializedError as e:
            logger.warning("⚠️ Chat message received before initialization")
            return ChatFailure(FALLBACK_REPLY, str(e))
        except Exception as e:
            logger.exception("❌ Error processing chat message")
            return ChatFailure(FALLBACK_REPLY, str(e))

    def _training_document_count(self, state):
        if state is not None:
            return state.index.document_count
        if self._corpus is not None:
            return len(self._corpus)
        try:
            return len(load_corpus(self._settings.corpus_file))
        except ConfigurationError as e:
            logger.warning("⚠️ Training corpus unavailable: %s", e)
            return 0

    def get_status(self):
        state = self._state
        return {
            "initialized": state is not None,
            "vocabulary_size": state.index.vocabulary_size if state else 0,
            "training_document_count": self._training_document_count(state),
            "available_intents": [str(label) for label in self._responses],
        }
