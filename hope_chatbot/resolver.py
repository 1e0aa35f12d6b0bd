from typing import NamedTuple

from hope_chatbot.intents import RESPONSES, IntentLabel, response_for
from hope_chatbot.tfidf_vectorizer import NO_MATCH


class Resolution(NamedTuple):
    reply: str
    intent: str
    confidence: float


def resolve(best_index, confidence, corpus, responses=RESPONSES):
    """Map a match position to its intent and canned reply.

    NO_MATCH (or any position outside the corpus) resolves to the general
    intent. The confidence is passed through untouched; no threshold applies.
    """
    if best_index == NO_MATCH or not 0 <= best_index < len(corpus):
        intent = IntentLabel.GENERAL
    else:
        intent = corpus[best_index].intent

    return Resolution(response_for(intent, responses), intent.value, float(confidence))
