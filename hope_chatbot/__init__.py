"""TF-IDF intent-matching chatbot for the Mwalimu Hope Foundation."""

from hope_chatbot.chatbot import Chatbot, ChatFailure, ChatReply, Suggestion
from hope_chatbot.config import Settings, load_settings
from hope_chatbot.corpus import TrainingExample, build_corpus, load_corpus
from hope_chatbot.errors import ChatbotError, ConfigurationError, NotInitializedError
from hope_chatbot.intents import IntentLabel

__all__ = [
    "Chatbot",
    "ChatFailure",
    "ChatReply",
    "Suggestion",
    "Settings",
    "load_settings",
    "TrainingExample",
    "build_corpus",
    "load_corpus",
    "ChatbotError",
    "ConfigurationError",
    "NotInitializedError",
    "IntentLabel",
]
