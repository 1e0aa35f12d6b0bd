class ChatbotError(Exception):
    """Base class for chatbot errors"""


class ConfigurationError(ChatbotError):
    """Corpus, response table or settings cannot produce a usable index"""


class NotInitializedError(ChatbotError):
    """A message arrived before any successful initialize()"""
