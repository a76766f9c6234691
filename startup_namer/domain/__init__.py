"""Domain package exports for value objects and aggregates."""

from .errors import SuggestionSourceExhausted
from .favorites import FavoritesSet
from .ports import UseCaseError, WordPairSource
from .suggestion_feed import DEFAULT_BATCH_SIZE, SuggestionFeed
from .word_pair import WordPair

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "FavoritesSet",
    "SuggestionFeed",
    "SuggestionSourceExhausted",
    "UseCaseError",
    "WordPair",
    "WordPairSource",
]
