from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..domain.ports import UseCaseError
from ..domain.suggestion_feed import SuggestionFeed
from ..domain.word_pair import WordPair

_log = logging.getLogger(__name__)


@dataclass
class LoadSuggestions:
    """Make sure the feed covers ``[start, start + count)`` and return it."""

    feed: SuggestionFeed

    def __call__(self, start: int, count: int = 1) -> List[WordPair]:
        if start < 0:
            raise IndexError(f"Suggestion index must be >= 0, got {start}")
        if count < 0:
            raise ValueError(f"Suggestion count must be >= 0, got {count}")
        try:
            return [self.feed.item_at(i) for i in range(start, start + count)]
        except Exception as exc:
            _log.warning("Suggestion source failed at %d..%d: %s", start, start + count, exc)
            raise UseCaseError("SUGGESTIONS_UNAVAILABLE", str(exc)) from exc
