"""Append-only suggestion feed that grows in fixed batches on demand.

Call context:
    ``LoadSuggestions`` asks the feed for items by index while the list view
    scrolls. The feed pulls one batch at a time from a ``WordPairSource`` and
    never rewrites items it already handed out.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import List, Set, Tuple

from .errors import SuggestionSourceExhausted
from .ports import WordPairSource
from .word_pair import WordPair

DEFAULT_BATCH_SIZE = 10

_log = logging.getLogger(__name__)


class SuggestionFeed:
    """Ordered, monotonically growing sequence of generated word pairs."""

    def __init__(self, source: WordPairSource, *, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size <= 0:
            raise ValueError(f"batch_size must be a positive integer, got {batch_size!r}")
        self._source = source
        self._batch_size = batch_size
        self._items: List[WordPair] = []
        self._seen: Set[WordPair] = set()

    @property
    def batch_size(self) -> int:
        return self._batch_size

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, pair: object) -> bool:
        return pair in self._seen

    def items(self) -> Tuple[WordPair, ...]:
        """Return a snapshot of every pair generated so far."""
        return tuple(self._items)

    def item_at(self, index: int) -> WordPair:
        """Return the pair at ``index``, extending the feed batch by batch.

        Raises:
            IndexError: ``index`` is negative.
            SuggestionSourceExhausted: the source stopped mid-batch.
        """
        if index < 0:
            raise IndexError(f"Suggestion index must be >= 0, got {index}")
        while index >= len(self._items):
            self._extend()
        return self._items[index]

    def _extend(self) -> None:
        batch = list(islice(self._source.generate(), self._batch_size))
        if len(batch) < self._batch_size:
            raise SuggestionSourceExhausted(self._batch_size, len(batch))
        self._items.extend(batch)
        self._seen.update(batch)
        _log.debug("Suggestion feed extended to %d items", len(self._items))


__all__ = ["DEFAULT_BATCH_SIZE", "SuggestionFeed"]
