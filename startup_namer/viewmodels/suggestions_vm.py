"""Main-list view model: lazy suggestion rows plus favorite toggling.

Call context:
    ``SuggestionListView`` asks for rows by list position while the user
    scrolls; heart clicks call ``toggle_favorite``. Views register a listener
    through ``subscribe`` and re-render the affected row when it fires.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from startup_namer.domain.favorites import FavoritesSet
from startup_namer.domain.ports import UseCaseError
from startup_namer.domain.suggestion_feed import SuggestionFeed
from startup_namer.domain.word_pair import WordPair
from startup_namer.usecases.list_favorites import ListFavorites
from startup_namer.usecases.load_suggestions import LoadSuggestions
from startup_namer.usecases.toggle_favorite import ToggleFavorite

FavoriteListener = Callable[[WordPair, bool], None]


@dataclass(frozen=True)
class SeparatorRow:
    """Divider drawn between two suggestion rows."""
    position: int


@dataclass(frozen=True)
class SuggestionRow:
    """Display row for one suggestion in the scrolling list."""
    position: int
    index: int
    pair: WordPair
    title: str
    saved: bool


ListRow = Union[SuggestionRow, SeparatorRow]


class SuggestionsVM:
    """Owns the suggestion feed and the favorites set for the main screen.

    Even list positions are suggestions, odd positions are separators, so
    position ``p`` shows feed item ``p // 2``.
    """

    def __init__(
        self,
        *,
        feed: SuggestionFeed,
        favorites: Optional[FavoritesSet] = None,
        on_error: Optional[Callable[[UseCaseError], None]] = None,
    ) -> None:
        self.feed = feed
        self.favorites_set = favorites if favorites is not None else FavoritesSet()
        self.on_error = on_error
        self.uc_load = LoadSuggestions(feed)
        self.uc_toggle = ToggleFavorite(self.favorites_set)
        self.uc_list = ListFavorites(self.favorites_set)
        self._listeners: List[FavoriteListener] = []
        self._log = logging.getLogger(__name__)

    # ---- Observer ----
    def subscribe(self, listener: FavoriteListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: FavoriteListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---- Feed / favorites API (called by views) ----
    def item_at(self, index: int) -> WordPair:
        return self._load(index, 1)[0]

    def toggle_favorite(self, pair: WordPair) -> bool:
        if pair not in self.feed:
            raise ValueError(f"'{pair.as_pascal_case}' was never suggested by the feed")
        saved = self.uc_toggle(pair)
        self._log.info("%s %s", "Saved" if saved else "Removed", pair.as_pascal_case)
        for listener in list(self._listeners):
            listener(pair, saved)
        return saved

    def is_favorite(self, pair: WordPair) -> bool:
        return self.favorites_set.contains(pair)

    def favorites(self) -> List[WordPair]:
        return self.uc_list()

    # ---- Row projection ----
    def row_at(self, position: int) -> ListRow:
        if position < 0:
            raise IndexError(f"List position must be >= 0, got {position}")
        if position % 2 == 1:
            return SeparatorRow(position=position)
        index = position // 2
        pair = self.item_at(index)
        return self._to_row(position, index, pair)

    def rows(self, start: int, stop: int) -> List[ListRow]:
        """Return rows for positions ``start`` (inclusive) to ``stop``."""
        if stop <= start:
            return []
        first_index = (start + 1) // 2
        last_index = (stop - 1) // 2
        pairs = self._load(first_index, max(0, last_index - first_index + 1))
        rows: List[ListRow] = []
        for position in range(start, stop):
            if position % 2 == 1:
                rows.append(SeparatorRow(position=position))
                continue
            index = position // 2
            rows.append(self._to_row(position, index, pairs[index - first_index]))
        return rows

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _to_row(self, position: int, index: int, pair: WordPair) -> SuggestionRow:
        return SuggestionRow(
            position=position,
            index=index,
            pair=pair,
            title=pair.as_pascal_case,
            saved=self.is_favorite(pair),
        )

    def _load(self, start: int, count: int) -> List[WordPair]:
        try:
            return self.uc_load(start, count)
        except UseCaseError as err:
            if self.on_error:
                self.on_error(err)
            raise


__all__ = ["FavoriteListener", "ListRow", "SeparatorRow", "SuggestionRow", "SuggestionsVM"]
