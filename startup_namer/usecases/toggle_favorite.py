from __future__ import annotations
from dataclasses import dataclass

from ..domain.favorites import FavoritesSet
from ..domain.word_pair import WordPair


@dataclass
class ToggleFavorite:
    favorites: FavoritesSet

    def __call__(self, pair: WordPair) -> bool:
        """Flip membership of ``pair``; returns True when it is now saved."""
        return self.favorites.toggle(pair)
