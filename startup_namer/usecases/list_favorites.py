from __future__ import annotations
from dataclasses import dataclass
from typing import List

from ..domain.favorites import FavoritesSet
from ..domain.word_pair import WordPair


@dataclass
class ListFavorites:
    favorites: FavoritesSet

    def __call__(self) -> List[WordPair]:
        return self.favorites.all()
