from __future__ import annotations

from typing import Dict, Iterator, List

from .word_pair import WordPair


class FavoritesSet:
    """Saved word pairs, unique by value, kept in insertion order.

    Mutated only through ``toggle``; ``all`` feeds the saved-suggestions view.
    """

    def __init__(self) -> None:
        # dict keys give set semantics with a stable display order
        self._members: Dict[WordPair, None] = {}

    def toggle(self, pair: WordPair) -> bool:
        """Remove ``pair`` if saved, add it otherwise. Returns the new state."""
        if pair in self._members:
            del self._members[pair]
            return False
        self._members[pair] = None
        return True

    def contains(self, pair: WordPair) -> bool:
        return pair in self._members

    def all(self) -> List[WordPair]:
        return list(self._members)

    def __contains__(self, pair: object) -> bool:
        return pair in self._members

    def __iter__(self) -> Iterator[WordPair]:
        return iter(list(self._members))

    def __len__(self) -> int:
        return len(self._members)


__all__ = ["FavoritesSet"]
