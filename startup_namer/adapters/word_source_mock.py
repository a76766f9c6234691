from __future__ import annotations
from typing import Iterator, Optional, Sequence

from startup_namer.domain.ports import WordPairSource
from startup_namer.domain.word_pair import WordPair

_FIRST = ("bright", "quiet", "swift", "lucky", "bold", "clever", "happy", "silver", "green", "tiny", "sunny")
_SECOND = ("river", "lamp", "fox", "cloud", "forge", "stone", "harbor", "pixel", "garden", "rocket", "maple", "wave", "orbit")


class WordPairSourceMock(WordPairSource):
    """Deterministic word-pair source used for tests and offline development.

    Pairs cycle through the cartesian product of two word lists, continuing
    across ``generate()`` calls so consecutive batches differ. ``limit`` caps
    the total number of pairs ever produced to simulate an exhausted source.
    """

    def __init__(
        self,
        first_words: Sequence[str] = _FIRST,
        second_words: Sequence[str] = _SECOND,
        *,
        limit: Optional[int] = None,
    ) -> None:
        if not first_words or not second_words:
            raise ValueError("WordPairSourceMock needs non-empty word lists.")
        self._first = tuple(first_words)
        self._second = tuple(second_words)
        self._limit = limit
        self.produced = 0
        self.generate_calls = 0

    def generate(self) -> Iterator[WordPair]:
        self.generate_calls += 1
        return self._iter()

    def _iter(self) -> Iterator[WordPair]:
        while self._limit is None or self.produced < self._limit:
            n = self.produced
            first = self._first[n % len(self._first)]
            second = self._second[n % len(self._second)]
            self.produced += 1
            yield WordPair(first, second)
