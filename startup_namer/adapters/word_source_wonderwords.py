"""``WordPairSource`` backed by the ``wonderwords`` vocabulary."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from wonderwords import RandomWord

from startup_namer.domain.ports import WordPairSource
from startup_namer.domain.word_pair import WordPair

_FIRST_PARTS = ["adjectives", "nouns"]
_SECOND_PARTS = ["nouns"]

_log = logging.getLogger(__name__)


class WonderwordsPairSource(WordPairSource):
    """Generate ``<adjective|noun> <noun>`` pairs such as ``BrightRiver``.

    Words with spaces, hyphens or other non-letters are skipped so every
    pair renders as a clean PascalCase name.
    """

    def __init__(
        self,
        *,
        max_word_length: int = 8,
        min_word_length: int = 2,
        random_word: Optional[Any] = None,
    ) -> None:
        if max_word_length < min_word_length:
            raise ValueError("max_word_length must be >= min_word_length")
        self.max_word_length = max_word_length
        self.min_word_length = min_word_length
        self._random_word = random_word if random_word is not None else RandomWord()

    def generate(self) -> Iterator[WordPair]:
        while True:
            first = self._pick(_FIRST_PARTS)
            second = self._pick(_SECOND_PARTS)
            if first == second:
                continue
            yield WordPair(first, second)

    def _pick(self, parts: list[str]) -> str:
        while True:
            word = self._random_word.word(
                include_parts_of_speech=parts,
                word_min_length=self.min_word_length,
                word_max_length=self.max_word_length,
            )
            if isinstance(word, str) and word.isalpha():
                return word.lower()
            _log.debug("Skipping unusable word %r", word)
