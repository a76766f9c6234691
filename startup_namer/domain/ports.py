from __future__ import annotations
from typing import Iterator, Protocol

from .word_pair import WordPair


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class WordPairSource(Protocol):
    """Lazy, infinite word-pair generator.

    Every ``generate()`` call starts a fresh iterator; callers take as many
    pairs as they need and drop the iterator.
    """

    def generate(self) -> Iterator[WordPair]: ...
