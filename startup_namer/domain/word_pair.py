"""Word-pair value object shown as a single startup-name suggestion."""

from __future__ import annotations

from dataclasses import dataclass


def _normalize_word(value: object, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"WordPair {label} word must be a non-empty string.")
    if any(ch.isspace() for ch in value):
        raise ValueError(f"WordPair {label} word must not contain whitespace: {value!r}")
    return value.lower()


@dataclass(frozen=True)
class WordPair:
    """Two generated words treated as one value.

    Equality and hashing are by word content, so a pair can be stored in a
    set and found again from any equal instance.
    """

    first: str
    """First word, stored lower-case."""

    second: str
    """Second word, stored lower-case."""

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "first", _normalize_word(self.first, "first"))
        object.__setattr__(self, "second", _normalize_word(self.second, "second"))

    @property
    def as_pascal_case(self) -> str:
        """Display form used in lists, e.g. ``BrightRiver``."""
        return self.first.capitalize() + self.second.capitalize()

    @property
    def as_camel_case(self) -> str:
        return self.first + self.second.capitalize()

    @property
    def as_lower_case(self) -> str:
        return self.join()

    @property
    def as_upper_case(self) -> str:
        return self.join().upper()

    @property
    def as_snake_case(self) -> str:
        return self.join("_")

    def join(self, separator: str = "") -> str:
        return f"{self.first}{separator}{self.second}"

    def __str__(self) -> str:
        return self.as_lower_case


__all__ = ["WordPair"]
