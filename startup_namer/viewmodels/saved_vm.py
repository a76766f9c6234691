"""Saved-suggestions projection for the favorites screen.

Call context:
    ``SavedSuggestionsDialog`` (Tk) and the ``/saved`` NiceGUI page render
    ``SavedVM.rows()``; both re-read the rows whenever ``SuggestionsVM``
    notifies a favorite change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from startup_namer.domain.word_pair import WordPair
from .suggestions_vm import SuggestionsVM


@dataclass(frozen=True)
class SavedRow:
    """Display row for one saved suggestion."""
    title: str
    pair: WordPair


class SavedVM:
    """Read-only view of the favorites held by a ``SuggestionsVM``."""

    def __init__(self, suggestions: SuggestionsVM, *, title: str = "Saved Suggestions") -> None:
        self._suggestions = suggestions
        self.title = title
        self.empty_text = "No saved suggestions yet."

    def rows(self) -> List[SavedRow]:
        """Return saved rows in the order they were favorited."""
        return [SavedRow(title=pair.as_pascal_case, pair=pair) for pair in self._suggestions.favorites()]

    def is_empty(self) -> bool:
        return not self._suggestions.favorites()


__all__ = ["SavedRow", "SavedVM"]
