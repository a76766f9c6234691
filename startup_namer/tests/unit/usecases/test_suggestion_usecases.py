from __future__ import annotations

import pytest

from startup_namer.adapters.word_source_mock import WordPairSourceMock
from startup_namer.domain.favorites import FavoritesSet
from startup_namer.domain.ports import UseCaseError
from startup_namer.domain.suggestion_feed import SuggestionFeed
from startup_namer.domain.word_pair import WordPair
from startup_namer.usecases.list_favorites import ListFavorites
from startup_namer.usecases.load_suggestions import LoadSuggestions
from startup_namer.usecases.toggle_favorite import ToggleFavorite


def test_load_suggestions_returns_requested_slice() -> None:
    feed = SuggestionFeed(WordPairSourceMock())
    uc = LoadSuggestions(feed)

    pairs = uc(8, 4)

    assert pairs == list(feed.items()[8:12])
    assert len(feed) == 20


def test_load_suggestions_zero_count_does_not_grow_feed() -> None:
    feed = SuggestionFeed(WordPairSourceMock())
    assert LoadSuggestions(feed)(0, 0) == []
    assert len(feed) == 0


def test_load_suggestions_wraps_exhaustion() -> None:
    uc = LoadSuggestions(SuggestionFeed(WordPairSourceMock(limit=5)))

    with pytest.raises(UseCaseError) as excinfo:
        uc(0, 1)

    assert excinfo.value.code == "SUGGESTIONS_UNAVAILABLE"
    assert "exhausted" in excinfo.value.message


def test_load_suggestions_negative_start_is_index_error() -> None:
    uc = LoadSuggestions(SuggestionFeed(WordPairSourceMock()))
    with pytest.raises(IndexError):
        uc(-1, 2)


def test_load_suggestions_negative_count_is_value_error() -> None:
    uc = LoadSuggestions(SuggestionFeed(WordPairSourceMock()))
    with pytest.raises(ValueError):
        uc(0, -1)
    assert len(uc.feed) == 0


def test_toggle_and_list_favorites() -> None:
    favorites = FavoritesSet()
    toggle = ToggleFavorite(favorites)
    listing = ListFavorites(favorites)
    a, b = WordPair("bold", "forge"), WordPair("tiny", "pixel")

    assert toggle(a) is True
    assert toggle(b) is True
    assert toggle(a) is False
    assert listing() == [b]
