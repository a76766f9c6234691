from __future__ import annotations

from typing import List, Tuple

import pytest

from startup_namer.adapters.word_source_mock import WordPairSourceMock
from startup_namer.domain.ports import UseCaseError
from startup_namer.domain.suggestion_feed import SuggestionFeed
from startup_namer.domain.word_pair import WordPair
from startup_namer.viewmodels.saved_vm import SavedRow, SavedVM
from startup_namer.viewmodels.suggestions_vm import SeparatorRow, SuggestionRow, SuggestionsVM


def make_vm(**source_kwargs) -> SuggestionsVM:
    return SuggestionsVM(feed=SuggestionFeed(WordPairSourceMock(**source_kwargs)))


def test_item_at_scenario_grows_feed_lazily() -> None:
    vm = make_vm()

    vm.item_at(0)
    assert len(vm.feed) == 10
    vm.item_at(9)
    assert len(vm.feed) == 10
    vm.item_at(10)
    assert len(vm.feed) == 20


def test_is_favorite_follows_toggles() -> None:
    vm = make_vm()
    pair = vm.item_at(2)

    assert vm.is_favorite(pair) is False
    assert vm.toggle_favorite(pair) is True
    assert vm.is_favorite(pair) is True
    assert vm.toggle_favorite(pair) is False
    assert vm.is_favorite(pair) is False


def test_favorites_after_a_b_a_is_only_b() -> None:
    vm = make_vm()
    a, b = vm.item_at(0), vm.item_at(1)

    vm.toggle_favorite(a)
    vm.toggle_favorite(b)
    vm.toggle_favorite(a)

    assert vm.favorites() == [b]


def test_toggle_rejects_pair_never_suggested() -> None:
    vm = make_vm()
    vm.item_at(0)

    with pytest.raises(ValueError):
        vm.toggle_favorite(WordPair("never", "shown"))
    assert vm.favorites() == []


def test_listeners_are_notified_synchronously() -> None:
    vm = make_vm()
    events: List[Tuple[WordPair, bool]] = []
    vm.subscribe(lambda pair, saved: events.append((pair, saved)))
    pair = vm.item_at(4)

    vm.toggle_favorite(pair)
    vm.toggle_favorite(pair)

    assert events == [(pair, True), (pair, False)]


def test_unsubscribe_stops_notifications() -> None:
    vm = make_vm()
    events: List[bool] = []

    def listener(_pair: WordPair, saved: bool) -> None:
        events.append(saved)

    vm.subscribe(listener)
    vm.subscribe(listener)
    vm.toggle_favorite(vm.item_at(0))
    vm.unsubscribe(listener)
    vm.toggle_favorite(vm.item_at(0))

    assert events == [True]


def test_row_at_alternates_suggestions_and_separators() -> None:
    vm = make_vm()

    row0 = vm.row_at(0)
    row1 = vm.row_at(1)
    row4 = vm.row_at(4)

    assert isinstance(row0, SuggestionRow)
    assert row0.index == 0
    assert row0.title == vm.item_at(0).as_pascal_case
    assert row1 == SeparatorRow(position=1)
    assert isinstance(row4, SuggestionRow)
    assert row4.index == 2


def test_row_at_reflects_saved_state() -> None:
    vm = make_vm()
    pair = vm.item_at(3)
    vm.toggle_favorite(pair)

    assert vm.row_at(6).saved is True
    assert vm.row_at(4).saved is False


def test_rows_range_matches_row_at() -> None:
    vm = make_vm()

    assert vm.rows(0, 25) == [vm.row_at(p) for p in range(25)]
    assert vm.rows(3, 8) == [vm.row_at(p) for p in range(3, 8)]
    assert vm.rows(5, 5) == []
    assert len(vm.feed) == 20


def test_rows_starting_on_separator_only() -> None:
    vm = make_vm()
    assert vm.rows(1, 2) == [SeparatorRow(position=1)]
    assert len(vm.feed) == 0


def test_row_at_negative_position_raises() -> None:
    with pytest.raises(IndexError):
        make_vm().row_at(-2)


def test_item_at_negative_index_raises_index_error() -> None:
    errors: List[UseCaseError] = []
    vm = SuggestionsVM(feed=SuggestionFeed(WordPairSourceMock()), on_error=errors.append)

    with pytest.raises(IndexError):
        vm.item_at(-1)
    assert errors == []
    assert len(vm.feed) == 0


def test_load_failure_reports_then_raises() -> None:
    errors: List[UseCaseError] = []
    vm = SuggestionsVM(feed=SuggestionFeed(WordPairSourceMock(limit=12)), on_error=errors.append)
    vm.item_at(5)

    with pytest.raises(UseCaseError):
        vm.item_at(10)

    assert [err.code for err in errors] == ["SUGGESTIONS_UNAVAILABLE"]


def test_saved_vm_projects_favorites_in_order() -> None:
    vm = make_vm()
    saved = SavedVM(vm)
    a, b = vm.item_at(7), vm.item_at(1)
    assert saved.is_empty()

    vm.toggle_favorite(a)
    vm.toggle_favorite(b)

    assert saved.rows() == [
        SavedRow(title=a.as_pascal_case, pair=a),
        SavedRow(title=b.as_pascal_case, pair=b),
    ]
    assert saved.title == "Saved Suggestions"
    assert not saved.is_empty()
