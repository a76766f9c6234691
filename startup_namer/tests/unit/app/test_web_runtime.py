from __future__ import annotations

from startup_namer.viewmodels.settings_vm import SettingsVM
from startup_namer.viewmodels.suggestions_vm import SeparatorRow, SuggestionRow
from startup_namer.web_ui.main import WebRuntime


def make_runtime() -> WebRuntime:
    settings = SettingsVM()
    settings.apply_dict({"word_source": "mock", "batch_size": 5})
    return WebRuntime(settings)


def test_runtime_reveals_two_batches_without_trailing_separator() -> None:
    runtime = make_runtime()
    rows = runtime.rows()

    assert len([row for row in rows if isinstance(row, SuggestionRow)]) == 10
    assert len([row for row in rows if isinstance(row, SeparatorRow)]) == 9
    assert isinstance(rows[-1], SuggestionRow)


def test_runtime_load_more_extends_by_one_batch() -> None:
    runtime = make_runtime()
    runtime.load_more()

    suggestions = [row for row in runtime.rows() if isinstance(row, SuggestionRow)]
    assert len(suggestions) == 15
    assert len(runtime.suggestions_vm.feed) == 15


def test_runtime_toggle_shows_up_on_saved_page() -> None:
    runtime = make_runtime()
    pair = runtime.suggestions_vm.item_at(3)

    assert runtime.toggle(pair) is True
    assert [row.pair for row in runtime.saved_vm.rows()] == [pair]


def test_runtime_smoke_titles() -> None:
    titles = make_runtime().smoke_titles(3)
    assert len(titles) == 3
    assert all(title[0].isupper() for title in titles)
