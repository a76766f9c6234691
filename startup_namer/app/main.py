# startup_namer/app/main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.saved_dialog import SavedSuggestionsDialog
from .views.suggestion_list_view import SuggestionListView
from .views.theme import apply_theme

# ---- ViewModels & wiring ----
from ..domain.ports import UseCaseError
from ..domain.word_pair import WordPair
from ..viewmodels.settings_vm import SettingsVM
from .controller import AppController, load_settings
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire Views <-> ViewModels and the suggestion feed."""

    def __init__(self, settings_vm: Optional[SettingsVM] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm or load_settings()
        # ---- Controller & ViewModels ----
        self.controller = AppController(self.settings_vm, on_error=self._on_use_case_error)
        self.controller.ensure_ready()
        self.suggestions_vm = self.controller.suggestions_vm
        self.saved_vm = self.controller.saved_vm

        # ---- Main window ----
        self.win = MainWindowView(
            title=self.settings_vm.window_title,
            on_open_saved=self._on_open_saved,
        )
        apply_theme(self.win, font_size=self.settings_vm.font_size)
        self.win.report_callback_exception = self._on_tk_exception

        # ---- Subviews ----
        self.list_view = SuggestionListView(
            self.win.list_host,
            row_provider=self.suggestions_vm.rows,
            on_toggle=self.suggestions_vm.toggle_favorite,
            on_error=self._on_view_error,
            font_size=self.settings_vm.font_size,
            padding=self.settings_vm.padding,
        )
        self.win.mount_list(self.list_view)

        self._saved_dialog: Optional[SavedSuggestionsDialog] = None
        self.suggestions_vm.subscribe(self._on_favorite_changed)

        self.list_view.load_more()

    # ==================================================================
    # Toolbar / favorites
    # ==================================================================
    def _on_open_saved(self) -> None:
        if self._saved_dialog is not None:
            self._saved_dialog.lift()
            return
        dlg = SavedSuggestionsDialog(
            self.win,
            title=self.saved_vm.title,
            padding=self.settings_vm.padding,
            on_close=self._on_saved_closed,
        )
        self._saved_dialog = dlg
        self._refresh_saved_dialog()

    def _on_saved_closed(self) -> None:
        self._saved_dialog = None

    def _on_favorite_changed(self, pair: WordPair, saved: bool) -> None:
        self.list_view.set_saved(pair, saved)
        self._refresh_saved_dialog()

    def _refresh_saved_dialog(self) -> None:
        if self._saved_dialog is None:
            return
        if self.saved_vm.is_empty():
            self._saved_dialog.show_empty(self.saved_vm.empty_text)
        else:
            self._saved_dialog.set_rows(self.saved_vm.rows())

    # ==================================================================
    # Error handling helpers
    # ==================================================================
    def _on_use_case_error(self, err: UseCaseError) -> None:
        self._log.warning("UseCase error (%s): %s", err.code, err.message)

    def _on_view_error(self, err: Exception) -> None:
        if isinstance(err, UseCaseError):
            self._on_fatal(err)
            return
        self._log.error("View callback failed: %s", err, exc_info=err)

    def _on_tk_exception(self, exc_type, exc, tb) -> None:
        self._log.error("Unhandled UI error", exc_info=(exc_type, exc, tb))
        self._on_fatal(exc)

    def _on_fatal(self, err: BaseException) -> None:
        """No recovery is defined: report, then close the application."""
        message = err.message if isinstance(err, UseCaseError) else str(err)
        self._log.error("Fatal error, closing: %s", message)
        try:
            self.win.show_error("Startup Name Generator", message or "Unexpected error.")
        finally:
            self.win.destroy()


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the startup name generator.")
    parser.add_argument("--offline", action="store_true", help="use the built-in word lists")
    parser.add_argument("--batch-size", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    settings = load_settings()
    logging_utils.configure_root(settings.debug_logging)
    if args.offline:
        settings.word_source = "mock"
    if args.batch_size is not None:
        settings.batch_size = args.batch_size
    app = App(settings)
    app.win.mainloop()


if __name__ == "__main__":
    main()
