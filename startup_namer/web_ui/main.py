"""NiceGUI entrypoint for the namer web runtime."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from nicegui import ui

from startup_namer.app.controller import AppController, load_settings
from startup_namer.domain.ports import UseCaseError
from startup_namer.domain.word_pair import WordPair
from startup_namer.utils import logging as logging_utils
from startup_namer.viewmodels.settings_vm import SettingsVM
from startup_namer.viewmodels.suggestions_vm import ListRow, SeparatorRow

_log = logging.getLogger(__name__)


class WebRuntime:
    """Process-wide state for the web pages: one feed, one favorites set."""

    def __init__(self, settings_vm: Optional[SettingsVM] = None) -> None:
        self.settings_vm = settings_vm or load_settings()
        self.controller = AppController(self.settings_vm, on_error=self._on_use_case_error)
        self.controller.ensure_ready()
        self.suggestions_vm = self.controller.suggestions_vm
        self.saved_vm = self.controller.saved_vm
        self.visible = self.settings_vm.batch_size * 2

    def rows(self) -> List[ListRow]:
        """Rows for the currently revealed suggestions (no trailing separator)."""
        return self.suggestions_vm.rows(0, self.visible * 2 - 1)

    def load_more(self) -> None:
        self.visible += self.settings_vm.batch_size
        self.suggestions_vm.item_at(self.visible - 1)

    def toggle(self, pair: WordPair) -> bool:
        return self.suggestions_vm.toggle_favorite(pair)

    def smoke_titles(self, count: int) -> List[str]:
        return [self.suggestions_vm.item_at(i).as_pascal_case for i in range(count)]

    @staticmethod
    def _on_use_case_error(err: UseCaseError) -> None:
        _log.warning("UseCase error (%s): %s", err.code, err.message)


def _notify_error(exc: Exception) -> None:
    """Render exceptions as concise NiceGUI toasts."""
    text = exc.message if isinstance(exc, UseCaseError) else str(exc)
    ui.notify(text, color="negative", close_button="OK")


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""
    font_px = runtime.settings_vm.font_size
    padding = runtime.settings_vm.padding

    @ui.page("/")
    def index() -> None:
        @ui.refreshable
        def render_list() -> None:
            try:
                rows = runtime.rows()
            except UseCaseError as exc:
                _notify_error(exc)
                return
            with ui.column().classes("w-full").style(f"padding: {padding}px"):
                for row in rows:
                    if isinstance(row, SeparatorRow):
                        ui.separator()
                        continue
                    with ui.row().classes("w-full items-center justify-between no-wrap"):
                        ui.label(row.title).style(f"font-size: {font_px}px")
                        color = "red" if row.saved else "grey-7"
                        ui.button(
                            icon="favorite" if row.saved else "favorite_border",
                            on_click=lambda _, p=row.pair: on_toggle(p),
                        ).props(f"flat round color={color}")
                ui.button("Load more", on_click=on_load_more).props("flat")

        def on_toggle(pair: WordPair) -> None:
            try:
                runtime.toggle(pair)
            except Exception as exc:
                _notify_error(exc)
            render_list.refresh()

        def on_load_more() -> None:
            try:
                runtime.load_more()
            except UseCaseError as exc:
                _notify_error(exc)
            render_list.refresh()

        with ui.header().classes("items-center justify-between bg-white text-black"):
            ui.label(runtime.settings_vm.window_title).classes("text-h6")
            ui.button(icon="list", on_click=lambda: ui.navigate.to("/saved")).props("flat round")
        render_list()

    @ui.page("/saved")
    def saved() -> None:
        with ui.header().classes("items-center bg-white text-black"):
            ui.button(icon="arrow_back", on_click=lambda: ui.navigate.to("/")).props("flat round")
            ui.label(runtime.saved_vm.title).classes("text-h6")
        with ui.column().classes("w-full").style(f"padding: {padding}px"):
            if runtime.saved_vm.is_empty():
                ui.label(runtime.saved_vm.empty_text).classes("text-grey-7")
                return
            for i, row in enumerate(runtime.saved_vm.rows()):
                if i:
                    ui.separator()
                ui.label(row.title).style(f"font-size: {font_px}px")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the startup namer NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--offline", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args(argv)
    settings = load_settings()
    logging_utils.configure_root(settings.debug_logging)
    if args.offline:
        settings.word_source = "mock"
    runtime = WebRuntime(settings)
    if args.smoke_test:
        print("web-smoke-ok", runtime.smoke_titles(settings.batch_size))
        return
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title=settings.window_title,
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
