"""Infinite suggestion list for the main window.

The view renders rows handed to it by a row provider (``SuggestionsVM.rows``)
and asks for more whenever the scroll position nears the bottom. Heart and
row clicks are forwarded through ``on_toggle``; the view never mutates
favorites itself.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, List, Optional, Sequence

from .scroll_host import ScrollHost
from .theme import BG, TEXT
from .view_utils import SAVED_COLOR, heart_glyph, safe_call

RowProvider = Callable[[int, int], Sequence]


class SuggestionListView(ttk.Frame):
    """Scroll host with lazily appended rows."""

    # positions fetched per load (suggestions and separators)
    PAGE_POSITIONS = 40
    # fraction of the scroll range after which the next page is loaded
    LOAD_THRESHOLD = 0.9

    def __init__(
        self,
        parent: tk.Widget,
        *,
        row_provider: Optional[RowProvider] = None,
        on_toggle: Optional[Callable[[object], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
        font_size: int = 18,
        padding: int = 16,
        **kwargs,
    ) -> None:
        super().__init__(parent, **kwargs)
        self._row_provider = row_provider
        self._on_toggle = on_toggle
        self._on_error = on_error
        self._font = ("TkDefaultFont", font_size)
        self._padding = padding
        self._loaded_positions = 0
        self._loading = False
        self._load_pending = False
        self._hearts: Dict[object, List[tk.Label]] = {}

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.host = ScrollHost(
            self,
            padding=padding,
            on_scroll=self._on_scroll,
            on_resize=self._on_resize,
        )
        self.host.grid(row=0, column=0, sticky="nsew")
        self.inner = self.host.inner

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def request_more(self) -> None:
        """Schedule one page load on idle; repeated requests collapse into it."""
        if self._load_pending:
            return
        self._load_pending = True
        self.after_idle(self.load_more)

    def load_more(self) -> None:
        """Append the next page of rows from the row provider."""
        self._load_pending = False
        if self._row_provider is None or self._loading:
            return
        self._loading = True
        try:
            start = self._loaded_positions
            stop = start + self.PAGE_POSITIONS
            rows = self._row_provider(start, stop)
            for row in rows:
                self._render_row(row)
            self._loaded_positions = stop
        except Exception as exc:
            if self._on_error:
                self._on_error(exc)
            else:
                raise
        finally:
            self._loading = False

    def set_saved(self, pair: object, saved: bool) -> None:
        """Re-render the heart of every visible row showing ``pair``."""
        for heart in self._hearts.get(pair, []):
            heart.configure(text=heart_glyph(saved), fg=SAVED_COLOR if saved else TEXT)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render_row(self, row) -> None:
        grid_row = row.position
        if not hasattr(row, "pair"):
            ttk.Separator(self.inner, orient="horizontal").grid(
                row=grid_row, column=0, sticky="ew", pady=2
            )
            return

        frame = ttk.Frame(self.inner, style="Row.TFrame")
        frame.grid(row=grid_row, column=0, sticky="ew", pady=6)
        frame.columnconfigure(0, weight=1)

        title = ttk.Label(frame, text=row.title, style="Suggestion.TLabel")
        title.grid(row=0, column=0, sticky="w")

        heart = tk.Label(
            frame,
            text=heart_glyph(row.saved),
            fg=SAVED_COLOR if row.saved else TEXT,
            bg=BG,
            font=self._font,
            cursor="hand2",
        )
        heart.grid(row=0, column=1, sticky="e", padx=(self._padding, 0))
        self._hearts.setdefault(row.pair, []).append(heart)

        handler = lambda _e, pair=row.pair: safe_call(self._on_toggle, pair, on_error=self._on_error)
        for widget in (frame, title, heart):
            widget.bind("<Button-1>", handler)

    # ------------------------------------------------------------------
    # Scroll handling
    # ------------------------------------------------------------------
    def _on_scroll(self, _first: float, last: float) -> None:
        if last >= self.LOAD_THRESHOLD:
            self.request_more()

    def _on_resize(self, height: int) -> None:
        # keep filling until the viewport has something to scroll
        if self.inner.winfo_reqheight() <= height:
            self.request_more()


__all__ = ["SuggestionListView"]
