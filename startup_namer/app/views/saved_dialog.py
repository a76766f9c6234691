from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence

from .scroll_host import ScrollHost


class SavedSuggestionsDialog(tk.Toplevel):
    """Secondary window listing saved suggestions (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        title: str = "Saved Suggestions",
        padding: int = 16,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.title(title)
        self.transient(parent)
        self.geometry("380x560")
        self._on_close = on_close

        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)
        self.bind("<Escape>", lambda _e: self._on_close_clicked())

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)
        ttk.Label(self, text=title, style="Title.TLabel").grid(
            row=0, column=0, sticky="w", padx=padding, pady=(padding, 4)
        )
        self.host = ScrollHost(self, padding=padding)
        self.host.grid(row=1, column=0, sticky="nsew")

    def show_empty(self, text: str) -> None:
        self.host.clear()
        ttk.Label(self.host.inner, text=text, style="Subtle.TLabel").grid(row=0, column=0, sticky="w")

    def set_rows(self, rows: Sequence) -> None:
        """Replace the list with ``rows`` (objects with a ``title``), divided by separators."""
        self.host.clear()
        grid_row = 0
        for i, row in enumerate(rows):
            if i:
                ttk.Separator(self.host.inner, orient="horizontal").grid(
                    row=grid_row, column=0, sticky="ew", pady=2
                )
                grid_row += 1
            ttk.Label(self.host.inner, text=row.title, style="Suggestion.TLabel").grid(
                row=grid_row, column=0, sticky="w", pady=6
            )
            grid_row += 1

    def _on_close_clicked(self) -> None:
        if self._on_close:
            self._on_close()
        self.destroy()
