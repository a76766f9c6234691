"""
MainWindowView
---------------
Tkinter main window for the startup namer. This file contains **only View
code**: no word generation, no favorites logic. It exposes callback hooks
that are expected to be connected to ViewModels.

The window provides:
  * Toolbar with the app title and a "Saved" action
  * Body host for the SuggestionListView (inserted by the app)
"""
from __future__ import annotations
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window.

    UI-only: defines layout containers and wires toolbar events to callbacks
    provided by the app. The suggestion list is created with
    ``parent=self.list_host`` and mounted through ``mount_list``.
    """

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        title: str = "Startup Name Generator",
        on_open_saved: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title(title)
        self.geometry("420x720")
        self.minsize(320, 400)

        self._on_open_saved = on_open_saved

        # Toolbar / Body
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self, title)
        self.list_host = ttk.Frame(self)
        self.list_host.grid(row=1, column=0, sticky="nsew")
        self.list_host.rowconfigure(0, weight=1)
        self.list_host.columnconfigure(0, weight=1)

        self.bind("<Control-s>", lambda e: self._on_open_saved and self._on_open_saved())

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget, title: str) -> None:
        toolbar = ttk.Frame(parent, style="Toolbar.TFrame", padding=(12, 8))
        toolbar.grid(row=0, column=0, sticky="ew")
        toolbar.columnconfigure(0, weight=1)

        ttk.Label(toolbar, text=title, style="Title.TLabel").grid(row=0, column=0, sticky="w")
        ttk.Button(toolbar, text="☰ Saved", command=self._on_open_saved).grid(row=0, column=1, sticky="e")
        ttk.Separator(parent, orient="horizontal").grid(row=0, column=0, sticky="sew")

    # ------------------------------------------------------------------
    # Public API (called by the app)
    # ------------------------------------------------------------------
    def mount_list(self, view: tk.Widget) -> None:
        """Place the suggestion list inside the body host."""
        view.grid(row=0, column=0, sticky="nsew")

    def show_error(self, title: str, message: str) -> None:
        messagebox.showerror(title, message, parent=self)


if __name__ == "__main__":
    # Minimal manual preview (no callbacks wired).
    win = MainWindowView()
    win.mainloop()
