"""Scrollable Canvas + inner Frame host shared by the list views.

Children are gridded into ``host.inner``. The mouse wheel is bound only
while the pointer is over the host, so several hosts (main list and saved
dialog) can be open at once.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .theme import BG


class ScrollHost(ttk.Frame):
    """Vertical scroll host; ``on_scroll(first, last)`` sees every view change."""

    def __init__(
        self,
        parent: tk.Widget,
        *,
        padding: int = 0,
        on_scroll: Optional[Callable[[float, float], None]] = None,
        on_resize: Optional[Callable[[int], None]] = None,
        **kwargs,
    ) -> None:
        super().__init__(parent, **kwargs)
        self._on_scroll = on_scroll
        self._on_resize = on_resize

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.canvas = tk.Canvas(self, highlightthickness=0, background=BG)
        self.vbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self._on_yscroll)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")

        self.inner = ttk.Frame(self.canvas, padding=padding)
        self.inner.columnconfigure(0, weight=1)
        self._window = self.canvas.create_window((0, 0), window=self.inner, anchor="nw")

        self.inner.bind("<Configure>", self._on_inner_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)
        self.bind("<Enter>", self._bind_wheel)
        self.bind("<Leave>", self._unbind_wheel)

    def clear(self) -> None:
        for child in list(self.inner.winfo_children()):
            child.destroy()
        self.canvas.yview_moveto(0)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_yscroll(self, first: str, last: str) -> None:
        self.vbar.set(first, last)
        if self._on_scroll:
            self._on_scroll(float(first), float(last))

    def _on_inner_configure(self, _event) -> None:
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_canvas_configure(self, event) -> None:
        self.canvas.itemconfigure(self._window, width=event.width)
        if self._on_resize:
            self._on_resize(event.height)

    def _bind_wheel(self, _event) -> None:
        self.canvas.bind_all("<MouseWheel>", self._on_mousewheel)
        self.canvas.bind_all("<Button-4>", lambda e: self.canvas.yview_scroll(-1, "units"))
        self.canvas.bind_all("<Button-5>", lambda e: self.canvas.yview_scroll(1, "units"))

    def _unbind_wheel(self, _event) -> None:
        for sequence in ("<MouseWheel>", "<Button-4>", "<Button-5>"):
            self.canvas.unbind_all(sequence)

    def _on_mousewheel(self, event) -> None:
        delta = -1 * (event.delta // 120) if event.delta else 0
        self.canvas.yview_scroll(delta, "units")


__all__ = ["ScrollHost"]
