"""Shared visual theme for the namer desktop views.

The module centralizes ttk style tokens so the suggestion list and the saved
dialog render the same way without carrying styling logic in each view.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BG = "#ffffff"
TEXT = "#1f2937"
MUTED = "#64748b"
BORDER = "#e5e7eb"
TOOLBAR_BG = "#ffffff"


def apply_theme(root: tk.Misc, *, font_size: int = 18) -> None:
    """Apply the white ttk theme used across the application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
        font_size: Point size of suggestion titles.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("Toolbar.TFrame", background=TOOLBAR_BG)
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Subtle.TLabel", background=BG, foreground=MUTED)
    style.configure("Title.TLabel", background=TOOLBAR_BG, foreground=TEXT, font=("TkDefaultFont", 14, "bold"))
    style.configure("Suggestion.TLabel", background=BG, foreground=TEXT, font=("TkDefaultFont", font_size))
    style.configure("Row.TFrame", background=BG)
    style.configure("TSeparator", background=BORDER)

    style.configure("TButton", padding=(10, 6), background=BG, bordercolor=BORDER, relief="flat")
    style.map("TButton", background=[("active", "#f3f4f6")])
