"""Tkinter views (UI-only). No domain logic, no word generation."""
