"""Adapter package for external word-generation implementations.

Purpose:
    Collect concrete implementations of ``WordPairSource`` (the
    ``wonderwords`` backed generator and a deterministic test double).

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
from __future__ import annotations
