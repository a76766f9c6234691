"""Small cross-layer helpers (logging configuration)."""
