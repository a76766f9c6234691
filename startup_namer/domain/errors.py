"""Domain-level error types shared across use cases and view models.

Errors defined here cross layer boundaries without carrying adapter or
UI-toolkit details.
"""

from __future__ import annotations


class SuggestionSourceExhausted(RuntimeError):
    """Raised when a word-pair source stops before a batch is complete."""

    def __init__(self, requested: int, received: int) -> None:
        super().__init__(
            f"Word-pair source exhausted: requested {requested} pairs, received {received}."
        )
        self.requested = requested
        self.received = received


__all__ = ["SuggestionSourceExhausted"]
