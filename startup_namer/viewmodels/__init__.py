"""ViewModel package for UI state and command surfaces.

Call context:
    ``startup_namer/app/main.py`` and ``startup_namer/web_ui/main.py`` import
    concrete viewmodels from this package to bind view callbacks to state
    transitions.

Dependencies:
    Modules in this package depend on domain types and use cases only. Word
    generation adapters and UI toolkits remain outside.

Responsibilities:
    - Expose mutable UI state (feed, favorites) and command callbacks.
    - Project domain values into display rows.
    - Notify views through explicit listeners instead of toolkit hooks.
"""
