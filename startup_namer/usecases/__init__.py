"""Use-case layer for orchestrating suggestion and favorites workflows.

Each module coordinates domain objects without touching UI toolkits,
preserving MVVM + Hexagonal boundaries.
"""
