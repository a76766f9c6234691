"""Startup name generator: MVVM desktop app over a lazy word-pair feed."""

__version__ = "0.3.0"
