"""Source, feed and view-model wiring for the app runtimes.

This module owns lazy construction of the word-pair source, the suggestion
feed and the view models that depend on values in
:class:`startup_namer.viewmodels.settings_vm.SettingsVM`. Both the Tk app and
the NiceGUI runtime build one controller at start-up.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Mapping, Optional

from ..adapters.settings_file import SettingsFile
from ..adapters.word_source_mock import WordPairSourceMock
from ..adapters.word_source_wonderwords import WonderwordsPairSource
from ..domain.favorites import FavoritesSet
from ..domain.ports import UseCaseError, WordPairSource
from ..domain.suggestion_feed import SuggestionFeed
from ..viewmodels.saved_vm import SavedVM
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.suggestions_vm import SuggestionsVM

SETTINGS_FILE_ENV = "NAMER_SETTINGS_FILE"

_log = logging.getLogger(__name__)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> SettingsVM:
    """Build a ``SettingsVM`` from the optional settings file and ``NAMER_*`` env."""
    env = os.environ if environ is None else environ
    settings = SettingsVM()
    path = env.get(SETTINGS_FILE_ENV, "").strip()
    if path:
        payload = SettingsFile(path).load()
        if payload:
            settings.apply_dict(payload)
            _log.info("Loaded settings from %s", path)
    settings.apply_env(env)
    _log.debug("Settings: %s", settings.to_dict())
    return settings


class AppController:
    """Create and cache the runtime source, feed and view models.

    Call chain:
        ``startup_namer.app.main.App`` (or the web runtime) creates one
        instance and reads ``suggestions_vm`` / ``saved_vm`` after
        ``ensure_ready``.
    """

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        source_factory: Optional[Callable[[SettingsVM], WordPairSource]] = None,
        on_error: Optional[Callable[[UseCaseError], None]] = None,
    ) -> None:
        self.settings_vm = settings_vm
        self._source_factory = source_factory or build_source
        self._on_error = on_error
        self._source: Optional[WordPairSource] = None
        self.feed: Optional[SuggestionFeed] = None
        self.favorites: Optional[FavoritesSet] = None
        self.suggestions_vm: Optional[SuggestionsVM] = None
        self.saved_vm: Optional[SavedVM] = None

    @property
    def source(self) -> Optional[WordPairSource]:
        """Return the cached word-pair source."""
        return self._source

    def reset(self) -> None:
        """Drop the source, feed, favorites and view models.

        The next ``ensure_ready`` call rebuilds everything from current
        settings; suggestions and favorites start empty again.
        """
        self._source = None
        self.feed = None
        self.favorites = None
        self.suggestions_vm = None
        self.saved_vm = None

    def ensure_ready(self) -> bool:
        if self.suggestions_vm is not None and self.saved_vm is not None:
            return True

        self._source = self._source_factory(self.settings_vm)
        self.feed = SuggestionFeed(self._source, batch_size=self.settings_vm.batch_size)
        self.favorites = FavoritesSet()
        self.suggestions_vm = SuggestionsVM(
            feed=self.feed,
            favorites=self.favorites,
            on_error=self._on_error,
        )
        self.saved_vm = SavedVM(self.suggestions_vm, title=self.settings_vm.saved_title)
        _log.debug(
            "Runtime ready (source=%s, batch_size=%d)",
            self.settings_vm.word_source,
            self.settings_vm.batch_size,
        )
        return True


def build_source(settings_vm: SettingsVM) -> WordPairSource:
    """Return the word-pair source selected by ``settings_vm.word_source``."""
    if settings_vm.word_source == "mock":
        return WordPairSourceMock()
    return WonderwordsPairSource(max_word_length=settings_vm.max_word_length)


__all__ = ["AppController", "SETTINGS_FILE_ENV", "build_source", "load_settings"]
