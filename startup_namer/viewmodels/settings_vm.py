from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..domain.suggestion_feed import DEFAULT_BATCH_SIZE
from ..utils.logging import env_requests_debug

WORD_SOURCES: tuple[str, ...] = ("wonderwords", "mock")

# env var -> config key
ENV_OVERRIDES: Dict[str, str] = {
    "NAMER_WINDOW_TITLE": "window_title",
    "NAMER_BATCH_SIZE": "batch_size",
    "NAMER_FONT_SIZE": "font_size",
    "NAMER_WORD_SOURCE": "word_source",
    "NAMER_MAX_WORD_LENGTH": "max_word_length",
}


@dataclass
class SettingsConfig:
    """Typed runtime settings; read at start-up, never written back."""

    window_title: str = "Startup Name Generator"
    saved_title: str = "Saved Suggestions"
    batch_size: int = DEFAULT_BATCH_SIZE
    font_size: int = 18
    padding: int = 16
    word_source: str = "wonderwords"
    max_word_length: int = 8


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def window_title(self) -> str:
        return self.config.window_title

    @property
    def saved_title(self) -> str:
        return self.config.saved_title

    @property
    def batch_size(self) -> int:
        return self.config.batch_size

    @batch_size.setter
    def batch_size(self, value: int) -> None:
        self.config = replace(self.config, batch_size=self._coerce_int("batch_size", value, minimum=1))

    @property
    def font_size(self) -> int:
        return self.config.font_size

    @font_size.setter
    def font_size(self, value: int) -> None:
        self.config = replace(self.config, font_size=self._coerce_int("font_size", value, minimum=6))

    @property
    def padding(self) -> int:
        return self.config.padding

    @property
    def word_source(self) -> str:
        return self.config.word_source

    @word_source.setter
    def word_source(self, value: str) -> None:
        self.config = replace(self.config, word_source=self._coerce_word_source(value))

    @property
    def max_word_length(self) -> int:
        return self.config.max_word_length

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping (settings file or CLI) to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = sorted(set(payload) - allowed)
        if unknown:
            raise ValueError(f"Unknown settings keys: {', '.join(unknown)}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def apply_env(self, environ: Mapping[str, str]) -> None:
        """Apply ``NAMER_*`` overrides; empty values are ignored."""
        payload = {
            key: environ[var]
            for var, key in ENV_OVERRIDES.items()
            if environ.get(var, "").strip()
        }
        if payload:
            self.apply_dict(payload)

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key in {"window_title", "saved_title"}:
            return self._coerce_title(key, raw)
        if key == "batch_size":
            return self._coerce_int(key, raw, minimum=1)
        if key == "font_size":
            return self._coerce_int(key, raw, minimum=6)
        if key == "padding":
            return self._coerce_int(key, raw, minimum=0)
        if key == "max_word_length":
            return self._coerce_int(key, raw, minimum=2)
        if key == "word_source":
            return self._coerce_word_source(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_title(name: str, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{name} must be a non-empty string.")
        return value.strip()

    @staticmethod
    def _coerce_word_source(value: Any) -> str:
        text = str(value or "").strip().lower()
        if text not in WORD_SOURCES:
            raise ValueError(f"word_source must be one of: {', '.join(WORD_SOURCES)}")
        return text

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, minimum: Optional[int] = None) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if minimum is not None and coerced < minimum:
            raise ValueError(f"{name} must be >= {minimum}.")
        return coerced


__all__ = ["ENV_OVERRIDES", "SettingsConfig", "SettingsVM", "WORD_SOURCES"]
