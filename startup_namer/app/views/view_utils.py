from __future__ import annotations

import logging
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)


def safe_call(
    fn: Optional[Callable[..., Any]],
    *args: Any,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> None:
    if fn is None:
        return
    try:
        fn(*args)
    except Exception as exc:
        if on_error:
            on_error(exc)
        else:
            _log.exception("Callback failed: %s", exc)


HEART_SAVED = "♥"
HEART_EMPTY = "♡"
SAVED_COLOR = "#e53935"


def heart_glyph(saved: bool) -> str:
    return HEART_SAVED if saved else HEART_EMPTY


__all__ = ["HEART_EMPTY", "HEART_SAVED", "SAVED_COLOR", "heart_glyph", "safe_call"]
