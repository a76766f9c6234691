"""Root logger setup for both runtimes.

The ``debug_logging`` settings flag picks DEBUG or INFO. ``NAMER_LOG_LEVEL``
(a level name or number) or a truthy ``NAMER_DEBUG`` overrides the flag.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
LEVEL_ENV = "NAMER_LOG_LEVEL"
DEBUG_ENV = "NAMER_DEBUG"


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Return the level forced by the environment, or None if unset/unknown."""
    env = os.environ if environ is None else environ
    name = env.get(LEVEL_ENV, "").strip()
    if name:
        if name.isdigit():
            return int(name)
        level = logging.getLevelName(name.upper())
        if isinstance(level, int):
            return level
    if env.get(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def configure_root(debug_enabled: bool = False, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """Install the compact handler once and set the root level.

    Returns the effective level.
    """
    level = env_level(environ)
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    root.setLevel(level)
    return level
