"""
Lightweight logging utilities for the project.

Default behavior: modules import logging and obtain a logger via
`logging.getLogger(__name__)`. This helper ensures a sane default
configuration if the application hasn't configured logging yet.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str | None = None) -> None:
    """Setup a minimal logging configuration once.

    - No-op if root logger already has handlers
    - `level=None` uses `IMUI_LOG_LEVEL` from settings
    - Intended to be called from hosts/runners, never from the library itself
    """
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
