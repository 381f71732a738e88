"""Centralized logging helpers.

Library modules only obtain a module logger and emit DEBUG records guarded by
``is_debug_enabled``; the CLI calls ``configure_logging`` once at startup.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

_CONTEXT_FIELDS = ("event", "component", "action", "outcome", "scheme", "target")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name; defaults to ``VERSRANGE_LOG_LEVEL`` or INFO.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records of ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records.

    Known fields keep their name; None values are dropped.
    """
    context: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        name = key if key in _CONTEXT_FIELDS else f"ctx_{key}"
        context[name] = value
    return context
