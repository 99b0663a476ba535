"""library logger. quiet by default; LOG_LEVEL raises or lowers it."""
import logging
import os
import sys
from typing import Optional

__all__ = ["logger", "setup_logger"]

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[str]) -> int:
    # getLevelName maps known names to numbers and anything else to a string
    resolved = logging.getLevelName((level or os.getenv("LOG_LEVEL") or "WARNING").upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logger(name: str = "sliq", level: Optional[str] = None, format_string: Optional[str] = None) -> logging.Logger:
    """get a stdout logger; a name that already has handlers is returned untouched"""
    log = logging.getLogger(name)
    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _FORMAT, _DATE_FORMAT))
    log.addHandler(handler)
    log.setLevel(_resolve_level(level))
    log.propagate = False
    return log


logger = setup_logger()
