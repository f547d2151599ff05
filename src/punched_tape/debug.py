"""Opt-in debug logging for the punched tape package.

Use ``enable(True)`` (or set env ``PUNCHED_TAPE_DEBUG=1``) to log tape
mutations, rejected reads and drawing summaries. By default the package
logger only carries a ``NullHandler`` and stays silent.
"""
from __future__ import annotations

import logging
import os

ROOT_LOGGER = "punched_tape"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

TRUTHY = frozenset(("1", "true", "yes", "on"))


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUTHY


_ENABLED = _env_flag("PUNCHED_TAPE_DEBUG")


def enable(flag: bool = True, *, level: int = logging.DEBUG) -> None:
    """Enable or disable debug logging for the package."""
    global _ENABLED
    _ENABLED = bool(flag)
    lg = logging.getLogger(ROOT_LOGGER)
    if _ENABLED:
        # Idempotent handler setup
        if not any(type(h) is logging.StreamHandler for h in lg.handlers):
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
            lg.addHandler(h)
        lg.setLevel(level)
    else:
        for h in [h for h in lg.handlers if type(h) is logging.StreamHandler]:
            lg.removeHandler(h)
        lg.setLevel(logging.NOTSET)


def is_enabled() -> bool:
    return _ENABLED


def _install() -> None:
    lg = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in lg.handlers):
        lg.addHandler(logging.NullHandler())
    if _ENABLED:
        enable(True)
