"""
Lightweight, opt-in logging utilities for the library.

Usage in library code:
    from fixforge._logging import resolve_logger

    def apply_things(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("applying %d fixes", n)  # no-op unless enabled or logger passed

The fixer core is called once per fix and once per render, so it must stay
silent unless the caller asks for output. Nothing here configures global
logging or attaches handlers.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _propagate_to_root(lg: logging.Logger) -> None:
    # Let records reach the root logger so pytest's caplog can capture them.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "fixforge")
        lg.setLevel(level)
        _propagate_to_root(lg)
        return lg
    return NoopLogger()
