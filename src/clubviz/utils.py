"""
utils.py

Small logging helpers shared across the package.

The public helpers:
- `safe_log_exception(msg, exc, **ctx)` : logs exceptions robustly
- `configure_logging(level)` : attaches a single console handler to the
  package logger

"""

from typing import Any
import sys
import logging

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = 'clubviz'


def safe_log_exception(msg: str, exc: Exception, **ctx: Any) -> None:
    """Log an exception robustly.

    Attempts to call `logger.exception`. If logging fails for any reason,
    falls back to writing a compact message to `sys.stderr`.
    """
    try:
        if ctx:
            ctx_s = ' | '.join(f"{k}={v!r}" for k, v in ctx.items())
            logger.exception('%s | %s | %s', msg, exc, ctx_s)
        else:
            logger.exception('%s | %s', msg, exc)
    except Exception:
        # Minimal fallback: write a compact failure message to stderr.
        try:
            sys.stderr.write(f'LOGGING FAILURE: {msg} {exc}\n')
        except Exception:
            pass


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the ``clubviz`` logger.

    Safe to call repeatedly: an existing handler is reused and only its level
    is updated.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    if not log.handlers:                                # avoid dupes on re-entry
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)
    for h in log.handlers:
        h.setLevel(level)
    log.setLevel(level)
    return log
