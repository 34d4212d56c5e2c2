"""Structural classification of error-like values."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _read(value: object, name: str) -> object:
    try:
        return getattr(value, name, None)
    except Exception:
        # A broken attribute counts as a missing one.
        logger.debug("Reading %s.%s failed", value.__class__.__name__, name, exc_info=True)
        return None


def _status_of(value: object) -> int | None:
    status = _read(value, "status")
    # bool is an int subclass but never a status code.
    if isinstance(status, bool) or not isinstance(status, int):
        return None
    return status


def is_http_error(value: object) -> bool:
    """Return True when ``value`` carries an integer ``status``.

    Any object qualifies, including errors raised by other libraries.
    """
    return _status_of(value) is not None


def is_http_problem(value: object) -> bool:
    """Return True for HTTP errors that also carry a string ``title``."""
    return is_http_error(value) and isinstance(_read(value, "title"), str)


def is_client_error(value: object) -> bool:
    status = _status_of(value)
    return status is not None and 400 <= status <= 499


def is_server_error(value: object) -> bool:
    status = _status_of(value)
    return status is not None and 500 <= status <= 599
