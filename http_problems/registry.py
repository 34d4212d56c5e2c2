"""Status-code lookup and adaptation of foreign errors into the taxonomy."""
from __future__ import annotations

import logging
from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping

from .config import get_settings
from .errors import ClientError, HttpError, ServerError
from .predicates import is_http_error
from .variants import CLIENT_ERRORS, SERVER_ERRORS

logger = logging.getLogger(__name__)

STATUS_CLASSES: Mapping[int, type[HttpError]] = MappingProxyType(
    {error_cls.status: error_cls for error_cls in (*CLIENT_ERRORS, *SERVER_ERRORS)}
)

_FALLBACK_TITLES: dict[type[HttpError], str] = {
    ClientError: "Client Error",
    ServerError: "Server Error",
    HttpError: "HTTP Error",
}


def error_class_for_status(status: int) -> type[HttpError] | None:
    return STATUS_CLASSES.get(status)


def _generic_class(status: int) -> type[HttpError]:
    if 400 <= status <= 499:
        return ClientError
    if 500 <= status <= 599:
        return ServerError
    return HttpError


def _reason_phrase(status: int, fallback: str) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return fallback


def from_status(
    status: int,
    detail: str | None = None,
    *,
    type: str | None = None,
    instance: str | None = None,
) -> HttpError:
    """Build the error registered for ``status``.

    Unregistered codes get a generic ``ClientError``/``ServerError``/``HttpError``
    carrying the requested status and its standard reason phrase.
    """
    error_cls = error_class_for_status(status)
    if error_cls is not None:
        return error_cls(detail, type=type, instance=instance)

    generic_cls = _generic_class(status)
    logger.debug("No error class registered for status %d, using %s", status, generic_cls.__name__)
    return generic_cls._with_status(
        status,
        _reason_phrase(status, _FALLBACK_TITLES[generic_cls]),
        detail,
        type=type,
        instance=instance,
    )


def _optional_str(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def as_http_error(value: object) -> HttpError | None:
    """Wrap an error-like value from elsewhere into the taxonomy.

    Returns ``value`` itself when it already is an ``HttpError`` and ``None``
    when it carries no integer ``status``.
    """
    if isinstance(value, HttpError):
        return value
    if not is_http_error(value):
        return None

    detail = _optional_str(getattr(value, "detail", None))
    if detail is None and isinstance(value, BaseException):
        detail = _optional_str(str(value))

    error = from_status(
        value.status,  # type: ignore[attr-defined]
        detail,
        type=_optional_str(getattr(value, "type", None)),
        instance=_optional_str(getattr(value, "instance", None)),
    )
    if isinstance(value, BaseException):
        error.__cause__ = value

    if get_settings().LOG_ADAPTED:
        logger.debug(
            "Adapted %s (status %d) into %s",
            value.__class__.__name__,
            error.status,
            error.__class__.__name__,
        )
    return error
