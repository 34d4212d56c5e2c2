from __future__ import annotations

import logging
import pickle
from types import SimpleNamespace

import pytest

from http_problems import (
    CLIENT_ERRORS,
    SERVER_ERRORS,
    STATUS_CLASSES,
    ClientError,
    HttpError,
    NotFound,
    ServerError,
    ServiceUnavailable,
    as_http_error,
    error_class_for_status,
    from_status,
)
from http_problems.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_every_variant_is_registered_under_its_status() -> None:
    for error_cls in (*CLIENT_ERRORS, *SERVER_ERRORS):
        assert STATUS_CLASSES[error_cls.status] is error_cls
        assert error_class_for_status(error_cls.status) is error_cls
    assert len(STATUS_CLASSES) == 39


def test_status_classes_is_read_only() -> None:
    with pytest.raises(TypeError):
        STATUS_CLASSES[418] = ClientError  # type: ignore[index]


def test_error_class_for_unknown_status_is_none() -> None:
    assert error_class_for_status(418) is None
    assert error_class_for_status(200) is None


def test_from_status_builds_registered_variant() -> None:
    error = from_status(404, "no such order", instance="/orders/9")

    assert type(error) is NotFound
    assert error.detail == "no such order"
    assert error.instance == "/orders/9"


def test_from_status_leaves_extra_fields_unset() -> None:
    error = from_status(503)

    assert isinstance(error, ServiceUnavailable)
    assert error.retry_after is None
    assert error.extra is None


@pytest.mark.parametrize(
    ("status", "generic_cls", "title"),
    [
        (418, ClientError, "I'm a Teapot"),
        (499, ClientError, "Client Error"),
        (509, ServerError, "Server Error"),
        (302, HttpError, "Found"),
        (799, HttpError, "HTTP Error"),
    ],
)
def test_from_status_falls_back_to_generic_class(status: int, generic_cls, title: str) -> None:
    error = from_status(status)

    assert type(error) is generic_cls
    assert error.status == status
    assert error.title == title
    assert str(error) == title
    assert error.args == (title,)


def test_generic_fallback_does_not_touch_class_defaults() -> None:
    from_status(418)

    assert ClientError.status == 400
    assert ClientError.title == "Bad Request"


def test_from_status_fallback_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="http_problems.registry"):
        from_status(499)

    assert "No error class registered for status 499" in caplog.text


def test_as_http_error_returns_taxonomy_errors_unchanged() -> None:
    error = NotFound()

    assert as_http_error(error) is error


def test_as_http_error_returns_none_without_status() -> None:
    assert as_http_error(ValueError("nope")) is None
    assert as_http_error(SimpleNamespace(status="404")) is None


def test_as_http_error_wraps_foreign_exception() -> None:
    foreign = RuntimeError("upstream said no")
    foreign.status = 404  # type: ignore[attr-defined]

    error = as_http_error(foreign)

    assert isinstance(error, NotFound)
    assert error.detail == "upstream said no"
    assert error.__cause__ is foreign


def test_as_http_error_prefers_foreign_detail_and_problem_members() -> None:
    foreign = SimpleNamespace(
        status=409,
        detail="version mismatch",
        type="https://example.com/problems/version",
        instance="/docs/3",
    )

    error = as_http_error(foreign)

    assert error is not None
    assert error.status == 409
    assert error.detail == "version mismatch"
    assert error.type == "https://example.com/problems/version"
    assert error.instance == "/docs/3"
    assert error.__cause__ is None


def test_as_http_error_logs_adaptation(caplog: pytest.LogCaptureFixture) -> None:
    foreign = SimpleNamespace(status=502)

    with caplog.at_level(logging.DEBUG, logger="http_problems.registry"):
        as_http_error(foreign)

    assert "Adapted SimpleNamespace (status 502) into BadGateway" in caplog.text


def test_as_http_error_logging_can_be_disabled(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("HTTP_PROBLEMS_LOG_ADAPTED", "false")
    get_settings.cache_clear()

    with caplog.at_level(logging.DEBUG, logger="http_problems.registry"):
        as_http_error(SimpleNamespace(status=502))

    assert "Adapted" not in caplog.text


def test_generic_fallback_is_read_only() -> None:
    error = from_status(418)

    with pytest.raises(AttributeError):
        error.status = 500  # type: ignore[misc]

    assert error.status == 418


def test_generic_fallback_survives_pickling() -> None:
    error = from_status(509, "bandwidth exhausted")

    restored = pickle.loads(pickle.dumps(error))

    assert type(restored) is ServerError
    assert restored.status == 509
    assert restored.title == "Server Error"
    assert restored.detail == "bandwidth exhausted"
