"""Concrete HTTP errors, one per well-known 4xx/5xx status code."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import (
    AllowList,
    Challenge,
    ClientError,
    ProxyChallenge,
    RetryAfter,
    ServerError,
    copy_challenges,
)


# 4xx

class BadRequest(ClientError):
    status = 400
    title = "Bad Request"


@dataclass(eq=False)
class Unauthorized(ClientError):
    """Missing or invalid credentials.

    ``authenticate_challenge`` is the WWW-Authenticate value: a single
    challenge or an ordered list of them.
    """

    status = 401
    title = "Unauthorized"

    authenticate_challenge: str | Sequence[str] | None = None

    def __post_init__(self) -> None:
        if self.authenticate_challenge is not None:
            self.authenticate_challenge = copy_challenges(self.authenticate_challenge)
        super().__post_init__()

    @property
    def extra(self) -> Challenge | None:
        if self.authenticate_challenge is None:
            return None
        return Challenge.of(self.authenticate_challenge)


class PaymentRequired(ClientError):
    status = 402
    title = "Payment Required"


class Forbidden(ClientError):
    """Credentials are valid but do not grant access."""

    status = 403
    title = "Forbidden"


class NotFound(ClientError):
    status = 404
    title = "Not Found"


@dataclass(eq=False)
class MethodNotAllowed(ClientError):
    """Method not supported by the target resource; ``allow`` lists the ones that are."""

    status = 405
    title = "Method Not Allowed"

    allow: Sequence[str] | None = None

    def __post_init__(self) -> None:
        if self.allow is not None:
            self.allow = list(self.allow)
        super().__post_init__()

    @property
    def extra(self) -> AllowList | None:
        if self.allow is None:
            return None
        return AllowList(tuple(self.allow))


class NotAcceptable(ClientError):
    status = 406
    title = "Not Acceptable"


@dataclass(eq=False)
class ProxyAuthenticationRequired(ClientError):
    """Like 401, but the client must authenticate with the proxy."""

    status = 407
    title = "Proxy Authentication Required"

    proxy_authenticate: str | Sequence[str] | None = None

    def __post_init__(self) -> None:
        if self.proxy_authenticate is not None:
            self.proxy_authenticate = copy_challenges(self.proxy_authenticate)
        super().__post_init__()

    @property
    def extra(self) -> ProxyChallenge | None:
        if self.proxy_authenticate is None:
            return None
        return ProxyChallenge.of(self.proxy_authenticate)


class RequestTimeout(ClientError):
    status = 408
    title = "Request Timeout"


class Conflict(ClientError):
    status = 409
    title = "Conflict"


class Gone(ClientError):
    status = 410
    title = "Gone"


class LengthRequired(ClientError):
    status = 411
    title = "Length Required"


class PreconditionFailed(ClientError):
    status = 412
    title = "Precondition Failed"


@dataclass(eq=False)
class PayloadTooLarge(ClientError):
    status = 413
    title = "Payload Too Large"

    retry_after: int | None = None

    @property
    def extra(self) -> RetryAfter | None:
        if self.retry_after is None:
            return None
        return RetryAfter(self.retry_after)


class UriTooLong(ClientError):
    status = 414
    title = "URI Too Long"


class UnsupportedMediaType(ClientError):
    status = 415
    title = "Unsupported Media Type"


class RangeNotSatisfiable(ClientError):
    status = 416
    title = "Range Not Satisfiable"


class ExpectationFailed(ClientError):
    status = 417
    title = "Expectation Failed"


class MisdirectedRequest(ClientError):
    status = 421
    title = "Misdirected Request"


class UnprocessableEntity(ClientError):
    """Well-formed request with semantically invalid content."""

    status = 422
    title = "Unprocessable Entity"


class Locked(ClientError):
    status = 423
    title = "Locked"


class FailedDependency(ClientError):
    status = 424
    title = "Failed Dependency"


class TooEarly(ClientError):
    status = 425
    title = "Too Early"


class UpgradeRequired(ClientError):
    status = 426
    title = "Upgrade Required"


class PreconditionRequired(ClientError):
    status = 428
    title = "Precondition Required"


@dataclass(eq=False)
class TooManyRequests(ClientError):
    """Rate limited; ``retry_after`` is the advised wait in seconds."""

    status = 429
    title = "Too Many Requests"

    retry_after: int | None = None

    @property
    def extra(self) -> RetryAfter | None:
        if self.retry_after is None:
            return None
        return RetryAfter(self.retry_after)


class RequestHeaderFieldsTooLarge(ClientError):
    status = 431
    title = "Request Header Fields Too Large"


class UnavailableForLegalReasons(ClientError):
    status = 451
    title = "Unavailable For Legal Reasons"


# 5xx

class InternalServerError(ServerError):
    status = 500
    title = "Internal Server Error"


class NotImplemented(ServerError):  # noqa: A001
    status = 501
    title = "Not Implemented"


class BadGateway(ServerError):
    status = 502
    title = "Bad Gateway"


@dataclass(eq=False)
class ServiceUnavailable(ServerError):
    """Temporarily unable to serve; ``retry_after`` hints when to come back."""

    status = 503
    title = "Service Unavailable"

    retry_after: int | None = None

    @property
    def extra(self) -> RetryAfter | None:
        if self.retry_after is None:
            return None
        return RetryAfter(self.retry_after)


class GatewayTimeout(ServerError):
    status = 504
    title = "Gateway Timeout"


class HttpVersionNotSupported(ServerError):
    status = 505
    title = "HTTP Version Not Supported"


class VariantAlsoNegotiates(ServerError):
    status = 506
    title = "Variant Also Negotiates"


class InsufficientStorage(ServerError):
    status = 507
    title = "Insufficient Storage"


class LoopDetected(ServerError):
    status = 508
    title = "Loop Detected"


class NotExtended(ServerError):
    status = 510
    title = "Not Extended"


class NetworkAuthenticationRequired(ServerError):
    status = 511
    title = "Network Authentication Required"


CLIENT_ERRORS: tuple[type[ClientError], ...] = (
    BadRequest,
    Unauthorized,
    PaymentRequired,
    Forbidden,
    NotFound,
    MethodNotAllowed,
    NotAcceptable,
    ProxyAuthenticationRequired,
    RequestTimeout,
    Conflict,
    Gone,
    LengthRequired,
    PreconditionFailed,
    PayloadTooLarge,
    UriTooLong,
    UnsupportedMediaType,
    RangeNotSatisfiable,
    ExpectationFailed,
    MisdirectedRequest,
    UnprocessableEntity,
    Locked,
    FailedDependency,
    TooEarly,
    UpgradeRequired,
    PreconditionRequired,
    TooManyRequests,
    RequestHeaderFieldsTooLarge,
    UnavailableForLegalReasons,
)

SERVER_ERRORS: tuple[type[ServerError], ...] = (
    InternalServerError,
    NotImplemented,
    BadGateway,
    ServiceUnavailable,
    GatewayTimeout,
    HttpVersionNotSupported,
    VariantAlsoNegotiates,
    InsufficientStorage,
    LoopDetected,
    NotExtended,
    NetworkAuthenticationRequired,
)
