"""HTTP error taxonomy with problem-details fields and classification helpers."""
from .errors import (
    AllowList,
    Challenge,
    ClientError,
    Extra,
    HttpError,
    ProxyChallenge,
    RetryAfter,
    ServerError,
)
from .predicates import is_client_error, is_http_error, is_http_problem, is_server_error
from .variants import (
    CLIENT_ERRORS,
    SERVER_ERRORS,
    BadGateway,
    BadRequest,
    Conflict,
    ExpectationFailed,
    FailedDependency,
    Forbidden,
    GatewayTimeout,
    Gone,
    HttpVersionNotSupported,
    InsufficientStorage,
    InternalServerError,
    LengthRequired,
    Locked,
    LoopDetected,
    MethodNotAllowed,
    MisdirectedRequest,
    NetworkAuthenticationRequired,
    NotAcceptable,
    NotExtended,
    NotFound,
    NotImplemented,
    PayloadTooLarge,
    PaymentRequired,
    PreconditionFailed,
    PreconditionRequired,
    ProxyAuthenticationRequired,
    RangeNotSatisfiable,
    RequestHeaderFieldsTooLarge,
    RequestTimeout,
    ServiceUnavailable,
    TooEarly,
    TooManyRequests,
    Unauthorized,
    UnavailableForLegalReasons,
    UnprocessableEntity,
    UnsupportedMediaType,
    UpgradeRequired,
    UriTooLong,
    VariantAlsoNegotiates,
)
from .registry import STATUS_CLASSES, as_http_error, error_class_for_status, from_status
from .problem_details import (
    PROBLEM_MEDIA_TYPE,
    ProblemDetails,
    build_problem_details,
    problem_headers,
)

__all__ = [
    "AllowList",
    "Challenge",
    "ClientError",
    "Extra",
    "HttpError",
    "ProxyChallenge",
    "RetryAfter",
    "ServerError",
    "is_client_error",
    "is_http_error",
    "is_http_problem",
    "is_server_error",
    "CLIENT_ERRORS",
    "SERVER_ERRORS",
    "BadGateway",
    "BadRequest",
    "Conflict",
    "ExpectationFailed",
    "FailedDependency",
    "Forbidden",
    "GatewayTimeout",
    "Gone",
    "HttpVersionNotSupported",
    "InsufficientStorage",
    "InternalServerError",
    "LengthRequired",
    "Locked",
    "LoopDetected",
    "MethodNotAllowed",
    "MisdirectedRequest",
    "NetworkAuthenticationRequired",
    "NotAcceptable",
    "NotExtended",
    "NotFound",
    "NotImplemented",
    "PayloadTooLarge",
    "PaymentRequired",
    "PreconditionFailed",
    "PreconditionRequired",
    "ProxyAuthenticationRequired",
    "RangeNotSatisfiable",
    "RequestHeaderFieldsTooLarge",
    "RequestTimeout",
    "ServiceUnavailable",
    "TooEarly",
    "TooManyRequests",
    "Unauthorized",
    "UnavailableForLegalReasons",
    "UnprocessableEntity",
    "UnsupportedMediaType",
    "UpgradeRequired",
    "UriTooLong",
    "VariantAlsoNegotiates",
    "STATUS_CLASSES",
    "as_http_error",
    "error_class_for_status",
    "from_status",
    "PROBLEM_MEDIA_TYPE",
    "ProblemDetails",
    "build_problem_details",
    "problem_headers",
]
