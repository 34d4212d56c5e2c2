"""RFC 7807 Problem Details helpers."""
from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .config import get_settings
from .errors import AllowList, Challenge, ProxyChallenge, RetryAfter
from .predicates import is_http_problem

PROBLEM_MEDIA_TYPE = "application/problem+json"
DEFAULT_PROBLEM_TYPE = "about:blank"

_SLUG_RE = re.compile(r"[^a-z0-9]+")


class ProblemDetails(BaseModel):
    """Problem details members of an HTTP error."""

    type: str = DEFAULT_PROBLEM_TYPE
    title: str
    status: int
    detail: Optional[str] = None
    instance: Optional[str] = None
    model_config = ConfigDict(frozen=True)


def problem_type_slug(title: str) -> str:
    return _SLUG_RE.sub("-", title.lower()).strip("-")


def _problem_type(error: object, title: str) -> str:
    explicit = getattr(error, "type", None)
    if isinstance(explicit, str) and explicit:
        return explicit
    base_uri = get_settings().type_base_uri
    if base_uri:
        return f"{base_uri}/{problem_type_slug(title)}"
    return DEFAULT_PROBLEM_TYPE


def build_problem_details(error: object) -> ProblemDetails:
    """Describe an HTTP problem as RFC 7807 members.

    Accepts any value with an integer ``status`` and a string ``title``. Use
    ``model_dump(exclude_none=True)`` for a payload without unset members.
    """
    if not is_http_problem(error):
        raise TypeError(f"{error.__class__.__name__} is not an HTTP problem")

    title: str = error.title  # type: ignore[attr-defined]
    detail = getattr(error, "detail", None)
    instance = getattr(error, "instance", None)
    return ProblemDetails(
        type=_problem_type(error, title),
        title=title,
        status=error.status,  # type: ignore[attr-defined]
        detail=detail if isinstance(detail, str) else None,
        instance=instance if isinstance(instance, str) else None,
    )


def problem_headers(error: object) -> dict[str, str]:
    """Response headers implied by the error's status-specific payload."""
    extra = getattr(error, "extra", None)
    if isinstance(extra, Challenge):
        return {"WWW-Authenticate": ", ".join(extra.challenges)}
    if isinstance(extra, ProxyChallenge):
        return {"Proxy-Authenticate": ", ".join(extra.challenges)}
    if isinstance(extra, AllowList):
        return {"Allow": ", ".join(extra.methods)}
    if isinstance(extra, RetryAfter):
        return {"Retry-After": str(extra.seconds)}
    return {}
