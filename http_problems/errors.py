"""HTTP error primitives with fixed status codes and problem-details fields."""
from __future__ import annotations

from dataclasses import KW_ONLY, dataclass, fields
from typing import Any, ClassVar, Sequence, Union


def copy_challenges(value: str | Sequence[str]) -> str | list[str]:
    if isinstance(value, str):
        return value
    return list(value)


def _as_tuple(value: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Challenge:
    """WWW-Authenticate challenges carried by a 401."""

    challenges: tuple[str, ...]

    @classmethod
    def of(cls, value: str | Sequence[str]) -> Challenge:
        return cls(_as_tuple(value))


@dataclass(frozen=True)
class ProxyChallenge:
    """Proxy-Authenticate challenges carried by a 407."""

    challenges: tuple[str, ...]

    @classmethod
    def of(cls, value: str | Sequence[str]) -> ProxyChallenge:
        return cls(_as_tuple(value))


@dataclass(frozen=True)
class AllowList:
    """Methods permitted on the target resource (405)."""

    methods: tuple[str, ...]


@dataclass(frozen=True)
class RetryAfter:
    """Advisory delay in seconds before the client retries."""

    seconds: int


Extra = Union[Challenge, ProxyChallenge, AllowList, RetryAfter, None]


@dataclass(eq=False)
class HttpError(Exception):
    """Base HTTP error.

    ``status`` and ``title`` are fixed by each subclass. ``detail``, ``type``
    and ``instance`` follow the problem details members of RFC 7807 and are
    supplied per occurrence. When no detail is given the message falls back to
    the title.

    Instances are read-only once constructed: assigning to ``status``,
    ``title`` or any constructor field raises ``AttributeError``.
    """

    status: ClassVar[int] = 500
    title: ClassVar[str] = "Internal Server Error"

    detail: str | None = None
    _: KW_ONLY
    type: str | None = None
    instance: str | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        object.__setattr__(self, "_sealed", True)

    @classmethod
    def _with_status(
        cls,
        status: int,
        title: str,
        detail: str | None = None,
        *,
        type: str | None = None,
        instance: str | None = None,
    ) -> HttpError:
        """Build an instance whose status and title differ from the class defaults."""
        error = cls(detail, type=type, instance=instance)
        object.__setattr__(error, "status", status)
        object.__setattr__(error, "title", title)
        error.args = (error.message,)
        return error

    def _is_fixed(self, name: str) -> bool:
        if not self.__dict__.get("_sealed"):
            return False
        return name in ("status", "title") or name in {f.name for f in fields(self)}

    def __setattr__(self, name: str, value: Any) -> None:
        if self._is_fixed(name):
            raise AttributeError(f"cannot assign to {self.__class__.__name__}.{name}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._is_fixed(name):
            raise AttributeError(f"cannot delete {self.__class__.__name__}.{name}")
        super().__delattr__(name)

    def __setstate__(self, state: dict[str, Any]) -> None:
        for name, value in state.items():
            object.__setattr__(self, name, value)

    @property
    def message(self) -> str:
        return self.detail or self.title

    @property
    def extra(self) -> Extra:
        """Status-specific payload, ``None`` for plain variants."""
        return None

    def __str__(self) -> str:
        return self.message


class ClientError(HttpError):
    """Base for 4xx errors: the request was at fault."""

    status = 400
    title = "Bad Request"


class ServerError(HttpError):
    """Base for 5xx errors: the server failed to fulfil a valid request."""

    status = 500
    title = "Internal Server Error"
