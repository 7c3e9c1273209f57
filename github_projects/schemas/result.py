"""
Two-variant call results.

Every project operation returns ``Ok(value)`` or ``Err(reason)``; none of them
raise for per-call failures. ``reason`` is one of:

- a ``str`` describing an invalid add/update payload (no request was sent)
- a ``RemoteError`` carrying the HTTP status and the decoded body, untouched
- the ``httpx.RequestError`` raised while sending or reading (timeout, refused,
  DNS, undecodable content encoding, too many redirects)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    reason: Any

    @property
    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class RemoteError:
    status: int
    body: Any


@dataclass(frozen=True)
class RawResponse:
    """Undecoded success value of the project and field endpoints."""

    status: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)


Result = Union[Ok[T], Err]
