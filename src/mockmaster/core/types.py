"""
MockMaster Core Types

Request, response and mock definitions used by the matching engine.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional, Union
from dataclasses import dataclass


class HttpMethod(str, Enum):
    """HTTP verbs understood by the mock registry."""

    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'
    PATCH = 'PATCH'
    HEAD = 'HEAD'
    OPTIONS = 'OPTIONS'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MockRequest:
    """An incoming request as seen by the mock registry."""

    method: str
    path: str
    query: Optional[Dict[str, str]] = None
    headers: Optional[Dict[str, str]] = None
    body: Any = None


@dataclass(frozen=True)
class MockResponse:
    """A static mock response. `delay` is the reply delay in milliseconds."""

    status: int
    headers: Optional[Dict[str, str]] = None
    body: Any = None
    delay: Optional[int] = None


@dataclass(frozen=True)
class Responder:
    """
    Dynamic response: a function of the request, evaluated at match time.

    Wrapping the callable keeps static and dynamic responses distinguishable
    without calling anything. Responders are never serialized.

    The function must return a response object with a `status` attribute
    (MockResponse or RecordedResponse), not a plain dict.
    """

    func: Callable[[Any], Any]

    def respond(self, request: Any) -> Any:
        """Invoke the wrapped function with the incoming request."""
        return self.func(request)


ResponseSource = Union[MockResponse, Responder]


@dataclass(frozen=True)
class Mock:
    """A registry entry: route pattern + method + response source."""

    id: str
    pattern: str
    method: str
    response: ResponseSource

    @property
    def is_dynamic(self) -> bool:
        return isinstance(self.response, Responder)
