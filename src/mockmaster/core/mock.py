"""
MockMaster Mock Registry

First-match lookup of mocks by HTTP method and route pattern.

Lookup is a stable linear scan: the first mock in iteration order whose
method and pattern both match wins. Mocks are never reordered by how
specific their pattern is.

Example:
    registry = MockRegistry()
    registry.add(create_mock('/users/:id', 'GET', MockResponse(status=200, body={'id': 1})))
    registry.add(create_mock('/users', 'POST', lambda req: MockResponse(status=201, body=req.body)))

    response = registry.resolve(MockRequest(method='get', path='/users/42'))
"""

import logging
import threading
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .ids import generate_id
from .match import match_path
from .types import Mock, MockRequest, MockResponse, Responder, ResponseSource

logger = logging.getLogger(__name__)


def match_method(expected: str, actual: str) -> bool:
    """
    Compare HTTP methods case-insensitively.

    Args:
        expected: Method the mock or recording was registered for
        actual: Method of the incoming request

    Returns:
        True if methods match
    """
    return str(expected).upper() == str(actual).upper()


def find_matching_mock(mocks: Iterable[Mock], request: Any) -> Optional[Mock]:
    """
    Find the first mock that matches a request.

    Args:
        mocks: Mocks to search, in priority order
        request: Object with `method` and `path` attributes

    Returns:
        The first matching mock, or None
    """
    for mock in mocks:
        if not match_method(mock.method, request.method):
            continue
        if match_path(mock.pattern, request.path):
            return mock
    return None


def create_mock(
    pattern: str,
    method: str,
    response: Union[ResponseSource, Callable[[MockRequest], MockResponse]],
    id: Optional[str] = None
) -> Mock:
    """
    Create a mock, wrapping plain callables as Responder.

    Args:
        pattern: Route pattern (e.g. '/users/:id')
        method: HTTP method
        response: Static MockResponse, Responder, or a callable request -> MockResponse
        id: Optional explicit ID (generated if omitted)

    Returns:
        New Mock
    """
    if not isinstance(response, (MockResponse, Responder)) and callable(response):
        response = Responder(response)

    return Mock(
        id=id or generate_id(),
        pattern=pattern,
        method=str(method).upper(),
        response=response
    )


def resolve_response(source: ResponseSource, request: Any) -> MockResponse:
    """Return a static response as-is, or invoke a responder with the request."""
    if isinstance(source, Responder):
        return source.respond(request)
    return source


class MockRegistry:
    """
    Ordered, in-place mock registry.

    Writers (add, remove, clear) serialize on a lock and replace the
    internal tuple; readers take a snapshot and scan it without locking.
    """

    def __init__(self, mocks: Optional[Iterable[Mock]] = None):
        """
        Initialize registry.

        Args:
            mocks: Optional initial mocks, in priority order
        """
        self._lock = threading.Lock()
        self._mocks: Tuple[Mock, ...] = tuple(mocks or ())

    def add(self, mock: Mock) -> Mock:
        """Append a mock at the lowest priority."""
        with self._lock:
            self._mocks = self._mocks + (mock,)
        logger.debug(f"Registered mock {mock.id}: {mock.method} {mock.pattern}")
        return mock

    def remove(self, mock_id: str) -> bool:
        """
        Remove a mock by ID.

        Returns:
            True if a mock was removed
        """
        with self._lock:
            remaining = tuple(m for m in self._mocks if m.id != mock_id)
            removed = len(remaining) != len(self._mocks)
            self._mocks = remaining
        return removed

    def clear(self) -> None:
        with self._lock:
            self._mocks = ()

    def snapshot(self) -> Tuple[Mock, ...]:
        """Immutable view of the current mocks."""
        return self._mocks

    def find(self, request: Any) -> Optional[Mock]:
        """Find the first mock matching a request."""
        mock = find_matching_mock(self.snapshot(), request)
        if mock is None:
            logger.debug(f"No mock for {request.method} {request.path}")
        return mock

    def resolve(self, request: Any) -> Optional[MockResponse]:
        """
        Find the matching mock and produce its response.

        Returns:
            MockResponse, or None when nothing matches
        """
        mock = self.find(request)
        if mock is None:
            return None
        return resolve_response(mock.response, request)

    def ids(self) -> List[str]:
        return [m.id for m in self._mocks]

    def __len__(self) -> int:
        return len(self._mocks)

    def __iter__(self) -> Iterator[Mock]:
        return iter(self.snapshot())
