"""
MockMaster Replay Resolver

Binds incoming requests to a scenario's recordings.

Recorded request paths are treated as route patterns, so a recording made
for '/users/:id' answers '/users/1', '/users/2', ... Only method and path
take part in matching; query, headers and body are ignored.

Methods are compared case-insensitively, the same way the mock registry
compares them ('get' replays a recording made for 'GET').

Example:
    handler = create_replay_handler(scenario)
    response = handler(IncomingRequest(method='GET', path='/users/42'))
    if response is None:
        ...  # fall back: pass through, 404, ...
"""

import logging
from typing import Any, Callable, Dict, Optional
from dataclasses import dataclass

from ..core.match import match_path
from ..core.mock import match_method
from ..core.types import Responder
from .types import RecordedRequest, Recording, Scenario

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncomingRequest:
    """
    A request to resolve against a scenario.

    method and path are required; the remaining fields are carried for
    responders but never inspected for matching.
    """

    method: str
    path: str
    query: Optional[Dict[str, str]] = None
    headers: Optional[Dict[str, str]] = None
    body: Any = None


@dataclass(frozen=True)
class ReplayResponse:
    """Response view produced by a replay handler."""

    status: int
    body: Any = None
    status_text: Optional[str] = None
    headers: Optional[Dict[str, str]] = None

    @classmethod
    def from_response(cls, response: Any) -> 'ReplayResponse':
        """
        Build a response view from any response-shaped object.

        Accepts RecordedResponse, MockResponse or ReplayResponse values.

        Raises:
            TypeError: If the object has no `status` attribute (e.g. a
                responder returned a plain dict)
        """
        if not hasattr(response, 'status'):
            raise TypeError(
                f"Expected a response object with a 'status' attribute, got {type(response).__name__}"
            )
        return cls(
            status=response.status,
            body=getattr(response, 'body', None),
            status_text=getattr(response, 'status_text', None),
            headers=getattr(response, 'headers', None)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting absent optional fields."""
        data: Dict[str, Any] = {'status': self.status, 'body': self.body}
        if self.status_text is not None:
            data['statusText'] = self.status_text
        if self.headers is not None:
            data['headers'] = self.headers
        return data


ReplayHandler = Callable[[Any], Optional[ReplayResponse]]


def match_request(recorded: RecordedRequest, incoming: Any) -> bool:
    """
    Check if an incoming request matches a recorded one.

    Args:
        recorded: The recorded request (its path is used as the pattern)
        incoming: Object with `method` and `path` attributes

    Returns:
        True if both method and path match
    """
    return match_method(recorded.method, incoming.method) and match_path(recorded.path, incoming.path)


def find_replay_recording(scenario: Scenario, request: Any) -> Optional[Recording]:
    """Return the first recording (insertion order) that matches the request."""
    for recording in scenario.recordings:
        if match_request(recording.request, request):
            return recording
    return None


def create_replay_handler(scenario: Scenario) -> ReplayHandler:
    """
    Create a replay handler for a scenario.

    The handler holds no state of its own: the same request against the
    same scenario always resolves to the same recording. Dynamic responses
    are evaluated on each call, with the incoming request.

    Args:
        scenario: Scenario containing the recordings

    Returns:
        Function taking a request and returning a ReplayResponse or None
    """
    def handle(request: Any) -> Optional[ReplayResponse]:
        recording = find_replay_recording(scenario, request)

        if recording is None:
            logger.debug(f"Replay miss in '{scenario.name}': {request.method} {request.path}")
            return None

        logger.debug(
            f"Replay hit in '{scenario.name}': {request.method} {request.path} "
            f"-> recording {recording.id} ({recording.request.path})"
        )

        response = recording.response
        if isinstance(response, Responder):
            response = response.respond(request)

        return ReplayResponse.from_response(response)

    return handle
