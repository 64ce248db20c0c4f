"""
MockMaster Recording Types

Recorded requests/responses and the scenarios that group them.

All types are frozen. A Scenario holds its recordings as a tuple, so
adding a recording always produces a new Scenario (see recorder.py).
Serialized keys use camelCase (createdAt, updatedAt, statusText) to stay
compatible with scenario files written by other MockMaster tools.
"""

from typing import Any, Dict, Optional, Tuple, Union
from dataclasses import dataclass, field

from ..common.errors import ScenarioFormatError
from ..core.types import Responder


def _require(data: Any, key: str, kind: str) -> Any:
    """Fetch a required key from serialized data."""
    if not isinstance(data, dict):
        raise ScenarioFormatError(f"{kind} must be a JSON object, got {type(data).__name__}")
    if key not in data:
        raise ScenarioFormatError(f"{kind} is missing required field '{key}'")
    return data[key]


def _optional_mapping(data: Dict[str, Any], key: str, kind: str) -> Optional[Dict[str, str]]:
    value = data.get(key)
    if value is not None and not isinstance(value, dict):
        raise ScenarioFormatError(f"{kind} field '{key}' must be an object")
    return value


@dataclass(frozen=True)
class RecordedRequest:
    """A captured HTTP request. `path` doubles as the route pattern on replay."""

    method: str
    path: str
    url: str = ''
    query: Optional[Dict[str, str]] = None
    headers: Optional[Dict[str, str]] = None
    body: Any = None
    timestamp: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {
            'method': self.method,
            'url': self.url,
            'path': self.path,
        }
        if self.query is not None:
            data['query'] = self.query
        if self.headers is not None:
            data['headers'] = self.headers
        if self.body is not None:
            data['body'] = self.body
        data['timestamp'] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RecordedRequest':
        """Create RecordedRequest from dictionary."""
        return cls(
            method=_require(data, 'method', 'Recorded request'),
            path=_require(data, 'path', 'Recorded request'),
            url=data.get('url', ''),
            query=_optional_mapping(data, 'query', 'Recorded request'),
            headers=_optional_mapping(data, 'headers', 'Recorded request'),
            body=data.get('body'),
            timestamp=data.get('timestamp', 0)
        )


@dataclass(frozen=True)
class RecordedResponse:
    """A captured HTTP response."""

    status: int
    status_text: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    body: Any = None
    timestamp: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {'status': self.status}
        if self.status_text is not None:
            data['statusText'] = self.status_text
        if self.headers is not None:
            data['headers'] = self.headers
        if self.body is not None:
            data['body'] = self.body
        data['timestamp'] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RecordedResponse':
        """Create RecordedResponse from dictionary."""
        status = _require(data, 'status', 'Recorded response')
        if isinstance(status, bool) or not isinstance(status, int):
            raise ScenarioFormatError(f"Recorded response status must be an integer, got {status!r}")

        return cls(
            status=status,
            status_text=data.get('statusText'),
            headers=_optional_mapping(data, 'headers', 'Recorded response'),
            body=data.get('body'),
            timestamp=data.get('timestamp', 0)
        )


@dataclass(frozen=True)
class Recording:
    """A request paired with the response to replay for it."""

    id: str
    request: RecordedRequest
    response: Union[RecordedResponse, Responder]

    @property
    def is_dynamic(self) -> bool:
        return isinstance(self.response, Responder)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Raises:
            TypeError: If the response is a Responder (functions cannot be persisted)
        """
        if isinstance(self.response, Responder):
            raise TypeError(f"Recording {self.id} has a dynamic response and cannot be serialized")

        return {
            'id': self.id,
            'request': self.request.to_dict(),
            'response': self.response.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Recording':
        """Create Recording from dictionary."""
        return cls(
            id=_require(data, 'id', 'Recording'),
            request=RecordedRequest.from_dict(_require(data, 'request', 'Recording')),
            response=RecordedResponse.from_dict(_require(data, 'response', 'Recording'))
        )


@dataclass(frozen=True)
class Scenario:
    """A named, ordered collection of recordings. Earlier recordings match first."""

    name: str
    description: Optional[str] = None
    recordings: Tuple[Recording, ...] = field(default_factory=tuple)
    created_at: int = 0
    updated_at: int = 0

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        if not isinstance(self.recordings, tuple):
            object.__setattr__(self, 'recordings', tuple(self.recordings))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {'name': self.name}
        if self.description is not None:
            data['description'] = self.description
        data['recordings'] = [r.to_dict() for r in self.recordings]
        data['createdAt'] = self.created_at
        data['updatedAt'] = self.updated_at
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Scenario':
        """Create Scenario from dictionary."""
        recordings = _require(data, 'recordings', 'Scenario')
        if not isinstance(recordings, list):
            raise ScenarioFormatError("Scenario field 'recordings' must be an array")

        return cls(
            name=_require(data, 'name', 'Scenario'),
            description=data.get('description'),
            recordings=tuple(Recording.from_dict(r) for r in recordings),
            created_at=data.get('createdAt', 0),
            updated_at=data.get('updatedAt', 0)
        )
