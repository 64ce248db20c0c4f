"""
MockMaster Record/Replay Adapter

Glue between a test harness (whatever intercepts its HTTP traffic) and
a scenario:

- replay: answer requests from the scenario's recordings
- record: append observed request/response pairs to the scenario and persist them
- passthrough: do nothing; the caller forwards every request

Loading and saving are delegated to callbacks so the adapter does no I/O
itself.

Example:
    adapter = MockAdapter(AdapterConfig(
        mode=AdapterMode.REPLAY,
        scenario='checkout',
        load_recordings=lambda name: read_scenario('scenarios', name),
    ))
    response = adapter.handle(IncomingRequest(method='GET', path='/cart'))
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, Optional, Union
from dataclasses import dataclass, replace

from ..core.types import Responder
from .recorder import add_recording_to_scenario, create_recording, create_scenario
from .replay import ReplayResponse, create_replay_handler
from .types import RecordedRequest, RecordedResponse, Recording, Scenario

logger = logging.getLogger(__name__)


class AdapterMode(str, Enum):
    """Operating mode of a MockAdapter."""

    RECORD = 'record'
    REPLAY = 'replay'
    PASSTHROUGH = 'passthrough'


@dataclass
class AdapterConfig:
    """Configuration for MockAdapter behavior."""

    mode: AdapterMode = AdapterMode.REPLAY
    scenario: str = 'default'
    base_url: Optional[str] = None  # Fills in url for recorded requests that lack one

    # Callbacks
    persist_recordings: Optional[Callable[[Scenario], None]] = None
    load_recordings: Optional[Callable[[str], Optional[Scenario]]] = None
    request_matcher: Optional[Callable[[RecordedRequest], bool]] = None  # Record only requests it accepts


class MockAdapter:
    """
    Scenario-backed adapter for recording and replaying requests.

    The current scenario is replaced, never mutated, on every recording;
    replay handlers keep answering from the scenario they were built for.
    """

    def __init__(self, config: Optional[AdapterConfig] = None):
        """
        Initialize adapter.

        Args:
            config: Optional AdapterConfig (defaults to replay mode, scenario 'default')
        """
        self.config = config or AdapterConfig()
        self.config.mode = AdapterMode(self.config.mode)
        self._lock = threading.Lock()
        self._scenario: Optional[Scenario] = None
        self._handler = None

    @property
    def mode(self) -> AdapterMode:
        return self.config.mode

    @property
    def scenario(self) -> Scenario:
        """Current scenario, loaded on first access."""
        with self._lock:
            return self._current_scenario()

    def _current_scenario(self) -> Scenario:
        if self._scenario is None:
            loaded = None
            if self.config.load_recordings:
                loaded = self.config.load_recordings(self.config.scenario)

            if loaded is None:
                logger.debug(f"No stored recordings for '{self.config.scenario}', starting empty")
                loaded = create_scenario(self.config.scenario)
            else:
                logger.debug(f"Loaded scenario '{loaded.name}' with {len(loaded.recordings)} recordings")

            self._scenario = loaded
            self._handler = None
        return self._scenario

    def reload(self) -> None:
        """Drop the cached scenario so the next access loads it again."""
        with self._lock:
            self._scenario = None
            self._handler = None

    def handle(self, request: Any) -> Optional[ReplayResponse]:
        """
        Resolve a request.

        Args:
            request: Object with `method` and `path` attributes

        Returns:
            ReplayResponse in replay mode when a recording matches;
            None otherwise (the caller should pass the request through)
        """
        if self.mode != AdapterMode.REPLAY:
            return None

        with self._lock:
            scenario = self._current_scenario()
            if self._handler is None:
                self._handler = create_replay_handler(scenario)
            handler = self._handler

        return handler(request)

    def record(
        self,
        request: RecordedRequest,
        response: Union[RecordedResponse, Responder]
    ) -> Optional[Recording]:
        """
        Record an observed request/response pair.

        Args:
            request: The request sent to the real API
            response: The response it returned

        Returns:
            The new Recording, or None when not in record mode or the
            request was filtered out by `request_matcher`
        """
        if self.mode != AdapterMode.RECORD:
            return None

        if self.config.request_matcher and not self.config.request_matcher(request):
            logger.debug(f"Skipping {request.method} {request.path}: rejected by request_matcher")
            return None

        if not request.url and self.config.base_url:
            request = replace(request, url=f"{self.config.base_url.rstrip('/')}{request.path}")

        recording = create_recording(request, response)

        with self._lock:
            updated = add_recording_to_scenario(self._current_scenario(), recording)
            self._scenario = updated
            self._handler = None

            if self.config.persist_recordings:
                self.config.persist_recordings(updated)

        return recording
