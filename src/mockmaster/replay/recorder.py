"""
MockMaster Recorder

Construction and append operations for recordings and scenarios.

Every function returns a new value; scenarios passed in are never modified.
"""

import logging
from typing import Any, Optional, Union

from ..core.ids import generate_id, now_ms
from ..core.mock import match_method
from ..core.types import Responder
from .types import RecordedRequest, RecordedResponse, Recording, Scenario

logger = logging.getLogger(__name__)


def create_recording(
    request: RecordedRequest,
    response: Union[RecordedResponse, Responder]
) -> Recording:
    """
    Create a recording with a fresh unique ID.

    Args:
        request: The recorded request
        response: The recorded response, or a Responder evaluated on replay

    Returns:
        New Recording
    """
    return Recording(id=generate_id(), request=request, response=response)


def create_scenario(name: str, description: Optional[str] = None) -> Scenario:
    """
    Create an empty scenario.

    Args:
        name: Scenario name (unique within a store)
        description: Optional description

    Returns:
        New Scenario with no recordings
    """
    now = now_ms()
    return Scenario(
        name=name,
        description=description,
        recordings=(),
        created_at=now,
        updated_at=now
    )


def add_recording_to_scenario(scenario: Scenario, recording: Recording) -> Scenario:
    """
    Append a recording to a scenario.

    Args:
        scenario: Scenario to add to (left unchanged)
        recording: Recording to append

    Returns:
        New Scenario with the recording last and updated_at refreshed
    """
    updated = Scenario(
        name=scenario.name,
        description=scenario.description,
        recordings=scenario.recordings + (recording,),
        created_at=scenario.created_at,
        updated_at=max(now_ms(), scenario.updated_at)
    )
    logger.debug(
        f"Added recording {recording.id} ({recording.request.method} {recording.request.path}) "
        f"to scenario '{scenario.name}' ({len(updated.recordings)} recordings)"
    )
    return updated


def find_matching_recording(scenario: Scenario, request: Any) -> Optional[Recording]:
    """
    Find a recording made for exactly this method and path.

    Unlike replay, the recorded path is compared literally rather than as
    a pattern. Used to spot duplicates while recording.

    Args:
        scenario: Scenario to search
        request: Object with `method` and `path` attributes

    Returns:
        The first matching recording, or None
    """
    for recording in scenario.recordings:
        if match_method(recording.request.method, request.method) and recording.request.path == request.path:
            return recording
    return None
