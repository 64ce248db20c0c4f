"""
MockMaster Persistence

JSON serialization of recordings and scenarios.

Malformed input fails here with ScenarioFormatError, before any data
reaches the replay engine.
"""

import json
from typing import Any

from ..common.errors import ScenarioFormatError
from .types import Recording, Scenario


def _loads(text: str, kind: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise ScenarioFormatError(f"Invalid {kind} JSON: {e}") from e


def serialize_recording(recording: Recording) -> str:
    """
    Serialize a recording to JSON.

    Raises:
        TypeError: If the recording has a dynamic response
    """
    return json.dumps(recording.to_dict(), indent=2)


def deserialize_recording(text: str) -> Recording:
    """
    Deserialize a recording from JSON.

    Raises:
        ScenarioFormatError: If the text is not JSON or not a recording
    """
    return Recording.from_dict(_loads(text, 'recording'))


def serialize_scenario(scenario: Scenario) -> str:
    """
    Serialize a scenario to JSON.

    Raises:
        TypeError: If any recording has a dynamic response
    """
    return json.dumps(scenario.to_dict(), indent=2)


def deserialize_scenario(text: str) -> Scenario:
    """
    Deserialize a scenario from JSON.

    Raises:
        ScenarioFormatError: If the text is not JSON or not a scenario
    """
    return Scenario.from_dict(_loads(text, 'scenario'))
