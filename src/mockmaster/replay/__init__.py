"""
MockMaster Replay Module

Recording, persistence and replay of HTTP request/response pairs.

This module provides:
- Recording and scenario types
- Immutable scenario mutators
- Replay handler over a scenario
- JSON persistence
- Record/replay adapter
"""

from .types import RecordedRequest, RecordedResponse, Recording, Scenario
from .recorder import (
    create_recording,
    create_scenario,
    add_recording_to_scenario,
    find_matching_recording,
)
from .persist import (
    serialize_recording,
    deserialize_recording,
    serialize_scenario,
    deserialize_scenario,
)
from .replay import (
    IncomingRequest,
    ReplayResponse,
    match_request,
    find_replay_recording,
    create_replay_handler,
)
from .adapter import AdapterMode, AdapterConfig, MockAdapter

__all__ = [
    # Types
    'RecordedRequest',
    'RecordedResponse',
    'Recording',
    'Scenario',

    # Recorder
    'create_recording',
    'create_scenario',
    'add_recording_to_scenario',
    'find_matching_recording',

    # Persistence
    'serialize_recording',
    'deserialize_recording',
    'serialize_scenario',
    'deserialize_scenario',

    # Replay
    'IncomingRequest',
    'ReplayResponse',
    'match_request',
    'find_replay_recording',
    'create_replay_handler',

    # Adapter
    'AdapterMode',
    'AdapterConfig',
    'MockAdapter',
]
