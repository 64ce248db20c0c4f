"""
MockMaster

Deterministic API mocking: record or generate HTTP request/response pairs,
store them as named scenarios, and replay them with route-pattern matching.
"""

from .core import (
    HttpMethod,
    MockRequest,
    MockResponse,
    Responder,
    Mock,
    MockRegistry,
    compile_pattern,
    match_path,
    extract_params,
    find_matching_mock,
    create_mock,
)
from .replay import (
    RecordedRequest,
    RecordedResponse,
    Recording,
    Scenario,
    IncomingRequest,
    ReplayResponse,
    create_recording,
    create_scenario,
    add_recording_to_scenario,
    create_replay_handler,
    serialize_scenario,
    deserialize_scenario,
    MockAdapter,
    AdapterConfig,
    AdapterMode,
)

__all__ = [
    'HttpMethod',
    'MockRequest',
    'MockResponse',
    'Responder',
    'Mock',
    'MockRegistry',
    'compile_pattern',
    'match_path',
    'extract_params',
    'find_matching_mock',
    'create_mock',
    'RecordedRequest',
    'RecordedResponse',
    'Recording',
    'Scenario',
    'IncomingRequest',
    'ReplayResponse',
    'create_recording',
    'create_scenario',
    'add_recording_to_scenario',
    'create_replay_handler',
    'serialize_scenario',
    'deserialize_scenario',
    'MockAdapter',
    'AdapterConfig',
    'AdapterMode',
]

__version__ = '1.0.0'
