"""
MockMaster Core

Route pattern compilation, path matching and first-match mock lookup.

This module provides:
- Pattern compiler (literal, ':param' and '*' segments)
- Path matcher with parameter extraction
- Mock types and an ordered mock registry
"""

from .types import HttpMethod, MockRequest, MockResponse, Responder, ResponseSource, Mock
from .match import (
    CompiledPattern,
    Segment,
    compile_pattern,
    classify_segments,
    match_path,
    extract_params,
    parse_path_params,
)
from .mock import match_method, find_matching_mock, create_mock, resolve_response, MockRegistry
from .ids import generate_id

__all__ = [
    # Types
    'HttpMethod',
    'MockRequest',
    'MockResponse',
    'Responder',
    'ResponseSource',
    'Mock',

    # Matching
    'CompiledPattern',
    'Segment',
    'compile_pattern',
    'classify_segments',
    'match_path',
    'extract_params',
    'parse_path_params',

    # Registry
    'match_method',
    'find_matching_mock',
    'create_mock',
    'resolve_response',
    'MockRegistry',
    'generate_id',
]
