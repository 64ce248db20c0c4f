"""
MockMaster OpenAPI Module

Reading OpenAPI documents and generating sample data from their schemas.

This module provides:
- YAML/JSON parsing
- Internal $ref resolution
- Operation and schema extraction
- Schema-driven value generation
"""

from .parser import parse_yaml, parse_json, parse_spec, load_spec
from .refs import resolve_ref, resolve_all_refs
from .extract import (
    HTTP_METHODS,
    ExtractedOperation,
    extract_paths,
    extract_operations,
    get_all_operations,
    extract_schemas,
)
from .generate import generate_from_schema

__all__ = [
    # Parser
    'parse_yaml',
    'parse_json',
    'parse_spec',
    'load_spec',

    # Refs
    'resolve_ref',
    'resolve_all_refs',

    # Extraction
    'HTTP_METHODS',
    'ExtractedOperation',
    'extract_paths',
    'extract_operations',
    'get_all_operations',
    'extract_schemas',

    # Generation
    'generate_from_schema',
]
