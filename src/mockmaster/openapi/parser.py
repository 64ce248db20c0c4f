"""
MockMaster OpenAPI Parser

Parses OpenAPI 3 documents from YAML or JSON text into plain dicts.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..common.errors import OpenAPIParseError

logger = logging.getLogger(__name__)

OpenAPISpec = Dict[str, Any]


def _ensure_mapping(parsed: Any, fmt: str) -> OpenAPISpec:
    if not isinstance(parsed, dict):
        raise OpenAPIParseError(
            f"Failed to parse {fmt}: expected a mapping at the top level, got {type(parsed).__name__}"
        )
    return parsed


def parse_yaml(text: str) -> OpenAPISpec:
    """
    Parse a YAML OpenAPI document.

    Raises:
        OpenAPIParseError: If the YAML is invalid
    """
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise OpenAPIParseError(f"Failed to parse YAML: {e}") from e
    return _ensure_mapping(parsed, 'YAML')


def parse_json(text: str) -> OpenAPISpec:
    """
    Parse a JSON OpenAPI document.

    Raises:
        OpenAPIParseError: If the JSON is invalid
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise OpenAPIParseError(f"Failed to parse JSON: {e}") from e
    return _ensure_mapping(parsed, 'JSON')


def parse_spec(text: str) -> OpenAPISpec:
    """
    Parse an OpenAPI document, detecting JSON or YAML.

    Text starting with '{' or '[' (after whitespace) is treated as JSON,
    anything else as YAML.
    """
    trimmed = text.strip()
    if trimmed.startswith('{') or trimmed.startswith('['):
        return parse_json(text)
    return parse_yaml(text)


def load_spec(path: Union[str, Path]) -> OpenAPISpec:
    """
    Load and parse an OpenAPI document from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        OpenAPIParseError: If the content cannot be parsed
    """
    spec_path = Path(path)
    if not spec_path.exists():
        raise FileNotFoundError(f"OpenAPI spec not found: {spec_path}")

    with open(spec_path, 'r', encoding='utf-8') as f:
        content = f.read()

    spec = parse_spec(content)
    logger.debug(f"Loaded OpenAPI spec {spec_path} ({len(spec.get('paths') or {})} paths)")
    return spec
