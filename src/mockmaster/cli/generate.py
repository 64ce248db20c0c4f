"""
MockMaster Scenario Generation

Builds replayable scenarios from OpenAPI documents: one recording per
operation, answering with generated sample data.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from ..core.ids import now_ms
from ..data.fakes import FakeData
from ..openapi.extract import get_all_operations
from ..openapi.generate import generate_from_schema
from ..openapi.refs import resolve_all_refs
from ..replay.recorder import add_recording_to_scenario, create_recording, create_scenario
from ..replay.types import RecordedRequest, RecordedResponse, Scenario

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.example.com'
JSON_CONTENT_TYPE = 'application/json'

_OPENAPI_PARAM = re.compile(r'\{([^}]+)\}')


def convert_path_format(openapi_path: str) -> str:
    """
    Convert OpenAPI path parameters to route pattern syntax.

    Example:
        convert_path_format('/users/{id}')  # '/users/:id'
    """
    return _OPENAPI_PARAM.sub(r':\1', openapi_path)


def _first_success_response(responses: Dict[str, Any]) -> Optional[Tuple[int, Dict[str, Any]]]:
    """First 2xx response in document order, as (status, response object)."""
    for status_code, response in responses.items():
        try:
            status = int(status_code)
        except (TypeError, ValueError):
            # 'default', '2XX', ...
            continue
        if 200 <= status < 300:
            return status, response or {}
    return None


def _describe(spec: Dict[str, Any]) -> str:
    info = spec.get('info') or {}
    description = f"Generated from {info.get('title', 'API')} ({info.get('version', 'unknown')})"
    if info.get('description'):
        description += f": {info['description']}"
    return description


def _base_url(spec: Dict[str, Any]) -> str:
    servers = spec.get('servers') or []
    if servers and isinstance(servers[0], dict) and servers[0].get('url'):
        return servers[0]['url']
    return DEFAULT_BASE_URL


def generate_scenarios_from_spec(
    spec: Dict[str, Any],
    scenario_name: str,
    fake: Optional[FakeData] = None,
    base_url: Optional[str] = None
) -> List[Scenario]:
    """
    Generate scenarios from an OpenAPI document.

    Operations without a 2xx response are skipped. Responses with a JSON
    schema get a generated body and a JSON Content-Type; responses without
    content get a None body and no headers.

    Args:
        spec: Parsed OpenAPI document
        scenario_name: Name of the generated scenario
        fake: FakeData instance (seed it for reproducible bodies)
        base_url: Base URL for recorded request URLs (default: first server in the document)

    Returns:
        List with a single scenario holding one recording per operation
    """
    base_url = base_url or _base_url(spec)
    scenario = create_scenario(scenario_name, _describe(spec))

    for op in get_all_operations(spec):
        success = _first_success_response(op.operation.get('responses') or {})
        if success is None:
            logger.debug(f"Skipping {op.method.upper()} {op.path}: no 2xx response")
            continue

        status, response_obj = success
        content = (response_obj.get('content') or {}).get(JSON_CONTENT_TYPE) or {}

        body = None
        headers: Dict[str, str] = {}
        if content.get('schema'):
            resolved = resolve_all_refs(spec, content['schema'])
            body = generate_from_schema(resolved, fake)
            headers = {'Content-Type': JSON_CONTENT_TYPE}

        request = RecordedRequest(
            method=op.method.upper(),
            url=f"{base_url}{op.path}",
            path=convert_path_format(op.path),
            timestamp=now_ms()
        )
        response = RecordedResponse(
            status=status,
            headers=headers,
            body=body,
            timestamp=now_ms()
        )

        scenario = add_recording_to_scenario(scenario, create_recording(request, response))

    logger.info(f"Generated scenario '{scenario_name}' with {len(scenario.recordings)} recordings")
    return [scenario]
