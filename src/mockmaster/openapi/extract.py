"""
MockMaster OpenAPI Extraction

Walks an OpenAPI document and lists its operations and component schemas.
"""

from typing import Any, Dict, List
from dataclasses import dataclass

# Order operations are emitted in for each path
HTTP_METHODS = ('get', 'post', 'put', 'delete', 'patch', 'options', 'head')


@dataclass(frozen=True)
class ExtractedOperation:
    """An operation with the path and method it is declared under."""

    path: str
    method: str
    operation: Dict[str, Any]


def extract_paths(spec: Dict[str, Any]) -> Dict[str, Any]:
    return spec.get('paths') or {}


def extract_operations(path: str, path_item: Dict[str, Any]) -> List[ExtractedOperation]:
    """
    List the operations of one path item.

    Args:
        path: Path string (e.g. '/users/{id}')
        path_item: Path item object

    Returns:
        Operations in HTTP_METHODS order
    """
    return [
        ExtractedOperation(path=path, method=method, operation=path_item[method])
        for method in HTTP_METHODS
        if path_item.get(method)
    ]


def get_all_operations(spec: Dict[str, Any]) -> List[ExtractedOperation]:
    """List every operation in the document, paths in document order."""
    operations: List[ExtractedOperation] = []
    for path, path_item in extract_paths(spec).items():
        if isinstance(path_item, dict):
            operations.extend(extract_operations(path, path_item))
    return operations


def extract_schemas(spec: Dict[str, Any]) -> Dict[str, Any]:
    """Component schemas by name ({} when the document has none)."""
    components = spec.get('components') or {}
    return components.get('schemas') or {}
