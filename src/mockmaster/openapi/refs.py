"""
MockMaster $ref Resolution

Resolves internal JSON-pointer references ('#/components/schemas/User')
inside OpenAPI documents.
"""

from typing import Any, Dict, FrozenSet, Optional

Schema = Dict[str, Any]

CIRCULAR_MARKER: Schema = {'type': 'object', 'description': '[Circular Reference]'}


def resolve_ref(spec: Dict[str, Any], ref: str) -> Optional[Any]:
    """
    Resolve a $ref string against the document.

    Only internal references ('#/...') are supported.

    Args:
        spec: OpenAPI document
        ref: Reference (e.g. '#/components/schemas/User')

    Returns:
        Referenced object, or None if it cannot be found
    """
    if not ref.startswith('#/'):
        return None

    current: Any = spec
    for segment in ref[2:].split('/'):
        # JSON pointer escapes
        segment = segment.replace('~1', '/').replace('~0', '~')
        if not isinstance(current, dict) or segment not in current:
            return None
        current = current[segment]

    return current


def resolve_all_refs(
    spec: Dict[str, Any],
    schema: Schema,
    visited: FrozenSet[str] = frozenset()
) -> Schema:
    """
    Recursively replace $refs in a schema with their targets.

    The input schema is not modified. A reference that loops back to one
    already being resolved becomes a '[Circular Reference]' object schema.

    Args:
        spec: OpenAPI document
        schema: Schema to resolve
        visited: References on the current resolution path

    Returns:
        New schema with refs resolved
    """
    ref = schema.get('$ref')
    if ref:
        if ref in visited:
            return dict(CIRCULAR_MARKER)

        resolved = resolve_ref(spec, ref)
        if isinstance(resolved, dict):
            return resolve_all_refs(spec, resolved, visited | {ref})

        # Unresolvable: keep as-is
        return schema

    result = dict(schema)

    if isinstance(schema.get('properties'), dict):
        result['properties'] = {
            key: resolve_all_refs(spec, prop, visited)
            for key, prop in schema['properties'].items()
        }

    if isinstance(schema.get('items'), dict):
        result['items'] = resolve_all_refs(spec, schema['items'], visited)

    for combinator in ('allOf', 'oneOf', 'anyOf'):
        if isinstance(schema.get(combinator), list):
            result[combinator] = [resolve_all_refs(spec, s, visited) for s in schema[combinator]]

    return result
