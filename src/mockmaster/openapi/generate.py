"""
MockMaster Schema Data Generator

Produces sample values for OpenAPI schemas. Explicit `example` and
`default` values win; everything else is drawn from FakeData, so seeding
the generator makes the output reproducible.
"""

import math
from typing import Any, Dict, List, Optional

from ..data.fakes import FakeData, fake as default_fake

Schema = Dict[str, Any]

NULLABLE_PROBABILITY = 0.2
MIN_ARRAY_ITEMS = 2
MAX_ARRAY_ITEMS = 3


def generate_from_schema(schema: Schema, fake: Optional[FakeData] = None) -> Any:
    """
    Generate a value matching a (ref-resolved) schema.

    Args:
        schema: OpenAPI schema object
        fake: FakeData instance to draw values from (shared default if omitted)

    Returns:
        Generated value
    """
    fake = fake or default_fake

    if 'example' in schema:
        return schema['example']

    if 'default' in schema:
        return schema['default']

    enum = schema.get('enum')
    if enum:
        return fake.choice(enum)

    if schema.get('nullable') and fake.chance(NULLABLE_PROBABILITY):
        return None

    schema_type = schema.get('type')

    if schema_type == 'string':
        return _generate_string(schema, fake)
    elif schema_type == 'integer':
        low, high = _int_bounds(schema)
        return fake.number(min=low, max=high)
    elif schema_type == 'number':
        low, high = _bounds(schema)
        return fake.floating(min=low, max=high)
    elif schema_type == 'boolean':
        return fake.boolean()
    elif schema_type == 'array':
        return _generate_array(schema, fake)
    elif schema_type == 'object':
        return _generate_object(schema, fake)

    # Untyped schema: object if it has properties
    if schema.get('properties'):
        return _generate_object(schema, fake)
    return {}


def _bounds(schema: Schema):
    """Numeric range from minimum/maximum, 100 wide when open-ended."""
    low = schema.get('minimum')
    high = schema.get('maximum')

    if low is None and high is None:
        low = 0
    if low is None:
        low = high - 100
    if high is None:
        high = low + 100
    return low, high


def _int_bounds(schema: Schema):
    """Integer range inside minimum/maximum; collapses to one value if no integer fits."""
    low, high = _bounds(schema)
    low, high = math.ceil(low), math.floor(high)
    return low, max(low, high)


def _generate_string(schema: Schema, fake: FakeData) -> str:
    """Generate a string value based on format."""
    fmt = schema.get('format')

    if fmt == 'email':
        return fake.email()
    elif fmt == 'uuid':
        return fake.uuid()
    elif fmt == 'date-time':
        return fake.iso_datetime()
    elif fmt == 'date':
        return fake.date.past().date().isoformat()
    elif fmt in ('uri', 'url'):
        return fake.internet.url()

    return fake.word()


def _generate_array(schema: Schema, fake: FakeData) -> List[Any]:
    items = schema.get('items')
    if not items:
        return []

    count = fake.number(min=MIN_ARRAY_ITEMS, max=MAX_ARRAY_ITEMS)
    return [generate_from_schema(items, fake) for _ in range(count)]


def _generate_object(schema: Schema, fake: FakeData) -> Dict[str, Any]:
    # All properties are generated, required or not
    properties = schema.get('properties') or {}
    return {
        key: generate_from_schema(prop, fake)
        for key, prop in properties.items()
    }
