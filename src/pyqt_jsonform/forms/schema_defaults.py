"""
Default-derivation heuristics.

Pure functions taking a subschema and returning a value or a flag. Composite
state classes accept them as injectable callables so they can be swapped and
unit-tested without any widgets.
"""

import copy
import logging
from typing import Any, Optional

from .schema_node import SchemaNode, SchemaType

logger = logging.getLogger(__name__)

# Fresh values for a newly added array item, by item type
_TYPE_DEFAULTS = {
    SchemaType.STRING: lambda: "",
    SchemaType.ARRAY: list,
    SchemaType.BOOLEAN: lambda: False,
    SchemaType.OBJECT: dict,
}


def default_item(items_schema: Optional[SchemaNode]) -> Any:
    """
    Synthesize the value appended by an array's add operation.

    ``items.default`` wins when present (deep-copied so the schema is never
    shared with the document); otherwise the value depends on ``items.type``.
    Unknown types yield None.
    """
    if items_schema is None:
        return None
    if items_schema.default is not None:
        return copy.deepcopy(items_schema.default)
    factory = _TYPE_DEFAULTS.get(items_schema.schema_type)
    return factory() if factory is not None else None


def is_item_required(items_schema: Optional[SchemaNode]) -> bool:
    """
    Required-ness of array items.

    Only string items with a positive ``minLength`` count as required. Object
    properties use the explicit ``required`` list instead.
    """
    if items_schema is None or items_schema.schema_type is not SchemaType.STRING:
        return False
    min_length = items_schema.min_length
    return isinstance(min_length, (int, float)) and not isinstance(min_length, bool) and min_length > 0


def is_property_required(schema: SchemaNode, name: str) -> bool:
    """True iff ``name`` appears in the object schema's ``required`` list."""
    return name in schema.required


def initial_value(schema: SchemaNode, document: Any, expected: type, empty_factory) -> Any:
    """
    Seed a composite's local state.

    Uses ``document`` when it has the expected container type, else a copy of
    ``schema.default`` when that has the right type, else a new empty container.
    """
    if isinstance(document, expected):
        return copy.copy(document)
    if isinstance(schema.default, expected):
        return copy.deepcopy(schema.default)
    return empty_factory()


def _matches(value: Any, schema_type: Optional[SchemaType]) -> bool:
    if schema_type is SchemaType.BOOLEAN:
        return isinstance(value, bool)
    if schema_type is SchemaType.NUMBER:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, str)


def coerce_scalar_value(value: Any, schema: SchemaNode) -> Any:
    """
    Guard a scalar widget against type drift.

    A current value whose runtime type does not match the field's primitive
    is treated as absent and replaced with ``schema.default``.
    """
    if value is not None and _matches(value, schema.schema_type):
        return value
    if value is not None:
        logger.debug(
            f"Coercing {type(value).__name__} value for {schema.type!r} field to schema default"
        )
    return schema.default


def parse_number(text: str) -> Any:
    """
    Convert edited text into a number when it parses.

    Unparseable text is returned unchanged so the validator reports it; empty
    text becomes None.
    """
    stripped = text.strip()
    if stripped == "":
        return None
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        return text
