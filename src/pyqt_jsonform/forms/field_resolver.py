"""
Field resolution by schema type.

Maps a subschema's ``type`` tag to the component kind responsible for it
through an explicit table. Anything the table does not know, including a
missing type, resolves to ``FieldKind.UNSUPPORTED``.
"""

from enum import Enum
from typing import Any, Callable, Dict, Mapping
import logging

from pyqt_jsonform.services import EnumDispatchService
from .schema_node import SchemaNode, SchemaType

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    """Component kinds a subschema can resolve to."""
    STRING = "string_field"
    BOOLEAN = "boolean_field"
    OBJECT = "object_field"
    ARRAY = "array_field"
    UNSUPPORTED = "unsupported_field"


# Type tag -> component kind. Numbers and date-times are edited as text.
FIELD_KINDS: Mapping[SchemaType, FieldKind] = {
    SchemaType.STRING: FieldKind.STRING,
    SchemaType.ARRAY: FieldKind.ARRAY,
    SchemaType.BOOLEAN: FieldKind.BOOLEAN,
    SchemaType.OBJECT: FieldKind.OBJECT,
    SchemaType.DATE_TIME: FieldKind.STRING,
    SchemaType.NUMBER: FieldKind.STRING,
}


def resolve_field_kind(schema: Any) -> FieldKind:
    """
    Resolve a subschema to its component kind. Never raises.

    Args:
        schema: SchemaNode or JSON Schema mapping

    Returns:
        The FieldKind for ``schema.type``, FieldKind.UNSUPPORTED otherwise
    """
    node = SchemaNode.from_dict(schema)
    schema_type = node.schema_type
    if schema_type is None:
        logger.debug(f"No field component for type {node.type!r}")
        return FieldKind.UNSUPPORTED
    return FIELD_KINDS[schema_type]


class FieldResolver(EnumDispatchService[FieldKind]):
    """
    Dispatches field props to the component factory for their schema.

    The handler table must cover ``FieldKind.UNSUPPORTED``; it doubles as the
    fallback for kinds without a registered component.

    Example:
        resolver = FieldResolver({
            FieldKind.STRING: StringField,
            FieldKind.UNSUPPORTED: UnsupportedField,
        })
        widget = resolver.create(props)
    """

    def __init__(self, components: Dict[FieldKind, Callable[..., Any]]):
        super().__init__(fallback=FieldKind.UNSUPPORTED)
        self._register_handlers(components)

    def _determine_strategy(self, props, **kwargs) -> FieldKind:
        return resolve_field_kind(props.schema)

    def create(self, props, **kwargs) -> Any:
        """Build the component for ``props.schema``."""
        return self.dispatch(props, **kwargs)

    def component_for(self, schema: Any) -> Callable[..., Any]:
        """Return the component factory ``schema`` resolves to."""
        kind = resolve_field_kind(schema)
        if not self.has_strategy(kind):
            kind = FieldKind.UNSUPPORTED
        return self._handlers[kind]
