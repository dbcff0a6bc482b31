"""
Immutable schema node model.

Wraps a JSON Schema mapping in a frozen dataclass so field components read
typed attributes instead of probing dictionaries. The original mapping is
kept on ``raw`` for validation and diagnostic output.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class SchemaType(Enum):
    """Schema ``type`` tags with a dedicated field component."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    DATE_TIME = "date-time"

    @classmethod
    def from_tag(cls, tag: Any) -> Optional["SchemaType"]:
        """Return the member for ``tag`` or None when it is not recognized."""
        for member in cls:
            if member.value == tag:
                return member
        return None


_EMPTY_PROPERTIES: Mapping[str, "SchemaNode"] = MappingProxyType({})


@dataclass(frozen=True)
class SchemaNode:
    """
    Description of one value's shape and constraints.

    Unrecognized ``type`` tags are kept as-is; the field resolver routes them
    to the diagnostic placeholder instead of rejecting the schema.
    """
    type: Optional[Any] = None
    title: Optional[str] = None
    description: Optional[str] = None
    default: Any = None
    enum: Optional[Tuple[Any, ...]] = None
    properties: Mapping[str, "SchemaNode"] = field(default_factory=lambda: _EMPTY_PROPERTIES)
    required: frozenset = frozenset()
    items: Optional["SchemaNode"] = None
    min_length: Optional[int] = None
    raw: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False, repr=False)

    @classmethod
    def from_dict(cls, schema: Any) -> "SchemaNode":
        """
        Build a node tree from a JSON Schema mapping.

        Args:
            schema: JSON Schema mapping, or an existing SchemaNode

        Returns:
            The root SchemaNode. Non-mapping input yields an untyped node.
        """
        if isinstance(schema, SchemaNode):
            return schema
        if not isinstance(schema, Mapping):
            return cls(raw=MappingProxyType({}))

        raw_properties = schema.get("properties")
        properties = _EMPTY_PROPERTIES
        if isinstance(raw_properties, Mapping):
            properties = MappingProxyType({
                name: cls.from_dict(sub_schema)
                for name, sub_schema in raw_properties.items()
            })

        raw_required = schema.get("required")
        required = frozenset(raw_required) if isinstance(raw_required, (list, tuple)) else frozenset()

        raw_enum = schema.get("enum")
        enum = tuple(raw_enum) if isinstance(raw_enum, (list, tuple)) else None

        raw_items = schema.get("items")
        items = cls.from_dict(raw_items) if isinstance(raw_items, Mapping) else None

        return cls(
            type=schema.get("type"),
            title=schema.get("title"),
            description=schema.get("description"),
            default=schema.get("default"),
            enum=enum,
            properties=properties,
            required=required,
            items=items,
            min_length=schema.get("minLength"),
            raw=schema,
        )

    @property
    def schema_type(self) -> Optional[SchemaType]:
        return SchemaType.from_tag(self.type)

    @property
    def has_choices(self) -> bool:
        """True when the node declares a non-empty ``enum``."""
        return bool(self.enum)

    def to_dict(self) -> dict:
        """Return the original mapping as a plain dict."""
        return dict(self.raw)

    def to_json(self) -> str:
        """Serialize the original mapping for diagnostic display."""
        return json.dumps(self.to_dict(), default=str, sort_keys=False)
