"""
Composite field state engine.

Each composite field (object or array) owns one state object holding the
value of its own subtree. Mutations run in two explicit phases:

1. ``apply_*`` computes the new value from the current one without touching it
2. ``_commit`` stores the new value, then notifies the parent callback

The parent therefore always receives the post-merge value, and a grandchild
edit reaches the root only after every intermediate level has committed it.
New containers are built on every commit, so values already handed upward
are never mutated afterwards.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional, Tuple
import logging

from .schema_node import SchemaNode
from .schema_defaults import default_item, initial_value, is_item_required, is_property_required

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Any], None]


class CompositeFieldState(ABC):
    """
    Base for composite state holders.

    Subclasses define the seed container and their ``apply_*`` operations.
    """

    def __init__(self, schema: Any, document: Any = None,
                 on_change: Optional[ChangeCallback] = None):
        self.schema = SchemaNode.from_dict(schema)
        self._on_change = on_change
        self._value = self._initial_value(document)

    @abstractmethod
    def _initial_value(self, document: Any) -> Any:
        """Seed the local state from the document or the schema default."""
        pass

    @property
    def value(self) -> Any:
        """Current committed value of this subtree."""
        return self._value

    def _commit(self, new_value: Any) -> Any:
        self._value = new_value
        logger.debug(f"{type(self).__name__}: committed {type(new_value).__name__} of size {len(new_value)}")
        self._notify(new_value)
        return new_value

    def _notify(self, new_value: Any) -> None:
        if self._on_change is not None:
            self._on_change(new_value)


class ObjectFieldState(CompositeFieldState):
    """
    State of an ``object`` field: property name -> current value.

    Keys present in the document but absent from the schema are kept in the
    state and in every emitted value; they are just not rendered.
    """

    def __init__(self, schema: Any, document: Any = None,
                 on_change: Optional[ChangeCallback] = None,
                 required: Callable[[SchemaNode, str], bool] = is_property_required):
        self._required = required
        super().__init__(schema, document, on_change)

    def _initial_value(self, document: Any) -> dict:
        return initial_value(self.schema, document, dict, dict)

    def is_required(self, name: str) -> bool:
        return self._required(self.schema, name)

    def rendered_properties(self) -> Iterator[Tuple[str, SchemaNode]]:
        """Yield ``(name, subschema)`` pairs in declared order."""
        return iter(self.schema.properties.items())

    def child_value(self, name: str) -> Any:
        return self._value.get(name)

    def apply(self, name: str, value: Any) -> dict:
        """Return the state with ``name`` set to ``value``, all other keys kept."""
        merged = dict(self._value)
        merged[name] = value
        return merged

    def commit_child(self, name: str, value: Any) -> dict:
        """Merge a child's update, then notify the parent with the full mapping."""
        return self._commit(self.apply(name, value))


class ArrayFieldState(CompositeFieldState):
    """
    State of an ``array`` field: ordered item values.

    Indices are positional: removing index 2 of 5 moves the former index 3
    to index 2.
    """

    def __init__(self, schema: Any, document: Any = None,
                 on_change: Optional[ChangeCallback] = None,
                 default_factory: Callable[[Optional[SchemaNode]], Any] = default_item,
                 item_required: Callable[[Optional[SchemaNode]], bool] = is_item_required):
        self._default_factory = default_factory
        self._item_required = item_required
        super().__init__(schema, document, on_change)

    def _initial_value(self, document: Any) -> list:
        return initial_value(self.schema, document, list, list)

    @property
    def items_schema(self) -> SchemaNode:
        # A missing "items" yields an untyped node, which resolves to the placeholder
        return self.schema.items if self.schema.items is not None else SchemaNode()

    @property
    def item_required(self) -> bool:
        return self._item_required(self.schema.items)

    def item_title(self, fallback: str = "Item") -> str:
        items = self.items_schema
        return items.title or items.description or fallback

    def __len__(self) -> int:
        return len(self._value)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._value):
            raise IndexError(
                f"Array index {index} out of range for {len(self._value)} item(s)"
            )

    def apply_add(self) -> List[Any]:
        return self._value + [self._default_factory(self.schema.items)]

    def apply_remove(self, index: int) -> List[Any]:
        self._check_index(index)
        return self._value[:index] + self._value[index + 1:]

    def apply_update(self, index: int, value: Any) -> List[Any]:
        self._check_index(index)
        updated = list(self._value)
        updated[index] = value
        return updated

    def add(self) -> List[Any]:
        """Append a freshly synthesized default item."""
        return self._commit(self.apply_add())

    def remove(self, index: int) -> List[Any]:
        """Delete the item at ``index``, shifting later items down."""
        return self._commit(self.apply_remove(index))

    def update(self, index: int, value: Any) -> List[Any]:
        """Replace the item at ``index`` in place."""
        return self._commit(self.apply_update(index, value))
