"""
Schema-driven field components.

SchemaField resolves a subschema to its component through FieldResolver and
hosts it. Scalar fields delegate to a registered editing control; composite
fields own an ObjectFieldState/ArrayFieldState and recurse into SchemaField
for every child, wiring each child's change callback to a commit on their
own state. Updates therefore travel strictly upward, one level at a time.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional
import logging

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QPushButton

from pyqt_jsonform.protocols import get_form_config
from pyqt_jsonform.widgets import FieldFrame
from .field_resolver import FieldKind, FieldResolver, resolve_field_kind
from .field_state import ArrayFieldState, ObjectFieldState
from .schema_defaults import coerce_scalar_value
from .schema_node import SchemaNode, SchemaType
from .widget_dispatcher import WidgetDispatcher
from .widget_registry import get_widget_class

logger = logging.getLogger(__name__)


def _ignore_change(value: Any) -> None:
    pass


@dataclass
class FieldProps:
    """Downward inputs of a field: its schema, current value and parent callback."""
    schema: SchemaNode
    value: Any = None
    required: bool = False
    on_change: Callable[[Any], None] = _ignore_change
    name: Optional[str] = None


class BaseField(QWidget):
    """Common base of all field components."""

    def __init__(self, props: FieldProps, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.props = props
        self.schema = props.schema
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

    @property
    def value(self) -> Any:
        return self.props.value

    def _emit(self, value: Any) -> None:
        self.props.on_change(value)


class ScalarField(BaseField):
    """
    Field backed by a single editing control.

    A non-empty ``enum`` selects the closed-choice control; otherwise the
    subclass's free-form control is used.
    """

    free_widget_id = "text"

    def __init__(self, props: FieldProps, parent: Optional[QWidget] = None):
        super().__init__(props, parent)
        schema = self.schema

        if schema.has_choices:
            self.widget = get_widget_class("select")()
            WidgetDispatcher.set_options(self.widget, schema.enum)
            initial = coerce_scalar_value(props.value, schema)
            if initial not in schema.enum:
                initial = schema.default
        else:
            self.widget = get_widget_class(self._free_widget_id())()
            initial = coerce_scalar_value(props.value, schema)

        WidgetDispatcher.set_value(self.widget, initial)
        if schema.description:
            WidgetDispatcher.set_placeholder(self.widget, schema.description)

        # Connect after seeding so the initial value is not echoed upward
        WidgetDispatcher.connect_change_signal(self.widget, self._emit)

        self.frame = FieldFrame(self.widget, label=schema.title, required=props.required,
                                field_type=schema.type)
        self._layout.addWidget(self.frame)

    def _free_widget_id(self) -> str:
        return self.free_widget_id

    @property
    def value(self) -> Any:
        return WidgetDispatcher.get_value(self.widget)


class StringField(ScalarField):
    """Field for string, number and date-time schemas."""

    def _free_widget_id(self) -> str:
        if self.schema.schema_type is SchemaType.NUMBER:
            return "number"
        return "text"


class BooleanField(ScalarField):
    free_widget_id = "checkbox"


class UnsupportedField(BaseField):
    """
    Diagnostic placeholder for subschemas without a field component.

    Shows the serialized subschema so the malformed part of a schema can be
    located. The value passes through untouched.
    """

    def __init__(self, props: FieldProps, parent: Optional[QWidget] = None):
        super().__init__(props, parent)
        serialized = props.schema.to_json()
        logger.warning(f"Unsupported field schema {serialized}")
        self.label = QLabel(f"Unsupported field schema {serialized}.")
        self.label.setObjectName("unsupported-field")
        self.label.setWordWrap(True)
        self._layout.addWidget(self.label)


class ObjectField(BaseField):
    """
    Field for ``object`` schemas.

    Renders one SchemaField per declared property, in declared order, and
    merges their updates into its own ObjectFieldState.
    """

    def __init__(self, props: FieldProps, parent: Optional[QWidget] = None):
        super().__init__(props, parent)
        self.state = ObjectFieldState(props.schema, props.value, on_change=self._emit)

        self.group = QGroupBox(self.schema.title or get_form_config().default_object_title)
        self.group.setObjectName("field field-object")
        group_layout = QVBoxLayout(self.group)
        if self.schema.description:
            group_layout.addWidget(QLabel(self.schema.description))

        self.fields = {}
        for name, sub_schema in self.state.rendered_properties():
            child = SchemaField(
                sub_schema,
                value=self.state.child_value(name),
                required=self.state.is_required(name),
                on_change=self._child_callback(name),
                name=name,
            )
            self.fields[name] = child
            group_layout.addWidget(child)

        self._layout.addWidget(self.group)

    def _child_callback(self, name: str) -> Callable[[Any], None]:
        def on_child_change(value: Any) -> None:
            self.state.commit_child(name, value)
        return on_child_change

    @property
    def value(self) -> dict:
        return self.state.value


class ArrayField(BaseField):
    """
    Field for ``array`` schemas.

    Each item row pairs a SchemaField for the item with a removal button;
    the add button appends a synthesized default item. Rows are rebuilt
    after add/remove because indices are positional.
    """

    def __init__(self, props: FieldProps, parent: Optional[QWidget] = None):
        super().__init__(props, parent)
        config = get_form_config()
        self.state = ArrayFieldState(props.schema, props.value, on_change=self._emit)
        items_type = self.state.items_schema.type

        self.group = QGroupBox(self.schema.title or "")
        self.group.setObjectName(f"field field-array field-array-of-{items_type}")
        group_layout = QVBoxLayout(self.group)
        if self.schema.description:
            group_layout.addWidget(QLabel(self.schema.description))

        self._items_container = QWidget()
        self._items_container.setObjectName("array-item-list")
        self._items_layout = QVBoxLayout(self._items_container)
        self._items_layout.setContentsMargins(0, 0, 0, 0)
        group_layout.addWidget(self._items_container)

        self.add_button = QPushButton(config.add_item_label)
        self.add_button.setObjectName("array-item-add")
        self.add_button.setToolTip(f"Add {self.state.item_title(config.default_item_title)}")
        self.add_button.clicked.connect(lambda _checked=False: self.add_item())
        group_layout.addWidget(self.add_button)

        self._rows: List[QWidget] = []
        self._item_fields: List["SchemaField"] = []
        self._remove_buttons: List[QPushButton] = []
        self._rebuild_items()

        self._layout.addWidget(self.group)

    def _rebuild_items(self) -> None:
        for row in self._rows:
            # Row may own the remove button still delivering clicked()
            self._items_layout.removeWidget(row)
            row.hide()
            row.deleteLater()
        self._rows, self._item_fields, self._remove_buttons = [], [], []

        config = get_form_config()
        item_title = self.state.item_title(config.default_item_title)
        for index, item in enumerate(self.state.value):
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)

            item_field = SchemaField(
                self.state.items_schema,
                value=item,
                required=self.state.item_required,
                on_change=self._item_callback(index),
            )
            row_layout.addWidget(item_field, 1)

            remove_button = QPushButton(config.remove_item_label)
            remove_button.setObjectName("array-item-remove")
            remove_button.setToolTip(f"Remove {item_title}")
            remove_button.clicked.connect(lambda _checked=False, i=index: self.remove_item(i))
            row_layout.addWidget(remove_button)

            self._items_layout.addWidget(row)
            self._rows.append(row)
            self._item_fields.append(item_field)
            self._remove_buttons.append(remove_button)

    def _item_callback(self, index: int) -> Callable[[Any], None]:
        def on_item_change(value: Any) -> None:
            self.state.update(index, value)
        return on_item_change

    def add_item(self) -> None:
        self.state.add()
        self._rebuild_items()

    def remove_item(self, index: int) -> None:
        self.state.remove(index)
        self._rebuild_items()

    def item_fields(self) -> List["SchemaField"]:
        return list(self._item_fields)

    def remove_buttons(self) -> List[QPushButton]:
        return list(self._remove_buttons)

    @property
    def value(self) -> list:
        return self.state.value


_field_resolver: Optional[FieldResolver] = None


def get_field_resolver() -> FieldResolver:
    """Return the shared resolver mapping field kinds to components."""
    global _field_resolver
    if _field_resolver is None:
        _field_resolver = FieldResolver({
            FieldKind.STRING: StringField,
            FieldKind.BOOLEAN: BooleanField,
            FieldKind.OBJECT: ObjectField,
            FieldKind.ARRAY: ArrayField,
            FieldKind.UNSUPPORTED: UnsupportedField,
        })
    return _field_resolver


class SchemaField(QWidget):
    """
    Entry point of the recursion: resolves ``schema`` and hosts the component.

    Args:
        schema: SchemaNode or JSON Schema mapping for this value
        value: Current value of this subtree
        required: Whether the parent marks this field as required
        on_change: Parent callback receiving this subtree's updated value
        name: Property name when the field is an object member
    """

    def __init__(self, schema: Any, value: Any = None, required: bool = False,
                 on_change: Optional[Callable[[Any], None]] = None,
                 name: Optional[str] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        props = FieldProps(
            schema=SchemaNode.from_dict(schema),
            value=value,
            required=required,
            on_change=on_change or _ignore_change,
            name=name,
        )
        self.name = name
        self.kind = resolve_field_kind(props.schema)
        self.component = get_field_resolver().create(props)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.component)

    @property
    def value(self) -> Any:
        return self.component.value
