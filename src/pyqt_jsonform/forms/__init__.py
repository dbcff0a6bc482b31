"""
Form generation and management.

Schema model, field resolution, composite state engine, form controller and
the Qt field components built on them.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schema_node import SchemaNode, SchemaType
    from .field_resolver import FieldKind, FieldResolver, resolve_field_kind
    from .field_state import ArrayFieldState, ObjectFieldState
    from .form_controller import FormController, FormSessionState, FormStatus
    from .schema_fields import SchemaField
    from .schema_form import JsonSchemaForm

_EXPORTS = {
    "SchemaNode": ("pyqt_jsonform.forms.schema_node", "SchemaNode"),
    "SchemaType": ("pyqt_jsonform.forms.schema_node", "SchemaType"),
    "default_item": ("pyqt_jsonform.forms.schema_defaults", "default_item"),
    "is_item_required": ("pyqt_jsonform.forms.schema_defaults", "is_item_required"),
    "is_property_required": ("pyqt_jsonform.forms.schema_defaults", "is_property_required"),
    "coerce_scalar_value": ("pyqt_jsonform.forms.schema_defaults", "coerce_scalar_value"),
    "FieldKind": ("pyqt_jsonform.forms.field_resolver", "FieldKind"),
    "FieldResolver": ("pyqt_jsonform.forms.field_resolver", "FieldResolver"),
    "resolve_field_kind": ("pyqt_jsonform.forms.field_resolver", "resolve_field_kind"),
    "ObjectFieldState": ("pyqt_jsonform.forms.field_state", "ObjectFieldState"),
    "ArrayFieldState": ("pyqt_jsonform.forms.field_state", "ArrayFieldState"),
    "FormController": ("pyqt_jsonform.forms.form_controller", "FormController"),
    "FormSessionState": ("pyqt_jsonform.forms.form_controller", "FormSessionState"),
    "FormStatus": ("pyqt_jsonform.forms.form_controller", "FormStatus"),
    "WidgetDispatcher": ("pyqt_jsonform.forms.widget_dispatcher", "WidgetDispatcher"),
    "get_widget_class": ("pyqt_jsonform.forms.widget_registry", "get_widget_class"),
    "register_widget": ("pyqt_jsonform.forms.widget_registry", "register_widget"),
    "SchemaField": ("pyqt_jsonform.forms.schema_fields", "SchemaField"),
    "StringField": ("pyqt_jsonform.forms.schema_fields", "StringField"),
    "BooleanField": ("pyqt_jsonform.forms.schema_fields", "BooleanField"),
    "ObjectField": ("pyqt_jsonform.forms.schema_fields", "ObjectField"),
    "ArrayField": ("pyqt_jsonform.forms.schema_fields", "ArrayField"),
    "UnsupportedField": ("pyqt_jsonform.forms.schema_fields", "UnsupportedField"),
    "JsonSchemaForm": ("pyqt_jsonform.forms.schema_form", "JsonSchemaForm"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
