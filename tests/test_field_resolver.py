"""Tests for field resolution by schema type."""

import pytest

from pyqt_jsonform.forms.field_resolver import FieldKind, FieldResolver, resolve_field_kind


@pytest.mark.parametrize("schema_type, kind", [
    ("string", FieldKind.STRING),
    ("number", FieldKind.STRING),
    ("date-time", FieldKind.STRING),
    ("boolean", FieldKind.BOOLEAN),
    ("object", FieldKind.OBJECT),
    ("array", FieldKind.ARRAY),
])
def test_known_types(schema_type, kind):
    assert resolve_field_kind({"type": schema_type}) is kind


@pytest.mark.parametrize("schema", [
    {"type": "frobnicate"},
    {},
    {"type": ["string", "null"]},
    {"type": None},
])
def test_unknown_types_resolve_to_placeholder(schema):
    assert resolve_field_kind(schema) is FieldKind.UNSUPPORTED


class _Props:
    def __init__(self, schema):
        self.schema = schema


def test_resolver_requires_unsupported_handler():
    with pytest.raises(ValueError):
        FieldResolver({FieldKind.STRING: lambda props: "string"})


def test_resolver_dispatches_and_falls_back():
    resolver = FieldResolver({
        FieldKind.STRING: lambda props: "string",
        FieldKind.UNSUPPORTED: lambda props: "unsupported",
    })

    assert resolver.get_registered_strategies() == [FieldKind.STRING, FieldKind.UNSUPPORTED]
    assert resolver.create(_Props({"type": "string"})) == "string"
    # No OBJECT handler registered: placeholder instead of KeyError
    assert resolver.create(_Props({"type": "object"})) == "unsupported"
    assert resolver.create(_Props({"type": "frobnicate"})) == "unsupported"
    assert resolver.component_for({"type": "array"})(None) == "unsupported"


def test_shared_resolver_covers_every_kind():
    from pyqt_jsonform.forms.schema_fields import get_field_resolver

    assert set(get_field_resolver().get_registered_strategies()) == set(FieldKind)
