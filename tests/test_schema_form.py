"""Tests for the JsonSchemaForm widget."""

from pyqt_jsonform.forms.form_controller import FormStatus
from pyqt_jsonform.forms.schema_form import JsonSchemaForm
from pyqt_jsonform.protocols import FormGenConfig, set_form_config


SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {"name": {"type": "string", "title": "Name"}},
}


def _name_widget(form):
    return form.root_field.component.fields["name"].component.widget


def test_submit_invalid_document_calls_on_error(qapp):
    submitted, failed, signalled = [], [], []
    form = JsonSchemaForm(SCHEMA, on_submit=submitted.append, on_error=failed.append)
    form.failed.connect(signalled.append)

    form.submit_button.click()

    assert submitted == []
    assert len(failed) == 1 and failed[0]
    assert len(signalled) == 1
    assert form.state.status is FormStatus.INITIAL
    assert not form.error_list.isHidden()


def test_submit_valid_document_calls_on_submit(qapp):
    submitted, failed = [], []
    form = JsonSchemaForm(SCHEMA, on_submit=submitted.append, on_error=failed.append)

    _name_widget(form).setText("x")
    assert form.submit() is True

    assert failed == []
    assert len(submitted) == 1
    assert submitted[0].document == {"name": "x"}
    assert form.state.status is FormStatus.INITIAL
    assert form.error_list.isHidden()


def test_edit_mode_shows_initial_errors_until_next_edit(qapp):
    changes = []
    form = JsonSchemaForm(SCHEMA, document={"other": 1}, on_change=changes.append)

    assert form.state.edit
    assert not form.error_list.isHidden()
    assert any("name" in line for line in form.error_list.messages())

    _name_widget(form).setText("x")

    assert form.state.status is FormStatus.EDITING
    assert form.error_list.isHidden()
    assert changes[-1].document == {"other": 1, "name": "x"}


def test_valid_seed_has_no_errors(qapp):
    form = JsonSchemaForm(SCHEMA, document={"name": "x"})
    assert form.state.errors == ()
    assert form.error_list.isHidden()


def test_errors_hidden_while_editing(qapp):
    form = JsonSchemaForm(SCHEMA)
    form.submit()
    assert form.error_list.has_errors()

    _name_widget(form).setText("z")

    assert form.error_list.isHidden()


def test_changed_signal_carries_session_state(qapp):
    emitted = []
    form = JsonSchemaForm(SCHEMA)
    form.changed.connect(emitted.append)

    _name_widget(form).setText("y")

    assert emitted[-1].document == {"name": "y"}
    assert emitted[-1].status is FormStatus.EDITING


def test_submit_label_from_config(qapp):
    set_form_config(FormGenConfig(submit_label="Save"))
    form = JsonSchemaForm(SCHEMA)
    assert form.submit_button.text() == "Save"


def test_unsupported_root_schema_renders_placeholder(qapp):
    failed = []
    form = JsonSchemaForm({"type": "frobnicate"}, on_error=failed.append)

    assert form.root_field.component.label.text().startswith("Unsupported field schema")
    assert form.submit() is False
    assert failed
