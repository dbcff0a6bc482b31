"""Tests for editing controls, adapters and the error list."""

import pytest


def test_adapters_implement_protocols(qapp):
    from pyqt_jsonform.protocols import (
        LineEditAdapter, ComboBoxAdapter, CheckBoxAdapter,
        ValueGettable, ValueSettable, OptionsSelectable,
    )

    assert isinstance(LineEditAdapter(), ValueGettable)
    assert isinstance(CheckBoxAdapter(), ValueSettable)
    assert isinstance(ComboBoxAdapter(), OptionsSelectable)


def test_text_widget_value_roundtrip(qapp):
    from pyqt_jsonform.widgets import TextWidget

    widget = TextWidget()
    widget.set_value("test")
    assert widget.get_value() == "test"
    widget.set_value(None)
    assert widget.get_value() == ""


def test_number_widget_parses_text(qapp):
    from pyqt_jsonform.widgets import NumberWidget

    received = []
    widget = NumberWidget()
    widget.connect_change_signal(received.append)
    widget.setText("12")
    widget.setText("1.5")
    widget.setText("abc")
    assert received[-3:] == [12, 1.5, "abc"]


def test_select_widget_keeps_option_order_and_values(qapp):
    from pyqt_jsonform.widgets import SelectWidget

    widget = SelectWidget()
    widget.set_options([3, 1, 2])
    assert widget.get_options() == [3, 1, 2]

    widget.set_value(1)
    assert widget.get_value() == 1
    widget.set_value("missing")
    assert widget.get_value() is None


def test_checkbox_widget_emits_bool(qapp):
    from pyqt_jsonform.widgets import CheckboxWidget

    received = []
    widget = CheckboxWidget()
    widget.connect_change_signal(received.append)
    widget.setChecked(True)
    assert received == [True]


def test_registry_lookup_and_override(qapp):
    from pyqt_jsonform.protocols import FormGenConfig, OptionsSelectable, set_form_config
    from pyqt_jsonform.widgets import TextWidget, SelectWidget
    from pyqt_jsonform.forms.widget_registry import (
        get_widget_class, get_widget_capabilities, list_widgets_with_capability,
    )

    assert get_widget_class("text") is TextWidget
    assert OptionsSelectable in get_widget_capabilities(SelectWidget)
    assert SelectWidget in list_widgets_with_capability(OptionsSelectable)

    class UpperTextWidget(TextWidget):
        def get_value(self):
            return self.text().upper()

    set_form_config(FormGenConfig(custom_widgets={"text": UpperTextWidget}))
    assert get_widget_class("text") is UpperTextWidget

    with pytest.raises(KeyError):
        get_widget_class("slider")


def test_dispatcher_fails_loud(qapp):
    from PyQt6.QtWidgets import QLabel
    from pyqt_jsonform.forms.widget_dispatcher import WidgetDispatcher

    with pytest.raises(TypeError):
        WidgetDispatcher.get_value(QLabel())
    with pytest.raises(TypeError):
        WidgetDispatcher.set_options(QLabel(), ["a"])


def test_label_text_uses_required_symbol():
    from pyqt_jsonform.protocols import FormGenConfig, set_form_config
    from pyqt_jsonform.widgets import label_text

    assert label_text("Name", True) == "Name*"
    assert label_text("Name", False) == "Name"
    assert label_text(None, True) is None

    set_form_config(FormGenConfig(required_symbol=" (required)"))
    assert label_text("Name", True) == "Name (required)"


def test_error_list_hidden_when_empty(qapp):
    from pyqt_jsonform.services import FormValidationError
    from pyqt_jsonform.widgets import ErrorListWidget

    widget = ErrorListWidget()
    assert widget.isHidden()

    widget.set_errors([
        FormValidationError(path=("name",), message="'name' is a required property"),
        FormValidationError(path=(), message="bad"),
    ])
    assert not widget.isHidden()
    assert widget.messages() == ["name: 'name' is a required property", "bad"]

    widget.set_errors([])
    assert widget.isHidden()
    assert not widget.has_errors()
