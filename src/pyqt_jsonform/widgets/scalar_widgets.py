"""
Primitive editing controls for scalar fields.

Each control is looked up by widget id through the widget registry, so an
application can swap any of them via FormGenConfig.custom_widgets.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QLabel, QVBoxLayout, QSizePolicy
from PyQt6.QtGui import QWheelEvent

from pyqt_jsonform.protocols import LineEditAdapter, ComboBoxAdapter, CheckBoxAdapter, get_form_config
from pyqt_jsonform.forms.widget_registry import register_widget
from pyqt_jsonform.forms.schema_defaults import parse_number


def label_text(label: Optional[str], required: bool) -> Optional[str]:
    """Return the display label, suffixed with the required symbol."""
    if not label:
        return None
    if required:
        return label + get_form_config().required_symbol
    return label


class FieldFrame(QWidget):
    """
    Labelled container around one editing control.

    The label is omitted when the schema has no title.
    """

    def __init__(self, control: QWidget, label: Optional[str] = None,
                 required: bool = False, field_type: Optional[str] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName(f"field field-{field_type}" if field_type else "field")
        self.control = control

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        text = label_text(label, required)
        self.label = QLabel(text) if text else None
        if self.label is not None:
            self.label.setBuddy(control)
            layout.addWidget(self.label)
        layout.addWidget(control)


class TextWidget(LineEditAdapter):
    """Free-text control for string and date-time fields."""

    _widget_id = "text"


class NumberWidget(LineEditAdapter):
    """
    Free-text control for number fields.

    Edited text is converted to int or float when it parses; anything else is
    passed through as text for the validator to report.
    """

    _widget_id = "number"

    def get_value(self):
        return parse_number(self.text())


class CheckboxWidget(CheckBoxAdapter):
    """Checkbox control for boolean fields."""

    _widget_id = "checkbox"

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        # Checkbox should only be as wide as its content
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)


class SelectWidget(ComboBoxAdapter):
    """Closed-choice control seeded from a schema enum.

    Ignores wheel events to prevent accidental value changes while scrolling
    a long form.
    """

    _widget_id = "select"

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()


for _widget_class in (TextWidget, NumberWidget, CheckboxWidget, SelectWidget):
    register_widget(_widget_class)
