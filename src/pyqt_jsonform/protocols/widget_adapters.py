"""
Widget adapters that wrap Qt widgets to implement the form ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QCheckBox.isChecked() vs QComboBox.currentData()
- QLineEdit.setText() vs QCheckBox.setChecked() vs QComboBox.setCurrentIndex()
- QLineEdit.setPlaceholderText() vs QComboBox.setPlaceholderText() vs tooltips

All adapters implement consistent interface via ABCs:
- get_value() / set_value() for all widgets
- set_placeholder() for all widgets
- connect_change_signal() for all widgets
"""

from abc import ABCMeta
from typing import Any, Callable, Sequence

from PyQt6.QtWidgets import QLineEdit, QComboBox, QCheckBox
from PyQt6.QtCore import QObject

from .widget_protocols import (
    ValueGettable, ValueSettable, PlaceholderCapable,
    OptionsSelectable, ChangeSignalEmitter
)


# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, PlaceholderCapable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit implementing the form ABCs.

    Text is returned verbatim: an empty line edit yields ``""`` so that a
    freshly added string item keeps its synthesized default.
    """

    _widget_id = "line_edit"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.textChanged.connect(lambda _text: callback(self.get_value()))


class ComboBoxAdapter(QComboBox, ValueGettable, ValueSettable, PlaceholderCapable,
                      OptionsSelectable, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox implementing the form ABCs.

    Stores actual option values in itemData, not just display text, so an
    enum of numbers or booleans round-trips without string conversion.
    """

    _widget_id = "combo_box"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        if value is not None:
            for i in range(self.count()):
                if self.itemData(i) == value:
                    self.setCurrentIndex(i)
                    return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.setPlaceholderText(text)
        self.setToolTip(text)

    def set_options(self, options: Sequence[Any]) -> None:
        """Implement OptionsSelectable ABC."""
        self.clear()
        for option in options:
            self.addItem(str(option), option)

    def get_options(self) -> list:
        """Implement OptionsSelectable ABC."""
        return [self.itemData(i) for i in range(self.count())]

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.currentIndexChanged.connect(lambda _index: callback(self.get_value()))


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable, PlaceholderCapable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox implementing the form ABCs.

    Returns bool values, treats None as False.
    """

    _widget_id = "check_box"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setChecked(bool(value) if value is not None else False)

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        # Checkboxes have no inline hint - the description becomes the tooltip
        self.setToolTip(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.stateChanged.connect(lambda _state: callback(self.get_value()))
