"""Error summary shown above the form."""

from typing import Optional, Sequence

from PyQt6.QtWidgets import QWidget, QLabel, QVBoxLayout, QListWidget
from PyQt6.QtGui import QFont

from pyqt_jsonform.protocols import get_form_config


class ErrorListWidget(QWidget):
    """
    Renders the current ordered error list.

    Hidden entirely when the list is empty. Computing errors is the form
    controller's job; this widget only displays what it is given.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("errors")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._heading = QLabel(get_form_config().errors_heading)
        heading_font = QFont(self._heading.font())
        heading_font.setBold(True)
        self._heading.setFont(heading_font)
        layout.addWidget(self._heading)

        self._list = QListWidget()
        layout.addWidget(self._list)

        self._messages: list = []
        self.setVisible(False)

    def set_errors(self, errors: Sequence) -> None:
        """Replace the displayed errors wholesale."""
        self._messages = [str(error) for error in errors]
        self._list.clear()
        self._list.addItems(self._messages)
        self.setVisible(bool(self._messages))

    def messages(self) -> list:
        """Displayed lines, in order."""
        return list(self._messages)

    def has_errors(self) -> bool:
        return bool(self._messages)
