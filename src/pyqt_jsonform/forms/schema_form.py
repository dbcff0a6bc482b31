"""PyQt form widget - VIEW layer for the FormController MODEL."""

from typing import Any, Callable, List, Optional
import logging

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton
from PyQt6.QtCore import pyqtSignal

from pyqt_jsonform.protocols import get_form_config
from pyqt_jsonform.services import FormValidationError, ValidationService
from pyqt_jsonform.widgets import ErrorListWidget
from .form_controller import FormController, FormSessionState
from .schema_fields import SchemaField

logger = logging.getLogger(__name__)


class JsonSchemaForm(QWidget):
    """
    Editable form generated from a JSON Schema.

    Layout, top to bottom: error summary, the root field, submit button.
    The FormController owns the document; this widget forwards the root
    field's updates to it and re-renders the error summary afterwards.

    Host callbacks are passed to the controller; the same outcomes are also
    emitted as Qt signals.

    Usage:
        form = JsonSchemaForm(schema, on_submit=lambda state: save(state.document))
        layout.addWidget(form)
    """

    changed = pyqtSignal(object)    # FormSessionState
    submitted = pyqtSignal(object)  # FormSessionState
    failed = pyqtSignal(object)     # list of FormValidationError

    def __init__(self, schema: Any, document: Any = None,
                 on_change: Optional[Callable[[FormSessionState], None]] = None,
                 on_submit: Optional[Callable[[FormSessionState], None]] = None,
                 on_error: Optional[Callable[[List[FormValidationError]], None]] = None,
                 validator: Optional[ValidationService] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("generic-form")
        self._host_on_change = on_change
        self._submitted_state: Optional[FormSessionState] = None
        self.controller = FormController(
            schema,
            document,
            validator=validator,
            on_change=self._on_state_change,
            on_submit=self._on_submitted,
            on_error=on_error,
        )
        self._host_on_submit = on_submit

        layout = QVBoxLayout(self)

        self.error_list = ErrorListWidget()
        layout.addWidget(self.error_list)

        self.root_field = SchemaField(
            self.controller.schema,
            value=self.controller.document,
            on_change=self.controller.handle_change,
        )
        layout.addWidget(self.root_field)

        button_row = QHBoxLayout()
        self.submit_button = QPushButton(get_form_config().submit_label)
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(lambda _checked=False: self.submit())
        button_row.addWidget(self.submit_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        self._refresh_errors()

    @property
    def state(self) -> FormSessionState:
        return self.controller.state

    @property
    def document(self) -> Any:
        return self.controller.document

    def _refresh_errors(self) -> None:
        self.error_list.set_errors(self.controller.visible_errors)

    def _on_state_change(self, state: FormSessionState) -> None:
        self._refresh_errors()
        if self._host_on_change is not None:
            self._host_on_change(state)
        self.changed.emit(state)

    def _on_submitted(self, state: FormSessionState) -> None:
        self._submitted_state = state
        if self._host_on_submit is not None:
            self._host_on_submit(state)

    def submit(self) -> bool:
        """Validate and submit the current document.

        Returns:
            True when the document was valid and the submit callback ran
        """
        self._submitted_state = None
        ok = self.controller.submit()
        self._refresh_errors()
        if ok:
            self.submitted.emit(self._submitted_state)
        else:
            logger.debug(f"Submit rejected with {len(self.controller.errors)} error(s)")
            self.failed.emit(list(self.controller.errors))
        return ok
