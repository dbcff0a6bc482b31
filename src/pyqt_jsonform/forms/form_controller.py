"""
Top-level form state holder.

Owns the whole document and the session state, runs a full validation pass
on every change and on submit, and routes the outcome to the host
callbacks. Has no Qt dependency; ``JsonSchemaForm`` wraps it.
"""

import copy
import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple
import logging

from pyqt_jsonform.services import FormValidationError, ValidationService, get_validation_service
from .schema_node import SchemaNode

logger = logging.getLogger(__name__)


class FormStatus(Enum):
    """Session status."""
    INITIAL = "initial"
    EDITING = "editing"
    SUBMITTED = "submitted"


@dataclass(frozen=True)
class FormSessionState:
    """Snapshot of a form session. Replaced wholesale on every transition."""
    status: FormStatus
    document: Any
    edit: bool
    errors: Tuple[FormValidationError, ...] = ()


class FormController:
    """
    Form session state machine.

    Statuses:
    - INITIAL: idle, accepts edits
    - EDITING: entered on any change; errors are hidden while editing
    - SUBMITTED: transient, only during submit(); always back to INITIAL
      before submit() returns

    A controller mounted with a non-empty document is in edit mode: that
    document is validated immediately and its errors stay visible until the
    next edit. Any dict or list counts as non-empty.

    Args:
        schema: Root JSON Schema mapping or SchemaNode
        document: Seed document; None or an empty scalar mounts from
            ``schema.default`` or ``{}``
        validator: ValidationService to use, the shared one by default
        on_change: Called with the session state after every accepted edit
        on_submit: Called with the session state when submit finds no errors
        on_error: Called with the error list when submit finds errors
    """

    def __init__(self, schema: Any, document: Any = None,
                 validator: Optional[ValidationService] = None,
                 on_change: Optional[Callable[[FormSessionState], None]] = None,
                 on_submit: Optional[Callable[[FormSessionState], None]] = None,
                 on_error: Optional[Callable[[List[FormValidationError]], None]] = None):
        self.schema = SchemaNode.from_dict(schema)
        self._validator = validator or get_validation_service()
        self.on_change = on_change
        self.on_submit = on_submit
        self.on_error = on_error
        self._submit_failed = False

        # Empty scalar seeds ("", 0, False) do not count; empty containers do
        edit = isinstance(document, (dict, list)) or bool(document)
        if edit:
            initial_document = document
        elif self.schema.default is not None:
            initial_document = copy.deepcopy(self.schema.default)
        else:
            initial_document = {}

        errors = tuple(self.validate(initial_document)) if edit else ()
        self._state = FormSessionState(
            status=FormStatus.INITIAL,
            document=initial_document,
            edit=edit,
            errors=errors,
        )
        logger.debug(f"FormController mounted (edit={edit}, errors={len(errors)})")

    @property
    def state(self) -> FormSessionState:
        return self._state

    @property
    def document(self) -> Any:
        return self._state.document

    @property
    def status(self) -> FormStatus:
        return self._state.status

    @property
    def errors(self) -> Tuple[FormValidationError, ...]:
        return self._state.errors

    @property
    def visible_errors(self) -> Tuple[FormValidationError, ...]:
        """Errors the error presentation should show right now."""
        if self._state.status is FormStatus.EDITING:
            return ()
        if self._state.edit or self._submit_failed:
            return self._state.errors
        return ()

    def validate(self, document: Any) -> List[FormValidationError]:
        """Validate the entire document against the root schema."""
        return self._validator.validate(document, self.schema)

    def _transition(self, **changes) -> FormSessionState:
        self._state = dataclasses.replace(self._state, **changes)
        return self._state

    def handle_change(self, document: Any) -> FormSessionState:
        """Accept the root field's updated document."""
        state = self._transition(
            status=FormStatus.EDITING,
            document=document,
            errors=tuple(self.validate(document)),
        )
        if self.on_change is not None:
            self.on_change(state)
        return state

    def submit(self) -> bool:
        """
        Validate the current document and report the outcome.

        Returns:
            True when the document had no errors and on_submit was called
        """
        self._transition(status=FormStatus.SUBMITTED)
        errors = self.validate(self._state.document)
        try:
            if errors:
                self._submit_failed = True
                self._transition(errors=tuple(errors))
                if self.on_error is not None:
                    self.on_error(errors)
                else:
                    logger.error(f"Form validation failed: {[str(error) for error in errors]}")
                return False

            self._submit_failed = False
            state = self._transition(errors=())
            if self.on_submit is not None:
                self.on_submit(state)
            return True
        finally:
            self._transition(status=FormStatus.INITIAL)
