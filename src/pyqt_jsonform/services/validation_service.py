"""
Validator adapter around the jsonschema library.

Pure function boundary: ``(document, schema) -> ordered list of errors``.
Errors are returned as data; nothing here raises for an invalid document or
an unknown schema type.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
import logging

import jsonschema
from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import UnknownType

from pyqt_jsonform.protocols import get_form_config

logger = logging.getLogger(__name__)


def _is_date_time(checker, instance) -> bool:
    return isinstance(instance, str)


# Draft 7 plus the "date-time" type tag used by date-time fields
FormValidator = validators.extend(
    Draft7Validator,
    type_checker=Draft7Validator.TYPE_CHECKER.redefine("date-time", _is_date_time),
)


@dataclass(frozen=True)
class FormValidationError:
    """One violated constraint, located by its path in the document.

    Attributes:
        path: Keys and indices from the document root to the offending value
        message: Human-readable description of the violation
        validator: The failing schema keyword (e.g. "required", "type")
        schema_path: Keys from the schema root to the failing keyword
    """
    path: Tuple[Any, ...]
    message: str
    validator: Optional[str] = None
    schema_path: Tuple[Any, ...] = ()

    @property
    def path_string(self) -> str:
        return ".".join(str(part) for part in self.path)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.path_string}: {self.message}"


class ValidationService:
    """
    Validates whole form documents against a JSON Schema.

    The jsonschema validator class comes from the constructor argument, then
    ``FormGenConfig.validator_class``, then ``FormValidator``.

    Example:
        >>> service = ValidationService()
        >>> schema = {"type": "object", "required": ["name"]}
        >>> [e.path for e in service.validate({}, schema)]
        [('name',)]
    """

    def __init__(self, validator_class: Optional[Any] = None):
        self._validator_class = validator_class

    @property
    def validator_class(self) -> Any:
        return self._validator_class or get_form_config().validator_class or FormValidator

    def validate(self, document: Any, schema: Any) -> List[FormValidationError]:
        """
        Validate ``document`` against ``schema``.

        Args:
            document: The complete form document
            schema: JSON Schema mapping or SchemaNode

        Returns:
            Errors in the order the validator produced them; empty when valid
            An unknown schema type ends the pass with one diagnostic error
        """
        raw_schema = getattr(schema, "raw", schema)
        validator = self.validator_class(raw_schema)

        errors: List[FormValidationError] = []
        try:
            for error in validator.iter_errors(document):
                errors.append(self._translate_error(error))
        # UnknownType aborts iter_errors, so the list stops at the offending
        # subschema; errors the validator would have yielded after it are lost
        except UnknownType as exc:
            logger.warning(f"Schema declares unknown type {exc.type!r}")
            errors.append(FormValidationError(
                path=(),
                message=f"Unknown schema type {exc.type!r}",
                validator="type",
            ))

        logger.debug(f"Validation pass produced {len(errors)} error(s)")
        return errors

    def _translate_error(self, error: jsonschema.ValidationError) -> FormValidationError:
        """Translate a jsonschema ValidationError into a FormValidationError.

        For ``required`` failures jsonschema reports the path of the enclosing
        object; the missing property name is appended so the error points at
        the field the user has to fill in.
        """
        path = tuple(error.absolute_path)

        if error.validator == "required":
            for name in error.validator_value or ():
                if error.message == f"{name!r} is a required property":
                    path = path + (name,)
                    break

        return FormValidationError(
            path=path,
            message=error.message,
            validator=str(error.validator) if error.validator is not None else None,
            schema_path=tuple(error.absolute_schema_path),
        )


_default_service: Optional[ValidationService] = None


def get_validation_service() -> ValidationService:
    """Return the shared ValidationService instance."""
    global _default_service
    if _default_service is None:
        _default_service = ValidationService()
    return _default_service


def validate(document: Any, schema: Any) -> List[FormValidationError]:
    """Validate with the shared service."""
    return get_validation_service().validate(document, schema)
