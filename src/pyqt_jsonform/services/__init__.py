"""
Service layer for schema forms.

Stateless services shared by the field components and the form controller.
"""

from .enum_dispatch_service import EnumDispatchService
from .validation_service import (
    FormValidationError,
    FormValidator,
    ValidationService,
    get_validation_service,
    validate,
)

__all__ = [
    "EnumDispatchService",
    "FormValidationError",
    "FormValidator",
    "ValidationService",
    "get_validation_service",
    "validate",
]
