"""
Editing controls and presentation widgets.

Scalar controls build on the protocol adapters; the error list renders
validation results.
"""

from .scalar_widgets import (
    FieldFrame,
    TextWidget,
    NumberWidget,
    CheckboxWidget,
    SelectWidget,
    label_text,
)
from .error_list import ErrorListWidget

__all__ = [
    "FieldFrame",
    "TextWidget",
    "NumberWidget",
    "CheckboxWidget",
    "SelectWidget",
    "label_text",
    "ErrorListWidget",
]
