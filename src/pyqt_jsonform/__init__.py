"""
pyqt-jsonform: JSON Schema driven form generation for PyQt6.

Renders an editable form from a JSON Schema and keeps the form document
synchronized with validation results.

Architecture:
- Protocols: widget ABCs, Qt adapters and FormGenConfig
- Services: enum dispatch base and the jsonschema validator adapter
- Widgets: scalar editing controls and the error list
- Forms: schema model, field resolver, composite state engine,
  FormController and the Qt field components

Key Features:
- Field selection by schema type with a diagnostic fallback
- Nested object/array state with merge-then-notify updates
- Whole-document re-validation on every change and on submit
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
