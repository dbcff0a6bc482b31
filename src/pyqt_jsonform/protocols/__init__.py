"""
Widget protocol definitions and adapters.

ABC-based widget contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    PlaceholderCapable,
    OptionsSelectable,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    LineEditAdapter,
    ComboBoxAdapter,
    CheckBoxAdapter,
    PyQtWidgetMeta,
)
from .form_config import FormGenConfig, set_form_config, get_form_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "PlaceholderCapable",
    "OptionsSelectable",
    "ChangeSignalEmitter",
    "LineEditAdapter",
    "ComboBoxAdapter",
    "CheckBoxAdapter",
    "PyQtWidgetMeta",
    "FormGenConfig",
    "set_form_config",
    "get_form_config",
]
