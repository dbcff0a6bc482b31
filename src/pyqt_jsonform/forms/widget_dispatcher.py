"""
Widget dispatcher with fail-loud ABC checking.

Replaces duck typing (hasattr checks) with explicit isinstance checks against
ABCs. Every method raises TypeError if the widget does not implement the
required ABC, which surfaces a broken custom widget immediately.
"""

from typing import Any, Callable, Sequence
from pyqt_jsonform.protocols import (
    ValueGettable, ValueSettable, PlaceholderCapable,
    OptionsSelectable, ChangeSignalEmitter
)


def _require(widget: Any, abc_type: type, method: str) -> None:
    if not isinstance(widget, abc_type):
        raise TypeError(
            f"Widget {type(widget).__name__} does not implement {abc_type.__name__} ABC. "
            f"Add {abc_type.__name__} to widget's base classes and implement {method}() method."
        )


class WidgetDispatcher:
    """
    ABC-based widget dispatch - NO DUCK TYPING.

    Example:
        value = WidgetDispatcher.get_value(widget)  # Raises TypeError if not ValueGettable
    """

    @staticmethod
    def get_value(widget: Any) -> Any:
        _require(widget, ValueGettable, "get_value")
        return widget.get_value()

    @staticmethod
    def set_value(widget: Any, value: Any) -> None:
        _require(widget, ValueSettable, "set_value")
        widget.set_value(value)

    @staticmethod
    def set_placeholder(widget: Any, text: str) -> None:
        _require(widget, PlaceholderCapable, "set_placeholder")
        widget.set_placeholder(text)

    @staticmethod
    def set_options(widget: Any, options: Sequence[Any]) -> None:
        _require(widget, OptionsSelectable, "set_options")
        widget.set_options(options)

    @staticmethod
    def connect_change_signal(widget: Any, callback: Callable[[Any], None]) -> None:
        """
        Connect change signal using explicit ABC check.

        Args:
            widget: The widget to connect signal on
            callback: Callback function receiving new value

        Raises:
            TypeError: If widget doesn't implement ChangeSignalEmitter ABC
        """
        _require(widget, ChangeSignalEmitter, "connect_change_signal")
        widget.connect_change_signal(callback)
