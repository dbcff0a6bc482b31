"""
Widget ABC contracts for schema-driven forms.

Every editing control a field delegates to implements an explicit subset of
these contracts, so fields never probe widgets with hasattr checks.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.

    All input widgets must implement this to participate in document updates.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value, already converted to the document type.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that can accept a value.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass


class PlaceholderCapable(ABC):
    """
    ABC for widgets that can display a help hint.

    The schema ``description`` is shown through this contract.
    """

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        """
        Set placeholder text for the widget.

        Args:
            text: Hint to display while the widget holds no value
        """
        pass


class OptionsSelectable(ABC):
    """
    ABC for closed-choice widgets seeded from a schema ``enum``.
    """

    @abstractmethod
    def set_options(self, options: Sequence[Any]) -> None:
        """
        Replace the available options, keeping their order.

        Args:
            options: Allowed values in declared order
        """
        pass

    @abstractmethod
    def get_options(self) -> list:
        """Return the available options in display order."""
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Provides explicit contract for signal connection, eliminating duck typing
    of signal names (textChanged vs stateChanged vs currentIndexChanged).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        The callback will be invoked whenever the user changes the value,
        receiving the new value as its argument.

        Args:
            callback: Function to call when widget value changes.
                     Signature: callback(new_value: Any) -> None
        """
        pass
