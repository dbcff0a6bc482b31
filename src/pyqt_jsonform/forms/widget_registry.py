"""
Widget registry for scalar editing controls.

Design:
- register_widget() records a widget class under its _widget_id
- WIDGET_IMPLEMENTATIONS: Global registry of all widget types
- WIDGET_CAPABILITIES: Tracks which ABCs each widget implements
- get_widget_class() honours FormGenConfig.custom_widgets overrides
- Fail-loud if widget missing _widget_id or lookup misses
"""

from typing import Dict, Type, Set
import logging

from pyqt_jsonform.protocols import (
    ValueGettable, ValueSettable, PlaceholderCapable,
    OptionsSelectable, ChangeSignalEmitter, get_form_config
)

logger = logging.getLogger(__name__)

# Global registry of widget implementations
# Maps widget_id -> widget class
WIDGET_IMPLEMENTATIONS: Dict[str, Type] = {}

# Track which ABCs each widget implements
# Maps widget class -> set of ABC classes
WIDGET_CAPABILITIES: Dict[Type, Set[Type]] = {}

_ABC_TYPES = (
    ValueGettable, ValueSettable, PlaceholderCapable,
    OptionsSelectable, ChangeSignalEmitter
)


def register_widget(widget_class: Type) -> Type:
    """
    Register a widget class under its ``_widget_id``.

    Usable as a class decorator.

    Raises:
        TypeError: If the class has no _widget_id or abstract methods remain
    """
    widget_id = getattr(widget_class, '_widget_id', None)
    if widget_id is None:
        raise TypeError(f"{widget_class.__name__} has no _widget_id attribute")

    abstract_methods = getattr(widget_class, '__abstractmethods__', None)
    if abstract_methods:
        raise TypeError(
            f"{widget_class.__name__} cannot be registered - abstract methods remaining: "
            f"{sorted(abstract_methods)}"
        )

    if widget_id in WIDGET_IMPLEMENTATIONS and WIDGET_IMPLEMENTATIONS[widget_id] is not widget_class:
        existing = WIDGET_IMPLEMENTATIONS[widget_id]
        logger.warning(
            f"Widget ID '{widget_id}' already registered to {existing.__name__}. "
            f"Overwriting with {widget_class.__name__}."
        )

    WIDGET_IMPLEMENTATIONS[widget_id] = widget_class
    capabilities = {abc_type for abc_type in _ABC_TYPES if issubclass(widget_class, abc_type)}
    WIDGET_CAPABILITIES[widget_class] = capabilities

    logger.debug(
        f"Registered {widget_class.__name__} as '{widget_id}' with capabilities: "
        f"{[c.__name__ for c in capabilities]}"
    )
    return widget_class


def get_widget_class(widget_id: str) -> Type:
    """
    Get widget class by ID.

    Args:
        widget_id: The widget identifier (e.g., "text")

    Returns:
        The configured override for ``widget_id`` if any, else the registered class

    Raises:
        KeyError: If widget_id not registered
    """
    override = get_form_config().custom_widgets.get(widget_id)
    if override is not None:
        return override
    if widget_id not in WIDGET_IMPLEMENTATIONS:
        raise KeyError(
            f"No widget registered with ID '{widget_id}'. "
            f"Available widgets: {list(WIDGET_IMPLEMENTATIONS.keys())}"
        )
    return WIDGET_IMPLEMENTATIONS[widget_id]


def get_widget_capabilities(widget_class: Type) -> Set[Type]:
    """Get the ABCs that a widget class implements."""
    return WIDGET_CAPABILITIES.get(widget_class, set())


def list_widgets_with_capability(capability: Type) -> list:
    """
    Find all widgets that implement a specific ABC.

    Example:
        >>> from pyqt_jsonform.protocols import OptionsSelectable
        >>> [w.__name__ for w in list_widgets_with_capability(OptionsSelectable)]
        ['SelectWidget']
    """
    return [
        widget_class
        for widget_class, capabilities in WIDGET_CAPABILITIES.items()
        if capability in capabilities
    ]
