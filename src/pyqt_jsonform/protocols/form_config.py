"""Base configuration class for schema form generation.

Provides hooks for applications to customize labels, widgets and the
validator used by the form controller.
"""

from typing import Any, Dict, Optional, Type
from dataclasses import dataclass, field


@dataclass
class FormGenConfig:
    """Base configuration for form generation behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        required_symbol: Suffix appended to labels of required fields
        default_object_title: Legend for object fields without a title
        default_item_title: Label for array items without title or description
        submit_label: Text of the form's submit button
        add_item_label: Text of the array append button
        remove_item_label: Text of the array item removal button
        errors_heading: Heading shown above the error list
        custom_widgets: Widget class overrides keyed by widget id
        validator_class: jsonschema validator class, None for the built-in one
    """

    required_symbol: str = "*"
    default_object_title: str = "Object"
    default_item_title: str = "Item"
    submit_label: str = "Submit"
    add_item_label: str = "+"
    remove_item_label: str = "-"
    errors_heading: str = "Errors"
    custom_widgets: Dict[str, Type] = field(default_factory=dict)
    validator_class: Optional[Any] = None


# Global config instance (set by application)
_form_config: Optional[FormGenConfig] = None


def set_form_config(config: Optional[FormGenConfig]) -> None:
    """Set the global form generation configuration.

    Args:
        config: FormGenConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormGenConfig:
    """Get the current form generation configuration.

    Returns:
        Current FormGenConfig or default if not set
    """
    if _form_config is None:
        return FormGenConfig()
    return _form_config
