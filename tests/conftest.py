"""pytest configuration and fixtures for pyqt-jsonform tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from pyqt_jsonform.protocols import set_form_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_form_config():
    """Restore the default FormGenConfig after each test."""
    yield
    set_form_config(None)


@pytest.fixture
def person_schema():
    return {
        "type": "object",
        "title": "Person",
        "required": ["name"],
        "properties": {
            "name": {"type": "string", "title": "Name"},
            "age": {"type": "number", "title": "Age"},
            "active": {"type": "boolean", "title": "Active"},
            "tags": {"type": "array", "title": "Tags", "items": {"type": "string"}},
            "address": {
                "type": "object",
                "title": "Address",
                "properties": {
                    "street": {"type": "string"},
                    "city": {"type": "string"},
                },
            },
        },
    }
