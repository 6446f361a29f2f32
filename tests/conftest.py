"""Pytest configuration and fixtures."""

import os
import pytest

from snapui import InterfaceController
from snapui.core import get_settings


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['SNAPUI_LOG_LEVEL'] = 'DEBUG'
    os.environ['SNAPUI_JSON_LOGS'] = 'false'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def controller():
    """Empty interface controller."""
    return InterfaceController()


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_form():
    """Login form with two inputs and a submit button."""
    return {
        "type": "form",
        "name": "login",
        "children": [
            {"type": "input", "name": "username", "value": "alice", "label": "Username"},
            {"type": "input", "name": "password", "inputType": "password"},
            {"type": "button", "value": "Sign in", "buttonType": "submit", "name": "submit"},
        ],
    }


@pytest.fixture
def sample_panel(sample_form):
    """Document panel mixing every node kind."""
    return {
        "type": "panel",
        "children": [
            {"type": "heading", "value": "Welcome"},
            {"type": "text", "value": "Please **sign in**."},
            {"type": "divider"},
            sample_form,
            {"type": "copyable", "value": "0xabc"},
            {"type": "spinner"},
            {
                "type": "panel",
                "children": [
                    {"type": "input", "name": "search", "value": "dogs", "inputType": "search"},
                    {"type": "button", "value": "Cancel", "variant": "secondary"},
                ],
            },
        ],
    }


@pytest.fixture
def scenario_panel():
    """Text plus a form with one input and one button."""
    return {
        "type": "panel",
        "children": [
            {"type": "text", "value": "Hi"},
            {
                "type": "form",
                "name": "f",
                "children": [
                    {"type": "input", "name": "a", "value": "x"},
                    {"type": "button", "name": "b", "value": "Go"},
                ],
            },
        ],
    }
