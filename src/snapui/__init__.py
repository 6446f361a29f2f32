"""
snapui
Declarative UI node trees, their validation, and form state derivation.
"""

from .nodes import (
    NodeType,
    ButtonVariant,
    ButtonType,
    InputType,
    Node,
    Copyable,
    Divider,
    Heading,
    Panel,
    Spinner,
    Text,
    Button,
    Input,
    Form,
    Component,
    FormComponent,
    component_adapter,
    form_component_adapter,
)
from .validation import (
    ErrorKind,
    ComponentError,
    ComponentValidationError,
    validate_component,
    assert_is_component,
    is_component,
    parse_component,
    dump_component,
)
from .state import ComponentState, construct_state, derive_state
from .interfaces import (
    Interface,
    InterfaceController,
    InterfaceNotFoundError,
    InterfaceAccessError,
)
from .core import SnapUIError, ValidationError, configure_logging, get_settings

__version__ = "0.1.0"

__all__ = [
    # Nodes
    "NodeType",
    "ButtonVariant",
    "ButtonType",
    "InputType",
    "Node",
    "Copyable",
    "Divider",
    "Heading",
    "Panel",
    "Spinner",
    "Text",
    "Button",
    "Input",
    "Form",
    "Component",
    "FormComponent",
    "component_adapter",
    "form_component_adapter",
    # Validation
    "ErrorKind",
    "ComponentError",
    "ComponentValidationError",
    "validate_component",
    "assert_is_component",
    "is_component",
    "parse_component",
    "dump_component",
    # State
    "ComponentState",
    "construct_state",
    "derive_state",
    # Interfaces
    "Interface",
    "InterfaceController",
    "InterfaceNotFoundError",
    "InterfaceAccessError",
    # Core
    "SnapUIError",
    "ValidationError",
    "configure_logging",
    "get_settings",
]
