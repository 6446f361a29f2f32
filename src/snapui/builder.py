"""Helpers for building validated nodes in code.

    >>> panel([heading("Hello"), text("Welcome back")])

Children may be nodes built here or raw dicts; everything is validated.
"""

from enum import Enum
from typing import Any, Iterable, TypeVar

import pydantic

from .nodes import (
    Button,
    ButtonType,
    ButtonVariant,
    Copyable,
    Divider,
    Form,
    Heading,
    Input,
    InputType,
    Node,
    NodeType,
    Panel,
    Spinner,
    Text,
)
from .validation import ComponentValidationError, convert_errors

NodeT = TypeVar("NodeT", bound=Node)


def _raw(child: Any) -> Any:
    return child.to_dict() if isinstance(child, Node) else child


def _optional(**fields: Any) -> dict[str, Any]:
    """Drop unset fields, unwrapping enum members to their wire values."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in fields.items()
        if value is not None
    }


def _build(model: type[NodeT], data: dict[str, Any]) -> NodeT:
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ComponentValidationError(convert_errors(e)) from e


def copyable(value: str) -> Copyable:
    """Build a copyable text node."""
    return _build(Copyable, {"type": NodeType.COPYABLE.value, "value": value})


def divider() -> Divider:
    """Build a divider node."""
    return _build(Divider, {"type": NodeType.DIVIDER.value})


def heading(value: str) -> Heading:
    """Build a heading node."""
    return _build(Heading, {"type": NodeType.HEADING.value, "value": value})


def panel(children: Iterable[Any]) -> Panel:
    """Build a panel from nodes or raw node dicts."""
    return _build(
        Panel, {"type": NodeType.PANEL.value, "children": [_raw(child) for child in children]}
    )


def spinner() -> Spinner:
    """Build a spinner node."""
    return _build(Spinner, {"type": NodeType.SPINNER.value})


def text(value: str) -> Text:
    """Build a text node."""
    return _build(Text, {"type": NodeType.TEXT.value, "value": value})


def button(
    value: str,
    *,
    variant: ButtonVariant | str | None = None,
    button_type: ButtonType | str | None = None,
    name: str | None = None,
) -> Button:
    """Build a button node."""
    return _build(
        Button,
        {
            "type": NodeType.BUTTON.value,
            "value": value,
            **_optional(variant=variant, buttonType=button_type, name=name),
        },
    )


def input(
    name: str,
    *,
    value: str | None = None,
    input_type: InputType | str | None = None,
    placeholder: str | None = None,
    label: str | None = None,
) -> Input:
    """Build an input node."""
    return _build(
        Input,
        {
            "type": NodeType.INPUT.value,
            "name": name,
            **_optional(
                value=value, inputType=input_type, placeholder=placeholder, label=label
            ),
        },
    )


def form(name: str, children: Iterable[Any]) -> Form:
    """Build a form from input and button nodes."""
    return _build(
        Form,
        {
            "type": NodeType.FORM.value,
            "name": name,
            "children": [_raw(child) for child in children],
        },
    )
