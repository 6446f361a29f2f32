"""UI node models.

Every node kind is a strict, frozen pydantic model. The closed set of kinds
is exposed as two discriminated unions:

- ``Component``: any node kind (used for top-level content and Panel children)
- ``FormComponent``: Input or Button only (used for Form children)

Field names on the wire are camelCase (``buttonType``, ``inputType``).
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter
from pydantic_core import PydanticCustomError


class NodeType(str, Enum):
    """Node type tags."""

    COPYABLE = "copyable"
    DIVIDER = "divider"
    HEADING = "heading"
    PANEL = "panel"
    SPINNER = "spinner"
    TEXT = "text"
    BUTTON = "button"
    INPUT = "input"
    FORM = "form"


class ButtonVariant(str, Enum):
    """Button style variants."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class ButtonType(str, Enum):
    """Button behaviour inside a form."""

    BUTTON = "button"
    SUBMIT = "submit"


class InputType(str, Enum):
    """Input field kinds."""

    TEXT = "text"
    PASSWORD = "password"
    NUMBER = "number"
    SEARCH = "search"


def _not_null(value: Any) -> Any:
    """Reject explicit null; optional fields may only be omitted."""
    if value is None:
        raise PydanticCustomError("not_null", "Field may be omitted but must not be null")
    return value


OptionalStr = Annotated[Optional[str], BeforeValidator(_not_null)]
OptionalVariant = Annotated[Optional[Literal["primary", "secondary"]], BeforeValidator(_not_null)]
OptionalButtonType = Annotated[Optional[Literal["button", "submit"]], BeforeValidator(_not_null)]
OptionalInputType = Annotated[
    Optional[Literal["text", "password", "number", "search"]], BeforeValidator(_not_null)
]


class Node(BaseModel):
    """Base node: a type tag and nothing else."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    type: str

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, with omitted optional fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Copyable(Node):
    """Text that can be copied to the clipboard."""

    type: Literal["copyable"]
    value: str


class Divider(Node):
    """A line between other nodes."""

    type: Literal["divider"]


class Heading(Node):
    """Text rendered as a heading."""

    type: Literal["heading"]
    value: str


class Panel(Node):
    """Container that renders its children in order."""

    type: Literal["panel"]
    children: list["Component"]


class Spinner(Node):
    """Loading indicator, full screen or inline inside a panel."""

    type: Literal["spinner"]


class Text(Node):
    """Plain or markdown text, rendered as one or more paragraphs."""

    type: Literal["text"]
    value: str


class Button(Node):
    """A primary or secondary button. ``name`` identifies it inside a form."""

    type: Literal["button"]
    value: str
    variant: OptionalVariant = None
    button_type: OptionalButtonType = Field(default=None, alias="buttonType")
    name: OptionalStr = None


class Input(Node):
    """A text field. ``name`` is the key it contributes to the form state."""

    type: Literal["input"]
    name: str
    value: OptionalStr = None
    input_type: OptionalInputType = Field(default=None, alias="inputType")
    placeholder: OptionalStr = None
    label: OptionalStr = None


FormComponent = Annotated[Union[Input, Button], Field(discriminator="type")]


class Form(Node):
    """A named group of inputs and buttons; its state is namespaced by name."""

    type: Literal["form"]
    name: str
    children: list[FormComponent]


Component = Annotated[
    Union[Copyable, Divider, Heading, Panel, Spinner, Text, Button, Input, Form],
    Field(discriminator="type"),
]

Panel.model_rebuild()

component_adapter: TypeAdapter[Component] = TypeAdapter(Component)
form_component_adapter: TypeAdapter[FormComponent] = TypeAdapter(FormComponent)

NODE_MODELS: dict[NodeType, type[Node]] = {
    NodeType.COPYABLE: Copyable,
    NodeType.DIVIDER: Divider,
    NodeType.HEADING: Heading,
    NodeType.PANEL: Panel,
    NodeType.SPINNER: Spinner,
    NodeType.TEXT: Text,
    NodeType.BUTTON: Button,
    NodeType.INPUT: Input,
    NodeType.FORM: Form,
}

NODE_TYPES = frozenset(t.value for t in NodeType)
FORM_NODE_TYPES = frozenset({NodeType.INPUT.value, NodeType.BUTTON.value})
