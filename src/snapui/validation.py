"""Component validation at the trust boundary.

Raw values (parsed JSON, host input) are checked against the node models and
either produce a typed ``Component`` tree or a ``ComponentError`` describing
the first failure, depth-first and in child order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

import pydantic
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from .core.config import Settings, get_settings
from .core.errors import JSONParseError, LimitExceededError, ValidationError
from .core.json import decode_json, safe_json_dumps, validate_json_depth, validate_json_size
from .core.logging_config import get_logger
from .nodes import NODE_TYPES, Component, Node, component_adapter

logger = get_logger(__name__)

PathElement = str | int


class ErrorKind(str, Enum):
    """Categories of validation failure."""

    UNKNOWN_TYPE = "unknown_type"
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    STRUCTURAL_VIOLATION = "structural_violation"
    UNEXPECTED_FIELD = "unexpected_field"
    INVALID_LITERAL = "invalid_literal"
    INVALID_JSON = "invalid_json"
    LIMIT_EXCEEDED = "limit_exceeded"


@dataclass(frozen=True)
class ComponentError:
    """A single validation failure."""

    kind: ErrorKind
    message: str
    path: tuple[PathElement, ...] = ()
    field: str | None = None
    value: Any | None = None

    @property
    def pointer(self) -> str:
        """JSON-pointer style rendering of ``path`` (root is ``/``)."""
        if not self.path:
            return "/"
        return "".join(f"/{element}" for element in self.path)

    def to_dict(self) -> dict[str, Any]:
        """Export as dictionary."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "path": list(self.path),
            "field": self.field,
            "value": self.value,
        }

    def __str__(self) -> str:
        return f"{self.message} (at {self.pointer})"


class ComponentValidationError(ValidationError):
    """Raised when a value is not a valid component.

    ``error`` is the first failure; ``errors`` holds all failures in report order.
    """

    def __init__(self, errors: Sequence[ComponentError]) -> None:
        if not errors:
            raise ValueError("ComponentValidationError requires at least one error")
        self.errors: tuple[ComponentError, ...] = tuple(errors)
        self.error = self.errors[0]
        super().__init__(str(self.error))


def _normalize_loc(loc: Sequence[PathElement]) -> tuple[PathElement, ...]:
    """Strip the discriminator tags pydantic inserts into error locations.

    A tagged union adds the tag after the union's own position: at the root
    and after every child index. Field names never collide with node tags.
    """
    path: list[PathElement] = []
    previous: PathElement | None = None
    for index, element in enumerate(loc):
        is_union_position = index == 0 or isinstance(previous, int)
        if is_union_position and isinstance(element, str) and element in NODE_TYPES:
            previous = element
            continue
        path.append(element)
        previous = element
    return tuple(path)


def _split_field(path: tuple[PathElement, ...]) -> tuple[tuple[PathElement, ...], str | None]:
    if path and isinstance(path[-1], str):
        return path[:-1], path[-1]
    return path, None


def _convert_error(error: Any) -> ComponentError:
    """Map one pydantic error entry onto the component error taxonomy."""
    error_type = error["type"]
    ctx = error.get("ctx") or {}
    value = error.get("input")
    path = _normalize_loc(error["loc"])

    if error_type == "recursion_loop":
        return ComponentError(
            kind=ErrorKind.LIMIT_EXCEEDED,
            message="Component tree nests too deeply to validate",
            path=path,
            value=None,
        )

    if error_type == "union_tag_invalid":
        tag = ctx.get("tag")
        if isinstance(value, dict) and not isinstance(value.get("type"), str):
            return ComponentError(
                kind=ErrorKind.TYPE_MISMATCH,
                message=f"Field 'type' must be a string, got {type(value.get('type')).__name__}",
                path=path,
                field="type",
                value=value,
            )
        if tag in NODE_TYPES:
            return ComponentError(
                kind=ErrorKind.STRUCTURAL_VIOLATION,
                message=(
                    f"Node type '{tag}' is not allowed here, expected one of "
                    f"{ctx.get('expected_tags')}"
                ),
                path=path,
                field="type",
                value=value,
            )
        return ComponentError(
            kind=ErrorKind.UNKNOWN_TYPE,
            message=f"Unknown node type '{tag}'",
            path=path,
            field="type",
            value=value,
        )

    if error_type == "union_tag_not_found":
        return ComponentError(
            kind=ErrorKind.MISSING_FIELD,
            message="Missing required field 'type'",
            path=path,
            field="type",
            value=value,
        )

    _, field_name = _split_field(path)

    if error_type == "missing":
        return ComponentError(
            kind=ErrorKind.MISSING_FIELD,
            message=f"Missing required field '{field_name}'",
            path=path,
            field=field_name,
            value=None,
        )

    if error_type == "extra_forbidden":
        return ComponentError(
            kind=ErrorKind.UNEXPECTED_FIELD,
            message=f"Unexpected field '{field_name}'",
            path=path,
            field=field_name,
            value=value,
        )

    if error_type == "literal_error":
        return ComponentError(
            kind=ErrorKind.INVALID_LITERAL,
            message=(
                f"Invalid value {value!r} for field '{field_name}', "
                f"expected {ctx.get('expected')}"
            ),
            path=path,
            field=field_name,
            value=value,
        )

    return ComponentError(
        kind=ErrorKind.TYPE_MISMATCH,
        message=(
            f"Invalid value for field '{field_name}': {error['msg']}"
            if field_name
            else f"Invalid node: {error['msg']}"
        ),
        path=path,
        field=field_name,
        value=value,
    )


def convert_errors(exc: pydantic.ValidationError) -> list[ComponentError]:
    """Convert all pydantic errors, preserving their report order."""
    return [_convert_error(error) for error in exc.errors(include_url=False)]


def _collect_errors(
    value: Any, settings: Settings | None = None
) -> tuple[Component | None, list[ComponentError]]:
    settings = settings or get_settings()

    try:
        validate_json_depth(value, settings.max_json_depth)
        return component_adapter.validate_python(value), []
    except LimitExceededError as e:
        errors = [ComponentError(kind=ErrorKind.LIMIT_EXCEEDED, message=str(e))]
    except pydantic.ValidationError as e:
        errors = convert_errors(e)

    logger.debug(
        "component_rejected",
        kind=errors[0].kind.value,
        path=errors[0].pointer,
        error_count=len(errors),
    )
    return None, errors


def validate_component(
    value: Any, settings: Settings | None = None
) -> Result[Component, ComponentError]:
    """
    Validate a raw value as a component tree.

    Nesting deeper than ``settings.max_json_depth`` is rejected with
    ``limit_exceeded`` before schema validation.

    Args:
        value: Untrusted structured value, e.g. parsed JSON
        settings: Limits to apply (environment settings if omitted)

    Returns:
        Success with the typed tree, or Failure with the first error
    """
    component, errors = _collect_errors(value, settings)
    if errors:
        return Failure(errors[0])
    return Success(component)


def assert_is_component(value: Any, settings: Settings | None = None) -> Component:
    """
    Validate a raw value as a component tree, raising on failure.

    Args:
        value: Untrusted structured value
        settings: Limits to apply (environment settings if omitted)

    Returns:
        The typed tree

    Raises:
        ComponentValidationError: If the value is not a valid component
    """
    component, errors = _collect_errors(value, settings)
    if errors:
        raise ComponentValidationError(errors)
    return component


def is_component(value: Any) -> bool:
    """Check whether a raw value is a valid component tree."""
    return is_successful(validate_component(value))


def parse_component(
    data: str | bytes, settings: Settings | None = None
) -> Result[Component, ComponentError]:
    """
    Decode JSON text and validate it as a component tree.

    Size is checked before decoding and nesting depth before validation.

    Args:
        data: JSON text
        settings: Limits to apply (environment settings if omitted)

    Returns:
        Success with the typed tree, or Failure with the first error
    """
    settings = settings or get_settings()

    try:
        validate_json_size(data, settings.max_content_size, "Component JSON")
        raw = decode_json(data)
    except LimitExceededError as e:
        logger.warning("component_limit_exceeded", error=str(e))
        return Failure(ComponentError(kind=ErrorKind.LIMIT_EXCEEDED, message=str(e)))
    except JSONParseError as e:
        logger.debug("component_json_invalid", error=str(e))
        return Failure(ComponentError(kind=ErrorKind.INVALID_JSON, message=str(e)))

    return validate_component(raw, settings)


def dump_component(component: Node) -> str:
    """Encode a validated component as compact JSON."""
    return safe_json_dumps(component.to_dict())
