"""Validation tests."""

import pytest
from hypothesis import given, strategies as st
from returns.pipeline import is_successful

from snapui import (
    ComponentValidationError,
    ErrorKind,
    Form,
    Panel,
    ValidationError,
    assert_is_component,
    dump_component,
    is_component,
    parse_component,
    validate_component,
)
from snapui.core.config import Settings


def _failure(raw):
    result = validate_component(raw)
    assert not is_successful(result)
    return result.failure()


# ============================================================================
# Success path
# ============================================================================

@pytest.mark.unit
def test_validate_component_success(scenario_panel):
    """Valid trees come back as typed nodes."""
    result = validate_component(scenario_panel)

    assert is_successful(result)
    panel = result.unwrap()
    assert isinstance(panel, Panel)
    assert isinstance(panel.children[1], Form)


@pytest.mark.unit
def test_is_component(scenario_panel):
    """is_component is a plain boolean check."""
    assert is_component(scenario_panel) is True
    assert is_component({"type": "bogus"}) is False
    assert is_component("text") is False
    assert is_component(None) is False


@pytest.mark.unit
def test_assert_is_component_returns_tree(scenario_panel):
    """assert_is_component returns the typed tree."""
    assert assert_is_component(scenario_panel).to_dict() == scenario_panel


# ============================================================================
# Error taxonomy
# ============================================================================

@pytest.mark.unit
def test_unknown_type():
    """Unknown tags are rejected and the tag is reported."""
    error = _failure({"type": "bogus"})

    assert error.kind is ErrorKind.UNKNOWN_TYPE
    assert error.path == ()
    assert error.pointer == "/"
    assert error.field == "type"
    assert "bogus" in error.message
    assert error.value == {"type": "bogus"}


@pytest.mark.unit
def test_missing_type_tag():
    """A node without a type tag reports the missing field."""
    error = _failure({"value": "x"})

    assert error.kind is ErrorKind.MISSING_FIELD
    assert error.field == "type"


@pytest.mark.unit
def test_missing_required_name():
    """Inputs without a name report the missing field and its location."""
    error = _failure({"type": "panel", "children": [{"type": "input", "value": "x"}]})

    assert error.kind is ErrorKind.MISSING_FIELD
    assert error.field == "name"
    assert error.path == ("children", 0, "name")
    assert error.pointer == "/children/0/name"


@pytest.mark.unit
def test_form_missing_name():
    """Forms without a name are rejected."""
    error = _failure({"type": "form", "children": []})

    assert error.kind is ErrorKind.MISSING_FIELD
    assert error.field == "name"


@pytest.mark.unit
def test_type_mismatch():
    """Wrong primitive kinds report field and offending value."""
    error = _failure({"type": "text", "value": 5})

    assert error.kind is ErrorKind.TYPE_MISMATCH
    assert error.field == "value"
    assert error.value == 5


@pytest.mark.unit
def test_no_coercion_of_primitives():
    """Numbers are not strings and strings are not lists."""
    assert _failure({"type": "heading", "value": 1.5}).kind is ErrorKind.TYPE_MISMATCH
    assert _failure({"type": "panel", "children": "abc"}).kind is ErrorKind.TYPE_MISMATCH


@pytest.mark.unit
def test_explicit_null_rejected():
    """Optional fields may be omitted but not null."""
    error = _failure({"type": "input", "name": "a", "value": None})

    assert error.kind is ErrorKind.TYPE_MISMATCH
    assert error.field == "value"


@pytest.mark.unit
def test_structural_violation_panel_in_form():
    """A panel directly under a form is a structural violation."""
    raw = {
        "type": "panel",
        "children": [
            {
                "type": "form",
                "name": "f",
                "children": [
                    {"type": "input", "name": "a"},
                    {"type": "panel", "children": [{"type": "input", "name": "b"}]},
                ],
            }
        ],
    }
    error = _failure(raw)

    assert error.kind is ErrorKind.STRUCTURAL_VIOLATION
    assert error.path == ("children", 0, "children", 1)
    assert error.value == raw["children"][0]["children"][1]
    assert "panel" in error.message


@pytest.mark.unit
@pytest.mark.parametrize("kind", ["text", "heading", "copyable", "divider", "spinner", "form"])
def test_structural_violation_other_kinds_in_form(kind):
    """Only inputs and buttons may appear under a form."""
    error = _failure({"type": "form", "name": "f", "children": [{"type": kind}]})

    assert error.kind is ErrorKind.STRUCTURAL_VIOLATION


@pytest.mark.unit
def test_unknown_type_in_form_is_not_structural():
    """An unknown tag under a form is still an unknown type."""
    error = _failure({"type": "form", "name": "f", "children": [{"type": "bogus"}]})

    assert error.kind is ErrorKind.UNKNOWN_TYPE


@pytest.mark.unit
def test_unexpected_field():
    """Fields of another node kind are rejected."""
    error = _failure({"type": "divider", "value": "x"})

    assert error.kind is ErrorKind.UNEXPECTED_FIELD
    assert error.field == "value"


@pytest.mark.unit
def test_python_attribute_name_is_not_a_wire_field():
    """Only the camelCase wire name is accepted."""
    error = _failure({"type": "button", "value": "Go", "button_type": "submit"})

    assert error.kind is ErrorKind.UNEXPECTED_FIELD
    assert error.field == "button_type"


@pytest.mark.unit
def test_invalid_literal():
    """Enum-like fields only take their listed values."""
    error = _failure({"type": "button", "value": "Go", "variant": "danger"})

    assert error.kind is ErrorKind.INVALID_LITERAL
    assert error.field == "variant"
    assert error.value == "danger"


@pytest.mark.unit
def test_non_string_type_tag():
    """A type tag that is not a string is a type mismatch, not an unknown type."""
    error = _failure({"type": ["x"]})

    assert error.kind is ErrorKind.TYPE_MISMATCH


@pytest.mark.unit
def test_non_mapping_node():
    """Nodes must be mappings."""
    result = validate_component(["type", "text"])

    assert not is_successful(result)


# ============================================================================
# Depth
# ============================================================================

def _nested_panels(depth):
    raw = {"type": "text", "value": "leaf"}
    for _ in range(depth):
        raw = {"type": "panel", "children": [raw]}
    return raw


@pytest.mark.unit
def test_nesting_within_limit_accepted(settings):
    """Trees nested below the configured depth validate."""
    assert is_successful(validate_component(_nested_panels(100), settings))


@pytest.mark.unit
def test_nesting_beyond_limit_rejected():
    """Trees nested beyond max_json_depth report a limit, not a type error."""
    result = validate_component(_nested_panels(20), Settings(max_json_depth=10))

    assert result.failure().kind is ErrorKind.LIMIT_EXCEEDED


@pytest.mark.unit
def test_default_limit_rejects_very_deep_tree(settings):
    """Hundreds of nested panels are rejected as too deep under default settings."""
    result = validate_component(_nested_panels(300), settings)

    assert result.failure().kind is ErrorKind.LIMIT_EXCEEDED


@pytest.mark.unit
def test_validator_recursion_guard_reports_limit():
    """Nesting past the validator's own recursion guard is a limit, not a mismatch."""
    result = validate_component(_nested_panels(300), Settings(max_json_depth=5000))

    error = result.failure()
    assert error.kind is ErrorKind.LIMIT_EXCEEDED
    assert "deep" in error.message


@pytest.mark.unit
def test_assert_is_component_depth_limit():
    """The raising variant applies the same limit."""
    with pytest.raises(ComponentValidationError) as exc_info:
        assert_is_component(_nested_panels(20), Settings(max_json_depth=10))

    assert exc_info.value.error.kind is ErrorKind.LIMIT_EXCEEDED


# ============================================================================
# Ordering
# ============================================================================

@pytest.mark.unit
def test_first_error_depth_first_in_child_order():
    """The first failure is reported, depth-first and in child order."""
    raw = {
        "type": "panel",
        "children": [
            {"type": "panel", "children": [{"type": "text"}]},
            {"type": "bogus"},
        ],
    }
    error = _failure(raw)

    assert error.kind is ErrorKind.MISSING_FIELD
    assert error.path == ("children", 0, "children", 0, "value")


@pytest.mark.unit
def test_assert_is_component_collects_all_errors():
    """The raised error carries every failure in report order."""
    raw = {"type": "panel", "children": [{"type": "text"}, {"type": "bogus"}]}

    with pytest.raises(ComponentValidationError) as exc_info:
        assert_is_component(raw)

    exc = exc_info.value
    assert isinstance(exc, ValidationError)
    assert exc.error is exc.errors[0]
    assert [e.kind for e in exc.errors] == [ErrorKind.MISSING_FIELD, ErrorKind.UNKNOWN_TYPE]
    assert "/children/0/value" in str(exc)


@pytest.mark.unit
def test_errors_are_reproducible():
    """The same input always yields the same first error."""
    raw = {
        "type": "panel",
        "children": [{"type": "input"}, {"type": "form", "name": 1, "children": [{"type": "x"}]}],
    }

    assert _failure(raw) == _failure(raw)


@pytest.mark.unit
def test_error_to_dict():
    """Errors export to plain dictionaries."""
    error = _failure({"type": "panel", "children": [{"type": "bogus"}]})

    assert error.to_dict() == {
        "kind": "unknown_type",
        "message": "Unknown node type 'bogus'",
        "path": ["children", 0],
        "field": "type",
        "value": {"type": "bogus"},
    }


# ============================================================================
# JSON entry point
# ============================================================================

@pytest.mark.unit
def test_parse_component_success(settings):
    """JSON text is decoded and validated."""
    result = parse_component('{"type": "text", "value": "Hi"}', settings)

    assert is_successful(result)
    assert result.unwrap().value == "Hi"


@pytest.mark.unit
def test_parse_component_bytes(settings):
    """Bytes are accepted as well as text."""
    assert is_successful(parse_component(b'{"type": "divider"}', settings))


@pytest.mark.unit
def test_parse_component_invalid_json(settings):
    """Broken JSON is reported, not repaired."""
    result = parse_component('{"type": "text", "value": ', settings)

    assert result.failure().kind is ErrorKind.INVALID_JSON


@pytest.mark.unit
def test_parse_component_size_limit():
    """Oversized content is rejected before decoding."""
    result = parse_component('{"type": "text", "value": "0123456789"}', Settings(max_content_size=10))

    assert result.failure().kind is ErrorKind.LIMIT_EXCEEDED


@pytest.mark.unit
def test_parse_component_depth_limit():
    """Content nested deeper than allowed is rejected."""
    text = '{"type": "divider"}'
    for _ in range(5):
        text = '{"type": "panel", "children": [' + text + "]}"

    result = parse_component(text, Settings(max_json_depth=4))

    assert result.failure().kind is ErrorKind.LIMIT_EXCEEDED


@pytest.mark.unit
def test_parse_component_schema_error(settings):
    """Schema failures from JSON input keep their kind."""
    result = parse_component('{"type": "bogus"}', settings)

    assert result.failure().kind is ErrorKind.UNKNOWN_TYPE


@pytest.mark.unit
def test_dump_component(scenario_panel):
    """Dumped JSON parses back to the same tree."""
    panel = assert_is_component(scenario_panel)

    assert parse_component(dump_component(panel)).unwrap() == panel


# ============================================================================
# Properties
# ============================================================================

@given(st.text().filter(lambda t: t not in {
    "copyable", "divider", "heading", "panel", "spinner", "text", "button", "input", "form",
}))
def test_unknown_tags_always_rejected(tag):
    """Property test: any tag outside the closed set is an unknown type."""
    error = _failure({"type": tag})
    assert error.kind is ErrorKind.UNKNOWN_TYPE


@given(st.text())
def test_any_text_value_accepted(value):
    """Property test: any string is a valid text value."""
    assert is_component({"type": "text", "value": value})
