"""Form state derivation.

Walks a validated component tree and collects the current values of its
inputs. Inputs contribute ``name -> value``; forms namespace the values of
their own inputs under the form name; panels thread the accumulator through
their children left to right. Every other node kind contributes nothing.
"""

from functools import reduce
from typing import Callable, Mapping, Sequence, Union

from .nodes import Component, Form, Input, NodeType, Panel

ComponentState = dict[str, Union[str, "ComponentState"]]

_Reducer = Callable[[Mapping[str, object], Component], ComponentState]


def _fold(state: Mapping[str, object], children: Sequence[Component]) -> ComponentState:
    return reduce(construct_state, children, dict(state))


def _reduce_panel(state: Mapping[str, object], panel: Panel) -> ComponentState:
    return _fold(state, panel.children)


def _reduce_form(state: Mapping[str, object], form: Form) -> ComponentState:
    # Form state is rebuilt from scratch, it does not merge with prior values.
    return {**state, form.name: _fold({}, form.children)}


def _reduce_input(state: Mapping[str, object], node: Input) -> ComponentState:
    return {**state, node.name: node.value if node.value is not None else ""}


def _unchanged(state: Mapping[str, object], _: Component) -> ComponentState:
    return dict(state)


_REDUCERS: dict[str, _Reducer] = {
    NodeType.PANEL.value: _reduce_panel,
    NodeType.FORM.value: _reduce_form,
    NodeType.INPUT.value: _reduce_input,
    NodeType.COPYABLE.value: _unchanged,
    NodeType.DIVIDER.value: _unchanged,
    NodeType.HEADING.value: _unchanged,
    NodeType.SPINNER.value: _unchanged,
    NodeType.TEXT.value: _unchanged,
    NodeType.BUTTON.value: _unchanged,
}


def construct_state(state: Mapping[str, object], component: Component) -> ComponentState:
    """
    Fold one component into a state mapping.

    Keys are only ever added or overwritten, never removed. The passed-in
    mapping is not modified; a new dict is returned.

    Args:
        state: Accumulated state so far
        component: Validated component

    Returns:
        Updated state

    Raises:
        TypeError: If the component kind has no reducer (unvalidated input)
    """
    try:
        reducer = _REDUCERS[component.type]
    except KeyError:
        raise TypeError(f"Cannot derive state from node type {component.type!r}") from None
    return reducer(state, component)


def derive_state(
    component: Component, seed: Mapping[str, object] | None = None
) -> ComponentState:
    """Derive the state of a whole document, seeded with previously known state."""
    return construct_state(seed or {}, component)
