"""Interface Controller - stored UI documents and their form state."""

import threading
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .core.errors import SnapUIError, ValidationError
from .core.id import InterfaceID, new_interface_id
from .core.logging_config import LogContext, get_logger
from .nodes import Component, Node
from .state import ComponentState, construct_state
from .validation import assert_is_component

logger = get_logger(__name__)


class InterfaceNotFoundError(SnapUIError):
    """No interface is stored under the given ID."""

    def __init__(self, interface_id: str) -> None:
        super().__init__(f"Interface with id '{interface_id}' not found")
        self.interface_id = interface_id


class InterfaceAccessError(SnapUIError):
    """The caller does not own the interface."""

    def __init__(self, interface_id: str, owner: str) -> None:
        super().__init__(f"Interface not created by {owner}")
        self.interface_id = interface_id
        self.owner = owner


@dataclass(frozen=True)
class Interface:
    """A rendered document and the form state derived from it."""

    id: InterfaceID
    owner: str
    content: Component
    state: ComponentState


def _check_state(state: Any, path: str = "state") -> None:
    """Ensure a value is a mapping of strings to strings or nested mappings."""
    if not isinstance(state, Mapping):
        raise ValidationError(f"{path} must be a mapping, got {type(state).__name__}")
    for key, value in state.items():
        if not isinstance(key, str):
            raise ValidationError(f"{path} keys must be strings, got {key!r}")
        if isinstance(value, Mapping):
            _check_state(value, f"{path}.{key}")
        elif not isinstance(value, str):
            raise ValidationError(
                f"{path}.{key} must be a string or mapping, got {type(value).__name__}"
            )


class InterfaceController:
    """
    In-memory registry of interfaces, keyed by ID and owned by a caller.

    Updating content re-derives state seeded with the stored state, so values
    for inputs that disappeared from the new content are kept.
    """

    def __init__(self) -> None:
        self._interfaces: dict[str, Interface] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._interfaces)

    def create_interface(self, owner: str, content: Any) -> InterfaceID:
        """
        Validate content and store it with freshly derived state.

        Args:
            owner: Identifier of the creating caller
            content: Raw or typed component tree

        Returns:
            ID of the new interface

        Raises:
            ComponentValidationError: If content is not a valid component
        """
        component = assert_is_component(_as_raw(content))
        interface_id = new_interface_id()
        state = construct_state({}, component)

        with self._lock:
            self._interfaces[interface_id] = Interface(
                id=interface_id, owner=owner, content=component, state=state
            )

        logger.info("interface_created", interface_id=interface_id, owner=owner)
        return interface_id

    def get_interface(self, owner: str, interface_id: str) -> Interface:
        """Return a stored interface, checking ownership."""
        with self._lock:
            return _snapshot(self._get(owner, interface_id))

    def update_interface(self, owner: str, interface_id: str, content: Any) -> Interface:
        """
        Replace an interface's content and re-derive its state.

        Raises:
            ComponentValidationError: If content is not a valid component
            InterfaceNotFoundError: If the ID is unknown
            InterfaceAccessError: If owner does not own the interface
        """
        component = assert_is_component(_as_raw(content))

        with LogContext(interface_id=interface_id, owner=owner):
            with self._lock:
                current = self._get(owner, interface_id)
                updated = replace(
                    current,
                    content=component,
                    state=construct_state(current.state, component),
                )
                self._interfaces[current.id] = updated

            logger.info("interface_updated", state_keys=len(updated.state))
        return _snapshot(updated)

    def update_interface_state(self, interface_id: str, state: Mapping[str, Any]) -> Interface:
        """
        Replace the form state of an interface, e.g. after user input.

        Raises:
            ValidationError: If state is not a ComponentState
            InterfaceNotFoundError: If the ID is unknown
        """
        _check_state(state)

        with self._lock:
            current = self._interfaces.get(interface_id)
            if current is None:
                raise InterfaceNotFoundError(interface_id)
            updated = replace(current, state=_copy_state(state))
            self._interfaces[current.id] = updated

        logger.debug("interface_state_updated", interface_id=interface_id)
        return _snapshot(updated)

    def delete_interface(self, owner: str, interface_id: str) -> None:
        """Remove an interface, checking ownership."""
        with self._lock:
            current = self._get(owner, interface_id)
            del self._interfaces[current.id]

        logger.info("interface_deleted", interface_id=interface_id, owner=owner)

    def _get(self, owner: str, interface_id: str) -> Interface:
        interface = self._interfaces.get(interface_id)
        if interface is None:
            raise InterfaceNotFoundError(interface_id)
        if interface.owner != owner:
            raise InterfaceAccessError(interface_id, owner)
        return interface


def _as_raw(content: Any) -> Any:
    return content.to_dict() if isinstance(content, Node) else content


def _copy_state(state: Mapping[str, Any]) -> ComponentState:
    return {
        key: _copy_state(value) if isinstance(value, Mapping) else value
        for key, value in state.items()
    }


def _snapshot(interface: Interface) -> Interface:
    """Copy of an interface whose state callers may freely modify."""
    return replace(interface, state=_copy_state(interface.state))
