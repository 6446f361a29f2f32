"""ID Generation.

ULID-based identifiers for stored interfaces.

- ULIDs: Lexicographically sortable, timestamp-based
- Prefixed: ``ui_<ULID>`` so IDs are recognisable in logs
"""

from typing import NewType
from ulid import ULID

InterfaceID = NewType("InterfaceID", str)
"""Stored interface identifier"""


class Prefix:
    """ID prefix constants."""

    INTERFACE = "ui"


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"

    def timestamp(self, id_str: str) -> int:
        """Extract timestamp (milliseconds) from a (possibly prefixed) ULID."""
        try:
            ulid_str = id_str.split("_")[1] if "_" in id_str else id_str
            ulid = ULID.from_str(ulid_str)
            return int(ulid.timestamp * 1000)
        except (ValueError, IndexError):
            return 0


_generator = Generator()


def new_interface_id() -> InterfaceID:
    """Generate new interface ID."""
    return InterfaceID(_generator.generate_with_prefix(Prefix.INTERFACE))


def is_interface_id(value: str) -> bool:
    """Check whether a string looks like an interface ID."""
    prefix, _, rest = value.partition("_")
    if prefix != Prefix.INTERFACE or not rest:
        return False
    try:
        ULID.from_str(rest)
    except ValueError:
        return False
    return True


def extract_timestamp(id_str: str) -> int:
    """Extract creation timestamp (milliseconds) from an ID."""
    return _generator.timestamp(id_str)
