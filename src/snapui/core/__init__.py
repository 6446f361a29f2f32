"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import SnapUIError, ValidationError, JSONParseError, LimitExceededError
from .logging_config import configure_logging, get_logger, LogContext
from .json import decode_json, safe_json_dumps, validate_json_size, validate_json_depth
from .id import InterfaceID, new_interface_id, is_interface_id, extract_timestamp


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "SnapUIError",
    "ValidationError",
    "JSONParseError",
    "LimitExceededError",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "decode_json",
    "safe_json_dumps",
    "validate_json_size",
    "validate_json_depth",
    # IDs
    "InterfaceID",
    "new_interface_id",
    "is_interface_id",
    "extract_timestamp",
]
