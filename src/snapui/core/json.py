"""Fast JSON decoding and encoding with limits for untrusted content."""

from typing import Any
import json

import msgspec
import orjson

from .errors import JSONParseError, LimitExceededError

_decoder = msgspec.json.Decoder()
_encoder = msgspec.json.Encoder()


def decode_json(data: str | bytes) -> Any:
    """
    Decode JSON text into plain Python values.

    Args:
        data: JSON text

    Returns:
        Decoded value (dict, list, str, int, float, bool or None)

    Raises:
        JSONParseError: If the text is not valid JSON
        LimitExceededError: If the document nests too deeply for the decoder
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e
    except RecursionError as e:
        raise LimitExceededError("JSON nesting too deep to decode", e) from e


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Integers outside 64-bit range, non-str keys
            pass

        try:
            return _encoder.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    return json.dumps(obj, indent=indent if indent > 0 else None)


def validate_json_size(data: str | bytes, max_size: int, name: str = "JSON") -> None:
    """
    Validate JSON size before decoding.

    Args:
        data: JSON text to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        LimitExceededError: If size exceeds limit
    """
    size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
    if size > max_size:
        raise LimitExceededError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 256, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent stack overflow during validation.

    Args:
        obj: Decoded object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        LimitExceededError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise LimitExceededError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
