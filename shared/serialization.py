"""
JSON (de)serialization with the API's naming conventions.

Two presets share the same field rules (camelCase names, nulls omitted,
enums as names, ISO-8601 dates and durations) and differ only in whitespace:
indented for humans, compact for production payloads.
"""

from typing import Any, Optional, Tuple, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json as _to_json

T = TypeVar("T")

INDENT = 2


def to_json(obj: Any, compact: bool = False) -> str:
    """
    Serialize a record, a list of records or plain data to a JSON string.

    Args:
        obj: Object to serialize
        compact: Use compact formatting (default: indented)

    Returns:
        JSON string
    """
    return _to_json(
        obj,
        indent=None if compact else INDENT,
        by_alias=True,
        exclude_none=True,
    ).decode("utf-8")


def from_json(json_data: str, model_type: Type[T]) -> T:
    """
    Deserialize a JSON string into model_type.

    Raises:
        pydantic.ValidationError: If the JSON is malformed or fails validation
    """
    return TypeAdapter(model_type).validate_json(json_data)


def try_from_json(
    json_data: str,
    model_type: Type[T]
) -> Tuple[bool, Optional[T], Optional[str]]:
    """
    Deserialize without raising.

    Returns:
        (success, result, error message)
    """
    try:
        return True, from_json(json_data, model_type), None
    except ValidationError as e:
        return False, None, str(e)
