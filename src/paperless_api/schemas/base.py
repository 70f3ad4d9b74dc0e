"""
Field access helpers shared by the record schemas.

Records are built from decoded JSON objects through a
``from_api_response(data)`` classmethod. Keys a record does not know about
are ignored so newer servers keep working.
"""

from typing import Any, Optional, Tuple, Type, TypeVar, Union

from ..errors import DecodeError

T = TypeVar("T")

_Kind = Union[type, Tuple[type, ...]]


def _type_name(kind: _Kind) -> str:
    if isinstance(kind, tuple):
        return " or ".join(k.__name__ for k in kind)
    return kind.__name__


def _matches(value: Any, kind: _Kind) -> bool:
    # bool is an int subclass; JSON true/false must not pass as an id or count
    if isinstance(value, bool):
        kinds = kind if isinstance(kind, tuple) else (kind,)
        return bool in kinds
    return isinstance(value, kind)


def ensure_object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise DecodeError(f"expected {what} to be a JSON object, got {type(data).__name__}")
    return data


def require(data: dict, key: str, kind: _Kind) -> Any:
    """Return ``data[key]``, raising DecodeError if missing or mistyped."""
    if key not in data:
        raise DecodeError(f"missing required field '{key}'")
    value = data[key]
    if not _matches(value, kind):
        raise DecodeError(
            f"field '{key}' must be {_type_name(kind)}, got {type(value).__name__}"
        )
    return value


def optional(data: dict, key: str, kind: _Kind, default: Optional[Any] = None) -> Any:
    """Return ``data[key]`` if present and not null, else ``default``."""
    value = data.get(key)
    if value is None:
        return default
    if not _matches(value, kind):
        raise DecodeError(
            f"field '{key}' must be {_type_name(kind)}, got {type(value).__name__}"
        )
    return value


def optional_id_list(data: dict, key: str) -> list[int]:
    """Return a list of integer ids, empty when missing."""
    values = optional(data, key, list, default=[])
    for value in values:
        if not _matches(value, int):
            raise DecodeError(f"field '{key}' must contain integers only")
    return list(values)


def build(schema: Type[T], data: Any) -> T:
    """Build a record, turning schema failures into DecodeError."""
    obj = ensure_object(data, schema.__name__)
    try:
        return schema.from_api_response(obj)  # type: ignore[attr-defined]
    except DecodeError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"invalid {schema.__name__}: {e}") from e
