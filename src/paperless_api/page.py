"""
Decoding of paginated list responses.

Paperless wraps every list endpoint in the envelope
``{"count": int, "next": url|null, "previous": url|null, "results": [...]}``.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Type, TypeVar
from urllib.parse import urlsplit

from .errors import DecodeError
from .schemas.base import build

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One decoded page of results."""

    count: int
    next: Optional[str] = None
    previous: Optional[str] = None  # accepted, never followed
    results: list[T] = field(default_factory=list)


def _load_json(raw: bytes, url: Optional[str]) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, TypeError) as e:
        raise DecodeError(f"invalid JSON: {e}", url=url) from e


def _next_link(envelope: dict, url: Optional[str]) -> Optional[str]:
    """Validate the next link. Absent, null and "" all mean no further page."""
    key = "next"
    value = envelope.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise DecodeError(f"'{key}' must be a URL string, got {type(value).__name__}", url=url)
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise DecodeError(f"'{key}' is not an absolute URL: {value!r}", url=url)
    return value


def decode_page(raw: bytes, schema: Type[T], url: Optional[str] = None) -> Page[T]:
    """
    Decode a list response.

    Args:
        raw: Response body
        schema: Record class with a ``from_api_response`` classmethod
        url: URL the body came from, for error messages

    Returns:
        Page with typed results

    Raises:
        DecodeError: Body is not JSON, the envelope is malformed, a link is
            not an absolute URL, or a result fails validation
    """
    envelope = _load_json(raw, url)
    if not isinstance(envelope, dict):
        raise DecodeError(
            f"expected a JSON object envelope, got {type(envelope).__name__}", url=url
        )

    count = envelope.get("count")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise DecodeError(f"'count' must be a non-negative integer, got {count!r}", url=url)

    results = envelope.get("results")
    if not isinstance(results, list):
        raise DecodeError(
            f"'results' must be a list, got {type(results).__name__}", url=url
        )

    records = []
    for index, item in enumerate(results):
        try:
            records.append(build(schema, item))
        except DecodeError as e:
            raise DecodeError(f"results[{index}]: {e.message}", url=url) from e

    previous = envelope.get("previous")
    return Page(
        count=count,
        next=_next_link(envelope, url),
        previous=previous if isinstance(previous, str) and previous else None,
        results=records,
    )


def decode_record(raw: bytes, schema: Type[T], url: Optional[str] = None) -> T:
    """Decode a detail response holding a single record."""
    data = _load_json(raw, url)
    try:
        return build(schema, data)
    except DecodeError as e:
        raise DecodeError(e.message, url=url) from e
