"""
Request URL construction.

Pure functions only; nothing here performs I/O. ``next`` links returned by
the server are used verbatim by the paginator and never pass through here.
"""

from typing import Sequence, Tuple
from urllib.parse import quote, urlencode

# Ordered (key, value) pairs; duplicate keys express multi-valued filters
FilterParams = Sequence[Tuple[str, str]]


def _join(base: str, resource_path: str) -> str:
    path = resource_path.strip("/")
    return f"{base.rstrip('/')}/{path}/"


def encode_params(params: FilterParams) -> str:
    """Percent-encode pairs into a query string, keeping caller order."""
    return urlencode([(str(k), str(v)) for k, v in params], quote_via=quote)


def build_url(base: str, resource_path: str, params: FilterParams = ()) -> str:
    """
    Build a list endpoint URL.

    Args:
        base: API root, e.g. "https://paperless.example.com/api/"
        resource_path: Resource name, e.g. "tags"
        params: Filter pairs appended as the query string

    Returns:
        "<base>/<resource>/" followed by "?<query>" when params are given
    """
    url = _join(base, resource_path)
    query = encode_params(params)
    return f"{url}?{query}" if query else url


def resource_url(base: str, resource_path: str, record_id: int, *suffix: str) -> str:
    """Build a detail URL such as "<base>/documents/12/download/"."""
    parts = [resource_path.strip("/"), str(int(record_id)), *(s.strip("/") for s in suffix)]
    return _join(base, "/".join(parts))
