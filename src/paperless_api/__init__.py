"""
Paperless-ngx API client.

Provides:
- Lazy, page-by-page iteration over list endpoints (tags, documents, ...)
- Typed records with forward-compatible decoding
- Document filters, including filters derived from saved views
- Single-record lookups and document downloads

Supports a static API token sent with every request.
"""

from .client import PaperlessClient
from .config import ConfigValidationError, PaperlessConfig, load_config
from .errors import DecodeError, PaperlessError, TransportError
from .page import Page
from .paginator import Paginator, PaginatorState
from .query import FilterParams, build_url
from .schemas import (
    Correspondent,
    Document,
    DocumentFilter,
    DocumentType,
    FilterRule,
    FilterRuleType,
    NameFilter,
    SavedView,
    StoragePath,
    Tag,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigValidationError",
    "Correspondent",
    "DecodeError",
    "Document",
    "DocumentFilter",
    "DocumentType",
    "FilterParams",
    "FilterRule",
    "FilterRuleType",
    "NameFilter",
    "Page",
    "PaperlessClient",
    "PaperlessConfig",
    "PaperlessError",
    "Paginator",
    "PaginatorState",
    "SavedView",
    "StoragePath",
    "Tag",
    "TransportError",
    "build_url",
    "load_config",
]
