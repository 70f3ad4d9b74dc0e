"""
Record schemas and filters for Paperless resources.

Every record class exposes ``from_api_response(data)`` and is usable as
the schema of a paginated listing.
"""

from .document import Document
from .filters import DocumentFilter, NameFilter
from .matching import Correspondent, DocumentType, StoragePath, Tag
from .saved_view import FilterRule, FilterRuleType, SavedView

__all__ = [
    "Correspondent",
    "Document",
    "DocumentFilter",
    "DocumentType",
    "FilterRule",
    "FilterRuleType",
    "NameFilter",
    "SavedView",
    "StoragePath",
    "Tag",
]
