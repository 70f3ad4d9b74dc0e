"""
Paperless document record.
"""

from dataclasses import dataclass, field
from typing import Optional

from .base import optional, optional_id_list, require


@dataclass
class Document:
    """Paperless document representation."""

    id: int
    title: str
    content: str = ""  # OCR text

    # Dates as returned by the API (ISO 8601 strings)
    created: Optional[str] = None
    created_date: Optional[str] = None
    modified: Optional[str] = None
    added: Optional[str] = None

    # Classification (ids of the related objects)
    correspondent: Optional[int] = None
    document_type: Optional[int] = None
    storage_path: Optional[int] = None
    tags: list[int] = field(default_factory=list)

    # File info
    archive_serial_number: Optional[int] = None
    original_file_name: Optional[str] = None
    archived_file_name: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Document":
        """Create from Paperless API response."""
        return cls(
            id=require(data, "id", int),
            title=require(data, "title", str),
            content=optional(data, "content", str, ""),
            created=optional(data, "created", str),
            created_date=optional(data, "created_date", str),
            modified=optional(data, "modified", str),
            added=optional(data, "added", str),
            correspondent=optional(data, "correspondent", int),
            document_type=optional(data, "document_type", int),
            storage_path=optional(data, "storage_path", int),
            tags=optional_id_list(data, "tags"),
            archive_serial_number=optional(data, "archive_serial_number", int),
            original_file_name=optional(data, "original_file_name", str),
            archived_file_name=optional(data, "archived_file_name", str),
        )
