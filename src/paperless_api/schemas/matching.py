"""
Tag, correspondent, document type and storage path records.

These are the "matching objects" of Paperless-ngx: small named entities
that documents are classified with.
"""

from dataclasses import dataclass
from typing import Optional

from .base import optional, require


@dataclass
class Tag:
    """Paperless tag."""

    id: int
    name: str
    slug: str = ""
    color: Optional[str] = None  # e.g. "#a6cee3"
    text_color: Optional[str] = None
    match: str = ""
    matching_algorithm: int = 0
    is_insensitive: bool = True
    is_inbox_tag: bool = False
    document_count: int = 0

    @classmethod
    def from_api_response(cls, data: dict) -> "Tag":
        """Create from Paperless API response."""
        return cls(
            id=require(data, "id", int),
            name=require(data, "name", str),
            slug=optional(data, "slug", str, ""),
            color=optional(data, "color", str),
            text_color=optional(data, "text_color", str),
            match=optional(data, "match", str, ""),
            matching_algorithm=optional(data, "matching_algorithm", int, 0),
            is_insensitive=optional(data, "is_insensitive", bool, True),
            is_inbox_tag=optional(data, "is_inbox_tag", bool, False),
            document_count=optional(data, "document_count", int, 0),
        )


@dataclass
class Correspondent:
    """
    Paperless correspondent.

    The party a document is related to: a bank, a school, a friend.
    """

    id: int
    name: str
    slug: str = ""
    match: str = ""
    matching_algorithm: int = 0
    is_insensitive: bool = True
    document_count: int = 0
    last_correspondence: Optional[str] = None  # ISO date

    @classmethod
    def from_api_response(cls, data: dict) -> "Correspondent":
        """Create from Paperless API response."""
        return cls(
            id=require(data, "id", int),
            name=require(data, "name", str),
            slug=optional(data, "slug", str, ""),
            match=optional(data, "match", str, ""),
            matching_algorithm=optional(data, "matching_algorithm", int, 0),
            is_insensitive=optional(data, "is_insensitive", bool, True),
            document_count=optional(data, "document_count", int, 0),
            last_correspondence=optional(data, "last_correspondence", str),
        )


@dataclass
class DocumentType:
    """Paperless document type (e.g. "Invoice", "Receipt")."""

    id: int
    name: str
    slug: str = ""
    match: str = ""
    matching_algorithm: int = 0
    is_insensitive: bool = True
    document_count: int = 0

    @classmethod
    def from_api_response(cls, data: dict) -> "DocumentType":
        return cls(
            id=require(data, "id", int),
            name=require(data, "name", str),
            slug=optional(data, "slug", str, ""),
            match=optional(data, "match", str, ""),
            matching_algorithm=optional(data, "matching_algorithm", int, 0),
            is_insensitive=optional(data, "is_insensitive", bool, True),
            document_count=optional(data, "document_count", int, 0),
        )


@dataclass
class StoragePath:
    """Paperless storage path."""

    id: int
    name: str
    slug: str = ""
    path: str = ""  # filename template, e.g. "{correspondent}/{title}"
    document_count: int = 0

    @classmethod
    def from_api_response(cls, data: dict) -> "StoragePath":
        return cls(
            id=require(data, "id", int),
            name=require(data, "name", str),
            slug=optional(data, "slug", str, ""),
            path=optional(data, "path", str, ""),
            document_count=optional(data, "document_count", int, 0),
        )
