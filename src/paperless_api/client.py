"""
Paperless-ngx API client implementation.
"""

import logging
from typing import Optional, Type, TypeVar, Union

import requests

from .config import ConfigValidationError, PaperlessConfig
from .errors import DecodeError
from .page import decode_record
from .paginator import Paginator
from .query import FilterParams, build_url, resource_url
from .schemas import (
    Correspondent,
    Document,
    DocumentFilter,
    DocumentType,
    NameFilter,
    SavedView,
    StoragePath,
    Tag,
)
from .schemas.filters import QueryFilter
from .transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

Filter = Union[QueryFilter, FilterParams, None]


def _params(flt: Filter) -> FilterParams:
    if flt is None:
        return ()
    if isinstance(flt, QueryFilter):
        return flt.to_params()
    return list(flt)


class PaperlessClient:
    """
    Client for the Paperless-ngx API.

    Listing operations return a lazy ``Paginator`` and perform no request
    until iterated. The client holds no per-iteration state, so one client
    can back any number of paginators.
    """

    DEFAULT_TIMEOUT = Transport.DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        auth_scheme: str = "Bearer",
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize Paperless client.

        Args:
            base_url: API root (e.g., "https://paperless.example.com/api/")
            token: API token for authentication
            timeout: Request timeout in seconds
            auth_scheme: Authorization header scheme
            session: Optional pre-configured requests session
        """
        self._base_url = base_url
        self._token = token
        self._transport = Transport(
            token, timeout=timeout, auth_scheme=auth_scheme, session=session
        )

    @classmethod
    def from_config(
        cls, config: PaperlessConfig, session: Optional[requests.Session] = None
    ) -> "PaperlessClient":
        """Create a client from loaded configuration."""
        errors = config.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))
        return cls(
            config.base_url,
            config.token,
            timeout=config.timeout_seconds,
            auth_scheme=config.auth_scheme,
            session=session,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return f"PaperlessClient({self._base_url!r})"

    # Listing

    def paginate(
        self, resource_path: str, schema: Type[T], params: FilterParams = ()
    ) -> Paginator[T]:
        """
        Iterate over every record of a list endpoint.

        Args:
            resource_path: Endpoint name relative to the API root, e.g. "tags"
            schema: Record class used to decode each result
            params: Ordered filter pairs

        Returns:
            Paginator yielding ``schema`` instances
        """
        url = build_url(self._base_url, resource_path, params)
        return Paginator(self._transport, url, schema)

    def tags(self, filter: Union[NameFilter, FilterParams, None] = None) -> Paginator[Tag]:
        """List all tags."""
        return self.paginate("tags", Tag, _params(filter))

    def correspondents(
        self, filter: Union[NameFilter, FilterParams, None] = None
    ) -> Paginator[Correspondent]:
        """List all correspondents."""
        return self.paginate("correspondents", Correspondent, _params(filter))

    def document_types(
        self, filter: Union[NameFilter, FilterParams, None] = None
    ) -> Paginator[DocumentType]:
        """List all document types."""
        return self.paginate("document_types", DocumentType, _params(filter))

    def storage_paths(
        self, filter: Union[NameFilter, FilterParams, None] = None
    ) -> Paginator[StoragePath]:
        return self.paginate("storage_paths", StoragePath, _params(filter))

    def saved_views(
        self, filter: Union[NameFilter, FilterParams, None] = None
    ) -> Paginator[SavedView]:
        return self.paginate("saved_views", SavedView, _params(filter))

    def documents(
        self, filter: Union[DocumentFilter, FilterParams, None] = None
    ) -> Paginator[Document]:
        """
        List documents.

        Args:
            filter: DocumentFilter or raw filter pairs; all documents if None

        Yields:
            Document objects, lazily, page by page
        """
        return self.paginate("documents", Document, _params(filter))

    def saved_view_documents(self, view: SavedView) -> Paginator[Document]:
        """List the documents selected by a saved view's filter rules."""
        flt = DocumentFilter.from_filter_rules(view.filter_rules)
        if view.sort_field:
            flt.ordering = f"-{view.sort_field}" if view.sort_reverse else view.sort_field
        return self.documents(flt)

    # Single records

    def _get(self, resource_path: str, record_id: int, schema: Type[T]) -> T:
        url = resource_url(self._base_url, resource_path, record_id)
        return decode_record(self._transport.fetch(url), schema, url=url)

    def tag(self, tag_id: int) -> Tag:
        return self._get("tags", tag_id, Tag)

    def correspondent(self, correspondent_id: int) -> Correspondent:
        return self._get("correspondents", correspondent_id, Correspondent)

    def document_type(self, document_type_id: int) -> DocumentType:
        return self._get("document_types", document_type_id, DocumentType)

    def storage_path(self, storage_path_id: int) -> StoragePath:
        return self._get("storage_paths", storage_path_id, StoragePath)

    def saved_view(self, view_id: int) -> SavedView:
        return self._get("saved_views", view_id, SavedView)

    def document(self, document_id: int) -> Document:
        """
        Get full document details by ID.

        Raises:
            TransportError: Request failed (404 for unknown ids)
            DecodeError: Response does not describe a document
        """
        return self._get("documents", document_id, Document)

    # Files

    def document_size(self, document_id: int, original: bool = False) -> int:
        """
        Size in bytes of a document's file, without downloading it.

        Args:
            document_id: Paperless document ID
            original: Size of the original upload instead of the archived PDF
        """
        url = resource_url(self._base_url, "documents", document_id, "download")
        if original:
            url += "?original=true"
        headers = self._transport.head(url)
        length = headers.get("Content-Length")
        try:
            return int(length)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise DecodeError(f"missing or invalid Content-Length: {length!r}", url=url)

    def document_download(self, document_id: int, original: bool = False) -> bytes:
        """
        Download a document file.

        Args:
            document_id: Paperless document ID
            original: Download the original upload instead of the archived PDF

        Returns:
            File bytes
        """
        url = resource_url(self._base_url, "documents", document_id, "download")
        if original:
            url += "?original=true"
        logger.debug("Downloading document %d (original=%s)", document_id, original)
        return self._transport.fetch(url)
