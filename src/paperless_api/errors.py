"""
Exception hierarchy for the Paperless API client.

Running out of records is signalled with ``StopIteration`` and is never one
of these exceptions.
"""

from typing import Optional


class PaperlessError(Exception):
    """Base exception for Paperless client errors."""

    pass


class TransportError(PaperlessError):
    """A request failed: connection error, timeout or non-2xx response."""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        self.url = url
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

        if status_code is not None:
            super().__init__(f"Paperless API error {status_code} for {url}: {message}")
        else:
            super().__init__(f"Request to {url} failed: {message}")


class DecodeError(PaperlessError):
    """Response body is not valid JSON or does not match the expected shape."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        if url:
            super().__init__(f"Cannot decode response from {url}: {message}")
        else:
            super().__init__(f"Cannot decode response: {message}")
