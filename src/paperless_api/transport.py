"""
HTTP transport: one authenticated request per call, no retries.
"""

import logging
from typing import Mapping, Optional

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)


class Transport:
    """
    Thin wrapper around a ``requests.Session`` carrying the auth headers.

    Every call issues exactly one request. Connection failures, timeouts
    and non-2xx responses are all raised as ``TransportError``; deciding
    whether to try again is left to the caller.
    """

    DEFAULT_TIMEOUT = 30
    ACCEPT = "application/json; version=2"

    def __init__(
        self,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
        auth_scheme: str = "Bearer",
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize transport.

        Args:
            token: API token for authentication
            timeout: Request timeout in seconds
            auth_scheme: Authorization scheme ("Bearer", or "Token" for
                Paperless-ngx's DRF token auth)
            session: Pre-built session to use instead of a fresh one
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        # Sent per request; a shared session is never modified
        self._headers = {
            "Authorization": f"{auth_scheme} {token}",
            "Accept": self.ACCEPT,
        }

    def _request(self, method: str, url: str) -> requests.Response:
        """Make a single request with error handling."""
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TransportError(url, f"timed out: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(url, f"connection failed: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(url, str(e)) from e

        if not response.ok:
            logger.warning("%s %s returned %d", method, url, response.status_code)
            raise TransportError(
                url,
                response.reason or "request failed",
                status_code=response.status_code,
                response_body=response.text,
            )

        return response

    def fetch(self, url: str) -> bytes:
        """GET ``url`` and return the raw response body."""
        return self._request("GET", url).content

    def head(self, url: str) -> Mapping[str, str]:
        """HEAD ``url`` and return the response headers."""
        return self._request("HEAD", url).headers
