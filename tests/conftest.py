"""Test fixtures and utilities."""

import json
from typing import Optional

import pytest

BASE_URL = "https://x/api/"
TOKEN = "T"


def tag_json(tag_id: int, name: str, **extra) -> dict:
    """Minimal tag record as returned by the API."""
    return {"id": tag_id, "name": name, **extra}


def page_json(results: list, next_url: Optional[str] = None, count: Optional[int] = None) -> dict:
    """List endpoint envelope."""
    return {
        "count": len(results) if count is None else count,
        "next": next_url,
        "previous": None,
        "results": results,
    }


class FakeTransport:
    """
    Transport double serving canned bodies per URL.

    A queued value that is an exception instance is raised instead of
    returned; each URL's queue is consumed in order and its last entry
    repeats.
    """

    def __init__(self, responses: dict):
        self._responses = {
            url: list(body) if isinstance(body, list) else [body]
            for url, body in responses.items()
        }
        self.fetched: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.fetched.append(url)
        queue = self._responses[url]
        body = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(body, Exception):
            raise body
        if isinstance(body, bytes):
            return body
        return json.dumps(body).encode("utf-8")


@pytest.fixture
def two_page_tags() -> dict:
    """The two-page tag listing used across paginator and client tests."""
    return {
        "page1": page_json(
            [tag_json(1, "a"), tag_json(2, "b")],
            next_url="https://x/api/tags/?page=2",
            count=3,
        ),
        "page2": page_json([tag_json(3, "c")], count=3),
    }


@pytest.fixture
def sample_document() -> dict:
    """Sample Paperless document API response."""
    return {
        "id": 12345,
        "correspondent": 5,
        "document_type": 2,
        "storage_path": None,
        "title": "SPAR Einkauf 18.11.2024",
        "content": "SPAR Österreich\nSumme EUR 11,48",
        "tags": [1, 3],
        "created": "2024-11-18T00:00:00+01:00",
        "created_date": "2024-11-18",
        "modified": "2024-11-19T08:20:00Z",
        "added": "2024-11-19T08:14:22Z",
        "archive_serial_number": 1001,
        "original_file_name": "spar_receipt.pdf",
        "archived_file_name": "2024-11-18 SPAR Einkauf.pdf",
        "notes": [],
        "custom_fields": [],
    }


@pytest.fixture
def sample_saved_view() -> dict:
    """Saved view selecting inbox invoices from correspondent 5."""
    return {
        "id": 7,
        "name": "Inbox invoices",
        "show_on_dashboard": True,
        "show_in_sidebar": False,
        "sort_field": "created",
        "sort_reverse": True,
        "filter_rules": [
            {"rule_type": 3, "value": "5"},
            {"rule_type": 6, "value": "1"},
            {"rule_type": 6, "value": "4"},
            {"rule_type": 17, "value": "9"},
            {"rule_type": 5, "value": "true"},
            {"rule_type": 9, "value": "2024-01-01"},
        ],
        "owner": 1,
    }
