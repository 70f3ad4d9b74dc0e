"""
Saved views.

A saved view is a named set of document filter rules created from the
Paperless web interface. ``DocumentFilter.from_filter_rules`` turns the
rules back into a document query.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from ..errors import DecodeError
from .base import ensure_object, optional, require


class FilterRuleType(IntEnum):
    """Rule type codes used by Paperless-ngx saved views."""

    TITLE_CONTAINS = 0
    CONTENT_CONTAINS = 1
    ASN_IS = 2
    CORRESPONDENT_IS = 3
    DOCUMENT_TYPE_IS = 4
    IS_IN_INBOX = 5
    HAS_TAG = 6
    HAS_ANY_TAG = 7
    CREATED_BEFORE = 8
    CREATED_AFTER = 9
    CREATED_YEAR_IS = 10
    CREATED_MONTH_IS = 11
    CREATED_DAY_IS = 12
    ADDED_BEFORE = 13
    ADDED_AFTER = 14
    MODIFIED_BEFORE = 15
    MODIFIED_AFTER = 16
    DOES_NOT_HAVE_TAG = 17
    DOES_NOT_HAVE_ASN = 18
    TITLE_OR_CONTENT_CONTAINS = 19
    FULLTEXT_QUERY = 20
    MORE_LIKE_THIS = 21
    HAS_TAG_IN = 22
    ASN_GREATER_THAN = 23
    ASN_LESS_THAN = 24
    STORAGE_PATH_IS = 25


@dataclass
class FilterRule:
    """One rule of a saved view. The server sends every value as a string."""

    rule_type: FilterRuleType
    value: Optional[str] = None

    @property
    def int_value(self) -> Optional[int]:
        """Value as an integer, or None if empty or not numeric."""
        if self.value is None:
            return None
        try:
            return int(self.value)
        except ValueError:
            return None

    @property
    def bool_value(self) -> Optional[bool]:
        """Value as a boolean, or None if it is not "true"/"false"."""
        if self.value is None:
            return None
        lowered = self.value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        return None

    @classmethod
    def from_api_response(cls, data: dict) -> "FilterRule":
        raw_type = require(data, "rule_type", int)
        try:
            rule_type = FilterRuleType(raw_type)
        except ValueError:
            raise DecodeError(f"invalid rule_type {raw_type}")

        value = optional(data, "value", (str, int))
        return cls(rule_type=rule_type, value=None if value is None else str(value))


@dataclass
class SavedView:
    """Paperless saved view."""

    id: int
    name: str
    show_on_dashboard: bool = False
    show_in_sidebar: bool = False
    sort_field: Optional[str] = None
    sort_reverse: bool = False
    filter_rules: list[FilterRule] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "SavedView":
        """Create from Paperless API response."""
        rules = [
            FilterRule.from_api_response(ensure_object(rule, "filter rule"))
            for rule in optional(data, "filter_rules", list, [])
        ]
        return cls(
            id=require(data, "id", int),
            name=require(data, "name", str),
            show_on_dashboard=optional(data, "show_on_dashboard", bool, False),
            show_in_sidebar=optional(data, "show_in_sidebar", bool, False),
            sort_field=optional(data, "sort_field", str),
            sort_reverse=optional(data, "sort_reverse", bool, False),
            filter_rules=rules,
        )
