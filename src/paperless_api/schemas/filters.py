"""
Resource filters.

Each filter renders itself into ordered (key, value) query pairs. Fields
left unset are omitted from the query, so an empty filter means "no
filters".
"""

import logging
from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, ClassVar, Iterable, Optional, Union

from .saved_view import FilterRule, FilterRuleType

logger = logging.getLogger(__name__)

DateLike = Union[str, date]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(_render(v) for v in value)
    return str(value)


class QueryFilter:
    """Mixin turning dataclass fields into query pairs via ``QUERY_KEYS``."""

    QUERY_KEYS: ClassVar[dict[str, str]] = {}

    def to_params(self) -> list[tuple[str, str]]:
        params = []
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None or value == []:
                continue
            params.append((self.QUERY_KEYS.get(f.name, f.name), _render(value)))
        return params


@dataclass
class NameFilter(QueryFilter):
    """
    Case-insensitive name lookups.

    Used for tags, correspondents, document types, storage paths and saved
    views.
    """

    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    contains: Optional[str] = None
    exact: Optional[str] = None
    ordering: Optional[str] = None
    page_size: Optional[int] = None

    QUERY_KEYS: ClassVar[dict[str, str]] = {
        "starts_with": "name__istartswith",
        "ends_with": "name__iendswith",
        "contains": "name__icontains",
        "exact": "name__iexact",
    }


@dataclass
class DocumentFilter(QueryFilter):
    """
    Document query.

    Any combination of fields may be set; the server ANDs them together.
    Date bounds accept ISO strings or ``datetime.date`` values.
    """

    # Full text ("advanced search" in the web interface)
    query: Optional[str] = None
    more_like_id: Optional[int] = None
    title_content: Optional[str] = None

    is_in_inbox: Optional[bool] = None
    is_tagged: Optional[bool] = None

    title_starts_with: Optional[str] = None
    title_ends_with: Optional[str] = None
    title_contains: Optional[str] = None
    title_exact: Optional[str] = None
    content_starts_with: Optional[str] = None
    content_ends_with: Optional[str] = None
    content_contains: Optional[str] = None
    content_exact: Optional[str] = None

    archive_serial_number: Optional[int] = None
    asn_gt: Optional[int] = None
    asn_gte: Optional[int] = None
    asn_lt: Optional[int] = None
    asn_lte: Optional[int] = None
    asn_isnull: Optional[bool] = None

    created_year: Optional[int] = None
    created_month: Optional[int] = None
    created_day: Optional[int] = None
    created_after: Optional[DateLike] = None
    created_before: Optional[DateLike] = None
    added_year: Optional[int] = None
    added_month: Optional[int] = None
    added_day: Optional[int] = None
    added_after: Optional[DateLike] = None
    added_before: Optional[DateLike] = None
    modified_year: Optional[int] = None
    modified_month: Optional[int] = None
    modified_day: Optional[int] = None
    modified_after: Optional[DateLike] = None
    modified_before: Optional[DateLike] = None

    correspondent_id: Optional[int] = None
    correspondent_id_in: list[int] = field(default_factory=list)
    correspondent_isnull: Optional[bool] = None
    document_type_id: Optional[int] = None
    document_type_id_in: list[int] = field(default_factory=list)
    document_type_isnull: Optional[bool] = None
    storage_path_id: Optional[int] = None
    storage_path_id_in: list[int] = field(default_factory=list)
    storage_path_isnull: Optional[bool] = None

    # Tags: has this one / any of / all of / none of
    tag_id: Optional[int] = None
    tag_id_in: list[int] = field(default_factory=list)
    tag_id_all: list[int] = field(default_factory=list)
    tag_id_none: list[int] = field(default_factory=list)

    ordering: Optional[str] = None
    page_size: Optional[int] = None

    QUERY_KEYS: ClassVar[dict[str, str]] = {
        "title_starts_with": "title__istartswith",
        "title_ends_with": "title__iendswith",
        "title_contains": "title__icontains",
        "title_exact": "title__iexact",
        "content_starts_with": "content__istartswith",
        "content_ends_with": "content__iendswith",
        "content_contains": "content__icontains",
        "content_exact": "content__iexact",
        "asn_gt": "archive_serial_number__gt",
        "asn_gte": "archive_serial_number__gte",
        "asn_lt": "archive_serial_number__lt",
        "asn_lte": "archive_serial_number__lte",
        "asn_isnull": "archive_serial_number__isnull",
        "created_year": "created__year",
        "created_month": "created__month",
        "created_day": "created__day",
        "created_after": "created__date__gt",
        "created_before": "created__date__lt",
        "added_year": "added__year",
        "added_month": "added__month",
        "added_day": "added__day",
        "added_after": "added__date__gt",
        "added_before": "added__date__lt",
        "modified_year": "modified__year",
        "modified_month": "modified__month",
        "modified_day": "modified__day",
        "modified_after": "modified__date__gt",
        "modified_before": "modified__date__lt",
        "correspondent_id": "correspondent__id",
        "correspondent_id_in": "correspondent__id__in",
        "correspondent_isnull": "correspondent__isnull",
        "document_type_id": "document_type__id",
        "document_type_id_in": "document_type__id__in",
        "document_type_isnull": "document_type__isnull",
        "storage_path_id": "storage_path__id",
        "storage_path_id_in": "storage_path__id__in",
        "storage_path_isnull": "storage_path__isnull",
        "tag_id": "tags__id",
        "tag_id_in": "tags__id__in",
        "tag_id_all": "tags__id__all",
        "tag_id_none": "tags__id__none",
    }

    @classmethod
    def from_filter_rules(cls, rules: Iterable[FilterRule]) -> "DocumentFilter":
        """
        Build a document filter from saved view rules.

        Args:
            rules: Rules of a ``SavedView``

        Returns:
            DocumentFilter selecting the same documents as the view
        """
        flt = cls()
        for rule in rules:
            if not flt._apply_rule(rule):
                logger.debug("Ignoring filter rule %s=%r", rule.rule_type.name, rule.value)
        return flt

    def _apply_rule(self, rule: FilterRule) -> bool:
        kind = rule.rule_type
        value = rule.value
        number = rule.int_value

        # Text rules
        text_targets = {
            FilterRuleType.TITLE_CONTAINS: "title_contains",
            FilterRuleType.CONTENT_CONTAINS: "content_contains",
            FilterRuleType.TITLE_OR_CONTENT_CONTAINS: "title_content",
            FilterRuleType.FULLTEXT_QUERY: "query",
            FilterRuleType.CREATED_BEFORE: "created_before",
            FilterRuleType.CREATED_AFTER: "created_after",
            FilterRuleType.ADDED_BEFORE: "added_before",
            FilterRuleType.ADDED_AFTER: "added_after",
            FilterRuleType.MODIFIED_BEFORE: "modified_before",
            FilterRuleType.MODIFIED_AFTER: "modified_after",
        }
        if kind in text_targets:
            if value is None:
                return False
            setattr(self, text_targets[kind], value)
            return True

        # "Is X" rules where an empty value means "has no X"
        id_or_null = {
            FilterRuleType.ASN_IS: ("archive_serial_number", "asn_isnull"),
            FilterRuleType.CORRESPONDENT_IS: ("correspondent_id", "correspondent_isnull"),
            FilterRuleType.DOCUMENT_TYPE_IS: ("document_type_id", "document_type_isnull"),
            FilterRuleType.STORAGE_PATH_IS: ("storage_path_id", "storage_path_isnull"),
        }
        if kind in id_or_null:
            id_attr, null_attr = id_or_null[kind]
            if number is not None:
                setattr(self, id_attr, number)
            else:
                setattr(self, null_attr, True)
            return True

        int_targets = {
            FilterRuleType.CREATED_YEAR_IS: "created_year",
            FilterRuleType.CREATED_MONTH_IS: "created_month",
            FilterRuleType.CREATED_DAY_IS: "created_day",
            FilterRuleType.MORE_LIKE_THIS: "more_like_id",
            FilterRuleType.ASN_GREATER_THAN: "asn_gt",
            FilterRuleType.ASN_LESS_THAN: "asn_lt",
        }
        if kind in int_targets:
            if number is None:
                return False
            setattr(self, int_targets[kind], number)
            return True

        tag_lists = {
            FilterRuleType.HAS_TAG: self.tag_id_all,
            FilterRuleType.HAS_TAG_IN: self.tag_id_in,
            FilterRuleType.DOES_NOT_HAVE_TAG: self.tag_id_none,
        }
        if kind in tag_lists:
            if number is None:
                return False
            tag_lists[kind].append(number)
            return True

        bool_targets = {
            FilterRuleType.IS_IN_INBOX: "is_in_inbox",
            FilterRuleType.HAS_ANY_TAG: "is_tagged",
            FilterRuleType.DOES_NOT_HAVE_ASN: "asn_isnull",
        }
        if kind in bool_targets:
            flag = rule.bool_value
            if flag is None:
                return False
            setattr(self, bool_targets[kind], flag)
            return True

        return False
