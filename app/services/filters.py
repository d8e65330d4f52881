"""Query filtering, sorting and pagination over sales records.

Query parameters arrive as raw strings. Nothing in this module raises on bad
input: unparseable dates drop the bound, unknown sort keys fall back to
``date`` and page/limit values are clamped to at least 1.
"""

import re
from datetime import date, datetime, timezone
from typing import Optional, Sequence

from app.models import FilterCriteria, SalesRecord

ALL = "All"
SORT_FIELDS = ("date", "sales", "profit")
DEFAULT_SORT = "date"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def parse_date_safe(value: Optional[str]) -> Optional[str]:
    """Normalize an ISO 8601 date or datetime string to ``YYYY-MM-DD``, or None.

    Accepts what ``date.fromisoformat``/``datetime.fromisoformat`` accept on
    Python 3.11+: ``2025-01-05``, ``20250105``, ``2025-W01-7`` and datetimes
    such as ``2025-01-05T10:00:00Z``. Aware datetimes are converted to UTC.
    """
    if not value:
        return None
    value = value.strip()
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def _dimension(value: Optional[str]) -> Optional[str]:
    if not value or value == ALL:
        return None
    return value


def build_criteria(
    start: Optional[str] = None,
    end: Optional[str] = None,
    region: Optional[str] = None,
    product: Optional[str] = None,
) -> FilterCriteria:
    return FilterCriteria(
        start=parse_date_safe(start),
        end=parse_date_safe(end),
        region=_dimension(region),
        product=_dimension(product),
    )


def in_date_range(record: SalesRecord, start: Optional[str], end: Optional[str]) -> bool:
    # ISO dates compare correctly as strings.
    if start and record.date < start:
        return False
    if end and record.date > end:
        return False
    return True


def apply_filters(records: Sequence[SalesRecord], criteria: FilterCriteria) -> list[SalesRecord]:
    """Return the records matching ``criteria``, keeping input order."""
    return [
        r for r in records
        if in_date_range(r, criteria.start, criteria.end)
        and (criteria.region is None or r.region == criteria.region)
        and (criteria.product is None or r.product == criteria.product)
    ]


def normalize_sort(sort: Optional[str]) -> str:
    return sort if sort in SORT_FIELDS else DEFAULT_SORT


def sort_records(records: Sequence[SalesRecord], sort: Optional[str] = None, order: Optional[str] = None) -> list[SalesRecord]:
    """Stable sort by ``date``, ``sales`` or ``profit``; ``order="desc"`` reverses."""
    field = normalize_sort(sort)
    return sorted(records, key=lambda r: getattr(r, field), reverse=(order == "desc"))


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse the leading integer of ``value``; missing or zero gives ``default``, the rest is floored at 1."""
    if value is None:
        return default
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    number = int(match.group(1))
    if number == 0:
        return default
    return max(1, number)


def paginate(records: Sequence[SalesRecord], page: int, limit: int) -> list[SalesRecord]:
    offset = (page - 1) * limit
    return list(records[offset:offset + limit])
