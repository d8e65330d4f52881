from datetime import date
from typing import Optional, Sequence

from app.models import SalesRecord
from app.services.filters import in_date_range

_MIN_ORDINAL = date.min.toordinal()
_MAX_ORDINAL = date.max.toordinal()


def previous_period(start: str, end: str) -> Optional[tuple[str, str]]:
    """The window of equal length that ends the day before ``start``.

    Returns None when that window lies entirely before 0001-01-01; a window
    that only starts before it is clipped to ``date.min``.
    """
    start_ord = date.fromisoformat(start).toordinal()
    days = date.fromisoformat(end).toordinal() - start_ord
    prev_end = start_ord - 1
    if prev_end < _MIN_ORDINAL:
        return None
    prev_start = min(max(start_ord - (days + 1), _MIN_ORDINAL), _MAX_ORDINAL)
    return date.fromordinal(prev_start).isoformat(), date.fromordinal(prev_end).isoformat()


def growth_rate(current: float, previous: float) -> float:
    if previous == 0:
        # 1 stands in for "grew from nothing"; it is not a real ratio.
        return 0 if current == 0 else 1
    return (current - previous) / previous


# ── KPIs ──────────────────────────────────────────────────────────────────────

def get_kpis(
    records: Sequence[SalesRecord],
    all_records: Sequence[SalesRecord],
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> dict:
    total_sales = sum(r.sales for r in records)
    total_profit = sum(r.profit for r in records)

    growth = 0
    if start and end:
        # Baseline uses the date window only; region/product filters are not reapplied.
        window = previous_period(start, end)
        prev_sales = 0
        if window:
            prev_sales = sum(r.sales for r in all_records if in_date_range(r, *window))
        growth = growth_rate(total_sales, prev_sales)

    return {
        "total_sales": total_sales,
        "total_profit": total_profit,
        "orders": len(records),
        "growth": growth,
    }


# ── Insights ──────────────────────────────────────────────────────────────────

def _top_group(totals: dict[str, float]) -> Optional[tuple[str, float]]:
    # max() keeps the first of equal maxima, i.e. the first group seen.
    if not totals:
        return None
    return max(totals.items(), key=lambda kv: kv[1])


def get_insights(records: Sequence[SalesRecord]) -> dict:
    by_region: dict[str, float] = {}
    by_product: dict[str, float] = {}
    for r in records:
        by_region[r.region] = by_region.get(r.region, 0) + r.sales
        by_product[r.product] = by_product.get(r.product, 0) + r.sales

    top_region = _top_group(by_region)
    top_product = _top_group(by_product)
    avg_order = sum(r.sales for r in records) / len(records) if records else 0

    return {
        "top_region": {"region": top_region[0], "sales": top_region[1]} if top_region else None,
        "top_product": {"product": top_product[0], "sales": top_product[1]} if top_product else None,
        "avg_order": avg_order,
    }
