import pytest

from app.models import SalesRecord
from app.services.analytics import get_insights, get_kpis, growth_rate, previous_period


def _rec(id, date, region, product, sales, profit=0):
    return SalesRecord(id=id, date=date, region=region, product=product, sales=sales, profit=profit)


HISTORY = [
    _rec(1, "2025-01-01", "North", "Gadget", 100, 10),
    _rec(2, "2025-01-02", "South", "Widget", 200, 20),
    _rec(3, "2025-01-03", "North", "Widget", 150, 15),
    _rec(4, "2025-01-04", "East", "Gadget", 250, 25),
]


def test_previous_period_same_length_ending_day_before():
    assert previous_period("2025-01-03", "2025-01-04") == ("2025-01-01", "2025-01-02")
    assert previous_period("2025-03-01", "2025-03-01") == ("2025-02-28", "2025-02-28")


def test_kpis_totals_without_dates_have_zero_growth():
    kpis = get_kpis(HISTORY, HISTORY)
    assert kpis == {"total_sales": 700, "total_profit": 70, "orders": 4, "growth": 0}


def test_kpis_growth_against_previous_window():
    current = HISTORY[2:]  # 400 in Jan 3-4
    kpis = get_kpis(current, HISTORY, "2025-01-03", "2025-01-04")
    assert kpis["growth"] == pytest.approx((400 - 300) / 300)


def test_kpis_growth_needs_both_bounds():
    assert get_kpis(HISTORY[2:], HISTORY, "2025-01-03", None)["growth"] == 0
    assert get_kpis(HISTORY[2:], HISTORY, None, "2025-01-04")["growth"] == 0


def test_growth_baseline_ignores_region_filter():
    # current period filtered to North only; the baseline still counts every region
    current = [r for r in HISTORY[2:] if r.region == "North"]  # 150
    kpis = get_kpis(current, HISTORY, "2025-01-03", "2025-01-04")
    assert kpis["growth"] == pytest.approx((150 - 300) / 300)


def test_growth_sentinel_when_no_previous_sales():
    kpis = get_kpis(HISTORY[:1], HISTORY, "2025-01-01", "2025-01-01")
    assert kpis["growth"] == 1
    assert get_kpis([], HISTORY, "2024-06-01", "2024-06-02")["growth"] == 0


def test_growth_rate():
    assert growth_rate(0, 0) == 0
    assert growth_rate(50, 0) == 1
    assert growth_rate(50, 100) == -0.5


def test_insights_top_groups_and_average():
    result = get_insights(HISTORY)
    assert result["top_region"] == {"region": "North", "sales": 250}
    assert result["top_product"] == {"product": "Gadget", "sales": 350}
    assert result["avg_order"] == 175


def test_insights_tie_goes_to_first_seen_group():
    rows = [
        _rec(1, "2025-01-01", "West", "Widget", 100),
        _rec(2, "2025-01-01", "East", "Gadget", 100),
    ]
    result = get_insights(rows)
    assert result["top_region"]["region"] == "West"
    assert result["top_product"]["product"] == "Widget"


def test_insights_empty():
    assert get_insights([]) == {"top_region": None, "top_product": None, "avg_order": 0}


def test_previous_period_before_year_one_is_empty():
    assert previous_period("0001-01-01", "2025-01-02") is None
    assert previous_period("0001-01-03", "0001-01-10") == ("0001-01-01", "0001-01-02")
    # reversed bounds at the top of the calendar give an empty window, not an error
    prev_start, prev_end = previous_period("9999-12-31", "0001-01-01")
    assert prev_start > prev_end


def test_kpis_growth_when_window_starts_at_min_date():
    kpis = get_kpis(HISTORY, HISTORY, "0001-01-01", "2025-01-04")
    assert kpis["total_sales"] == 700
    assert kpis["growth"] == 1
