from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_store
from app.schemas import (
    FiltersResponse,
    InsightResponse,
    KpiResponse,
    RecordsResponse,
    ReloadResponse,
)
from app.services.analytics import get_insights, get_kpis
from app.services.filters import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    apply_filters,
    build_criteria,
    paginate,
    parse_positive_int,
    sort_records,
)
from app.services.store import RecordStore

router = APIRouter(prefix="/api", tags=["dashboard"])

# Everything is taken as a raw string so bad values are coerced, not rejected with a 422.


# ── Filters ──────────────────────────────────────────────────────────────────

@router.get("/filters", response_model=FiltersResponse)
def list_filters(store: RecordStore = Depends(get_store)):
    return {
        "success": True,
        "data": {"regions": store.distinct_regions(), "products": store.distinct_products()},
    }


# ── Records ──────────────────────────────────────────────────────────────────

@router.get("/records", response_model=RecordsResponse)
def list_records(
    start: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    end: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    region: Optional[str] = Query(None),
    product: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    sort: Optional[str] = Query("date", description="date | sales | profit"),
    order: Optional[str] = Query("asc", description="asc | desc"),
    store: RecordStore = Depends(get_store),
):
    criteria = build_criteria(start, end, region, product)
    rows = sort_records(apply_filters(store.snapshot(), criteria), sort, order)

    pg = parse_positive_int(page, DEFAULT_PAGE)
    lim = parse_positive_int(limit, DEFAULT_LIMIT)
    return {
        "success": True,
        "meta": {"total": len(rows), "page": pg, "limit": lim},
        "data": [r.to_dict() for r in paginate(rows, pg, lim)],
    }


# ── KPIs ─────────────────────────────────────────────────────────────────────

@router.get("/kpis", response_model=KpiResponse)
def kpis(
    start: Optional[str] = Query(None),
    end: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    product: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
):
    snapshot = store.snapshot()
    criteria = build_criteria(start, end, region, product)
    rows = apply_filters(snapshot, criteria)
    return {"success": True, "data": get_kpis(rows, snapshot, criteria.start, criteria.end)}


# ── Insights ─────────────────────────────────────────────────────────────────

@router.get("/insights", response_model=InsightResponse)
def insights(
    start: Optional[str] = Query(None),
    end: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    product: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
):
    criteria = build_criteria(start, end, region, product)
    return {"success": True, "data": get_insights(apply_filters(store.snapshot(), criteria))}


# ── Reload ───────────────────────────────────────────────────────────────────

@router.post("/reload-sample", response_model=ReloadResponse)
def reload_sample(store: RecordStore = Depends(get_store)):
    total = store.reload()
    return {"success": True, "message": "Sample data reloaded", "total": total}
