from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Amount = Union[int, float]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Envelopes ─────────────────────────────────────────────────────────────────

class MessageResponse(BaseModel):
    success: bool
    message: str


class ReloadResponse(MessageResponse):
    total: int


class HealthResponse(BaseModel):
    status: str
    version: str
    records: int


# ── Filters ───────────────────────────────────────────────────────────────────

class FilterOptions(BaseModel):
    regions: list[str]
    products: list[str]


class FiltersResponse(BaseModel):
    success: bool = True
    data: FilterOptions


# ── Records ───────────────────────────────────────────────────────────────────

class RecordOut(BaseModel):
    id: int
    date: str
    region: str
    product: str
    sales: Amount
    profit: Amount


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int


class RecordsResponse(BaseModel):
    success: bool = True
    meta: PageMeta
    data: list[RecordOut]


# ── KPIs ──────────────────────────────────────────────────────────────────────

class KpiData(CamelModel):
    total_sales: Amount
    total_profit: Amount
    orders: int
    growth: float


class KpiResponse(BaseModel):
    success: bool = True
    data: KpiData


# ── Insights ──────────────────────────────────────────────────────────────────

class RegionSales(BaseModel):
    region: str
    sales: Amount


class ProductSales(BaseModel):
    product: str
    sales: Amount


class InsightData(CamelModel):
    top_region: Optional[RegionSales] = None
    top_product: Optional[ProductSales] = None
    avg_order: float


class InsightResponse(BaseModel):
    success: bool = True
    data: InsightData
