from dataclasses import asdict, dataclass
from typing import Optional, Union

Amount = Union[int, float]


@dataclass(frozen=True)
class SalesRecord:
    id: int
    date: str  # YYYY-MM-DD
    region: str
    product: str
    sales: Amount
    profit: Amount

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FilterCriteria:
    """Optional constraints for a query. ``None`` means unconstrained."""

    start: Optional[str] = None
    end: Optional[str] = None
    region: Optional[str] = None
    product: Optional[str] = None
