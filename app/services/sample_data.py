"""Synthetic sales data for the dashboard.

Every day in the window gets 4-9 orders with a random region and product.
Sales are skewed upward by an extra 1.0-1.5x factor and profit is 8-38% of
the sale, so the totals look like a small multi-region shop.
"""

import random
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Sequence

from app.models import SalesRecord

MIN_ORDERS_PER_DAY = 4
MAX_ORDERS_PER_DAY = 9


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def generate_sample_data(
    days: int,
    regions: Sequence[str],
    products: Sequence[str],
    rng: Optional[random.Random] = None,
    end_date: Optional[date] = None,
) -> list[SalesRecord]:
    """Return ``days`` consecutive days of records ending at ``end_date`` (default: today, UTC).

    Ids start at 1 and follow generation order.
    """
    rng = rng or random.Random()
    end_date = end_date or _utc_today()
    first_day = end_date - timedelta(days=days - 1)

    records = []
    next_id = 1
    for offset in range(days):
        day = (first_day + timedelta(days=offset)).isoformat()
        for _ in range(rng.randint(MIN_ORDERS_PER_DAY, MAX_ORDERS_PER_DAY)):
            region = rng.choice(regions)
            product = rng.choice(products)
            sales = round((200 + rng.random() * 1500) * (1 + rng.random() * 0.5))
            profit = round(sales * (0.08 + rng.random() * 0.3))
            records.append(SalesRecord(
                id=next_id, date=day, region=region, product=product,
                sales=sales, profit=profit,
            ))
            next_id += 1
    return records
