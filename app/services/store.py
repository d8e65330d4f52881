"""In-memory record store shared by all request handlers."""

import logging
import random
from datetime import date
from typing import Iterable, Optional, Sequence

from app.models import SalesRecord
from app.services.sample_data import generate_sample_data

log = logging.getLogger(__name__)


class RecordStore:
    """Owns the current sequence of sales records.

    The sequence is an immutable tuple. ``reload`` builds a complete new
    tuple and swaps it in with one assignment, so a reader holding
    ``snapshot()`` always sees either the old or the new data in full.
    """

    def __init__(
        self,
        days: int,
        regions: Sequence[str],
        products: Sequence[str],
        seed: Optional[int] = None,
        end_date: Optional[date] = None,
        records: Optional[Iterable[SalesRecord]] = None,
    ):
        self.days = days
        self.regions = list(regions)
        self.products = list(products)
        self.end_date = end_date
        self._rng = random.Random(seed)
        if records is None:
            self._records = tuple(self._generate())
            log.info("Generated %d sample records over %d days", len(self._records), days)
        else:
            self._records = tuple(records)

    @classmethod
    def from_settings(cls, settings) -> "RecordStore":
        return cls(
            days=settings.SAMPLE_DAYS,
            regions=settings.REGIONS,
            products=settings.PRODUCTS,
            seed=settings.SAMPLE_SEED,
        )

    def _generate(self) -> list[SalesRecord]:
        return generate_sample_data(
            self.days, self.regions, self.products, rng=self._rng, end_date=self.end_date,
        )

    def snapshot(self) -> tuple[SalesRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def reload(self) -> int:
        """Replace all records with a fresh draw. Returns the new record count."""
        fresh = tuple(self._generate())
        self._records = fresh
        log.info("Sample data reloaded: %d records", len(fresh))
        return len(fresh)

    def distinct_regions(self) -> list[str]:
        return sorted({r.region for r in self._records})

    def distinct_products(self) -> list[str]:
        return sorted({r.product for r in self._records})
