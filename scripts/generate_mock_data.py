"""Write a generated sample dataset as CSV.

Uses the same generator the API store uses, so a seeded run here matches
what ``SAMPLE_SEED`` produces in the service for the same day.

Run:  python -m scripts.generate_mock_data --days 120 --seed 42 --output sales.csv
"""

import argparse
import csv
import random
import sys
from typing import Iterable, TextIO

from app.config import settings
from app.models import SalesRecord
from app.services.sample_data import generate_sample_data

COLUMNS = ["id", "date", "region", "product", "sales", "profit"]


def write_csv(records: Iterable[SalesRecord], out: TextIO) -> int:
    writer = csv.writer(out)
    writer.writerow(COLUMNS)
    count = 0
    for r in records:
        writer.writerow([r.id, r.date, r.region, r.product, r.sales, r.profit])
        count += 1
    return count


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--days", type=int, default=settings.SAMPLE_DAYS)
    parser.add_argument("--seed", type=int, default=settings.SAMPLE_SEED)
    parser.add_argument("--output", default="-", help="file path, or - for stdout")
    args = parser.parse_args(argv)

    records = generate_sample_data(
        args.days, settings.REGIONS, settings.PRODUCTS, rng=random.Random(args.seed),
    )
    if args.output == "-":
        count = write_csv(records, sys.stdout)
    else:
        with open(args.output, "w", newline="", encoding="utf-8") as f:
            count = write_csv(records, f)
        print(f"Wrote {count} records to {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
