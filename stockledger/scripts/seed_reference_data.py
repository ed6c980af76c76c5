"""
Seed categories + weights on the remote store.

Run locally:
  python -m stockledger.scripts.seed_reference_data

It uses the same STOCKLEDGER_API_* env vars as the service (dotenv supported).
Existing names (case-insensitive) are left alone, so it can be re-run.
"""

from __future__ import annotations

from typing import Iterable

from ..clients.http import make_client_from_settings
from ..core.loggers import configure_logging
from ..core.seeds import CATEGORY_OPTIONS, WEIGHT_OPTIONS
from ..schemas.categories import CategoryCreate
from ..schemas.weights import WeightCreate
from ..services.categories import CategoryAccessor
from ..services.weights import WeightAccessor


def _missing(wanted: Iterable[str], existing: Iterable[str]) -> list[str]:
    have = {(n or "").strip().lower() for n in existing}
    return [n for n in wanted if n.lower() not in have]


def seed(categories: CategoryAccessor, weights: WeightAccessor) -> tuple[int, int]:
    new_categories = _missing(CATEGORY_OPTIONS, (c.name for c in categories.list()))
    for name in new_categories:
        categories.create(CategoryCreate(name=name))

    new_weights = _missing(WEIGHT_OPTIONS, (w.name for w in weights.list()))
    for name in new_weights:
        weights.create(WeightCreate(name=name))

    return len(new_categories), len(new_weights)


def main() -> None:
    configure_logging()
    client = make_client_from_settings()
    created_categories, created_weights = seed(CategoryAccessor(client), WeightAccessor(client))
    print(f"Done. Categories created: {created_categories}. Weights created: {created_weights}.")


if __name__ == "__main__":
    main()
