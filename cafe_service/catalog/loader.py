from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pandas as pd

from ..config import DEFAULT_SERVICE_CONFIG, RESPONSE_SEPARATOR, ServiceConfig
from .models import Cafe, Catalog, CatalogError

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "city",
    "name",
    "address",
    "phone_number",
]


def _read_frame(path: Path) -> pd.DataFrame:
    if not path.is_file():
        raise CatalogError(f"catalog file not found: {path}")

    # Everything is text; "NA" is a valid café name, not a missing value.
    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [col for col in CATALOG_COLUMNS if col not in df.columns]
    if missing:
        raise CatalogError(f"catalog file {path} is missing columns: {', '.join(missing)}")

    df = df[CATALOG_COLUMNS].copy()
    df["city"] = df["city"].str.strip()
    df["name"] = df["name"].str.strip()

    if (df["city"] == "").any():
        raise CatalogError(f"catalog file {path} has rows without a city")
    if (df["name"] == "").any():
        raise CatalogError(f"catalog file {path} has rows without a cafe name")

    return df


def build_catalog(df: pd.DataFrame) -> Catalog:
    """
    Group catalog rows by city.

    Cities keep their order of first appearance and cafés keep their row
    order, so the CSV order is the response order.
    """
    cities: dict[str, list[Cafe]] = {}
    for city, group in df.groupby("city", sort=False):
        cafes = []
        for row in group.itertuples(index=False):
            if RESPONSE_SEPARATOR in row.name:
                logger.warning(
                    "Cafe name %r in %s contains the response separator %r; "
                    "clients splitting the response will see it as two names",
                    row.name, city, RESPONSE_SEPARATOR,
                )
            cafes.append(Cafe(name=row.name, address=row.address, phone_number=row.phone_number))
        cities[city] = cafes
    return Catalog(cities)


def load_catalog(config: ServiceConfig = DEFAULT_SERVICE_CONFIG) -> Catalog:
    """Read the catalog CSV named by ``config`` into an immutable ``Catalog``."""
    catalog = build_catalog(_read_frame(config.catalog_path))
    logger.info(
        "Loaded cafe catalog from %s: %d cities, %d cafes",
        config.catalog_path, len(catalog), catalog.total_cafes(),
    )
    return catalog
