"""
Purpose: Loads the destination catalog from CSV.
What it does:
Reads rows of code,name,lat,lon,price with pandas and turns them into an
immutable Catalog. Called once at startup; the result is passed into the
route session and never reloaded.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import pandas as pd

from .models import Catalog, CatalogError, Location

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("code", "name", "lat", "lon", "price")

# Bundled Jetstar destinations from Melbourne
DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "destinations.csv")


def catalog_from_frame(df: pd.DataFrame) -> Catalog:
    """
    Build a Catalog from a DataFrame with the columns code, name, lat, lon, price.
    """
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise CatalogError(f"Catalog is missing columns: {', '.join(missing)}")

    locations = []
    for _, row in df.iterrows():
        locations.append(
            Location(
                code=str(row["code"]).strip(),
                name=str(row["name"]).strip(),
                coordinates=(float(row["lat"]), float(row["lon"])),
                price=float(row["price"]),
            )
        )
    return Catalog(locations)


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Load the catalog CSV at `path` (defaults to the bundled destinations file).
    """
    path = path or DEFAULT_CATALOG_PATH
    if not os.path.exists(path):
        raise CatalogError(f"Catalog file not found: {path}")

    # keep codes as strings so values like "001" survive;
    # round_trip parsing so coordinates match the file digit for digit
    df = pd.read_csv(path, dtype={"code": str, "name": str}, float_precision="round_trip")
    catalog = catalog_from_frame(df)

    logger.info("Loaded %d locations from %s", len(catalog), path)
    return catalog
