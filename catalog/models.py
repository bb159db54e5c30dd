"""
Purpose: Domain models for the destination catalog.
What it does:
Defines a Location (code, name, coordinates, fare) and the read-only Catalog
that maps codes to locations.

Rule: No file parsing and no route math here. Models only.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

LatLon = Tuple[float, float]


class CatalogError(Exception):
    """Raised when catalog data is malformed (duplicate codes, bad prices, missing columns)."""
    pass


@dataclass(frozen=True)
class Location:
    """
    A single catalog entry.
    price == 0 marks the base location every route departs from.
    """
    code: str
    name: str
    coordinates: LatLon
    price: float = 0

    @property
    def is_base(self) -> bool:
        return self.price == 0

    @property
    def fare_label(self) -> str:
        if self.price > 0:
            if float(self.price).is_integer():
                return f"From ${int(self.price)}"
            return f"From ${self.price}"
        return "Origin"


class Catalog(Mapping):
    """
    Immutable code -> Location mapping.

    Insertion order is kept for display only; nothing depends on it
    semantically. Built once at startup and injected wherever it is needed.
    """

    def __init__(self, locations: Iterable[Location]):
        entries: Dict[str, Location] = {}
        for location in locations:
            if location.code in entries:
                raise CatalogError(f"Duplicate location code: {location.code}")
            if location.price < 0:
                raise CatalogError(f"Location {location.code} has a negative price: {location.price}")
            entries[location.code] = location
        self._entries = entries

    def __getitem__(self, code: str) -> Location:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({list(self._entries)})"

    def base_location(self) -> Optional[Location]:
        """First location with price 0, or None if the catalog has no base."""
        for location in self._entries.values():
            if location.is_base:
                return location
        return None

    def destinations(self, origin: str) -> List[Location]:
        """Every location except the origin, in catalog order."""
        return [location for code, location in self._entries.items() if code != origin]
