#Marks catalog as a package.
#Re-exports the catalog models and loader so callers don't need internal file names.
#No business logic.

from .models import Catalog, CatalogError, Location, LatLon
from .loader import load_catalog, catalog_from_frame, DEFAULT_CATALOG_PATH

__all__ = [
    "Catalog",
    "CatalogError",
    "Location",
    "LatLon",
    "load_catalog",
    "catalog_from_frame",
    "DEFAULT_CATALOG_PATH",
]
