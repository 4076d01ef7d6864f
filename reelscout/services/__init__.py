from . import (
    availability_service,
    catalog_service,
    search_service,
    title_service,
)

__all__ = [
    "availability_service",
    "catalog_service",
    "search_service",
    "title_service",
]
