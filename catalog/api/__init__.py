"""
API module for the product catalog.

Provides the FastAPI application factory and response models.
"""
from catalog.api.models import (
    DeleteResponse,
    ErrorResponse,
    ProductListResponse,
    ProductResponse,
    SearchResponse,
    StatsResponse,
)

__all__ = [
    "DeleteResponse",
    "ErrorResponse",
    "ProductListResponse",
    "ProductResponse",
    "SearchResponse",
    "StatsResponse",
]
