"""
Pydantic models for catalog API responses.

Python attributes are snake_case; the wire format uses the camelCase aliases.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from catalog.data.product_store import Product


class ProductResponse(BaseModel):
    """A product as returned by the API."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Server-assigned product ID")
    name: str
    description: str
    price: float = Field(ge=0)
    category: str
    in_stock: bool = Field(alias="inStock")

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            in_stock=product.in_stock,
        )


class ProductListResponse(BaseModel):
    """Response model for the paginated listing endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(description="Number of products after filtering")
    page: int
    limit: int
    total_pages: Optional[int] = Field(alias="totalPages", description="null when limit is 0")
    data: List[ProductResponse]


class SearchResponse(BaseModel):
    """Response model for the search endpoint."""
    query: str
    count: int
    data: List[ProductResponse]


class StatsResponse(BaseModel):
    """Response model for catalog statistics."""
    model_config = ConfigDict(populate_by_name=True)

    total: int
    in_stock: int = Field(alias="inStock")
    out_of_stock: int = Field(alias="outOfStock")
    by_category: Dict[str, int] = Field(alias="byCategory", description="Category -> count, first-seen order")


class DeleteResponse(BaseModel):
    """Response model for product deletion."""
    message: str
    product: ProductResponse


class MessageResponse(BaseModel):
    message: str


class ErrorDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    message: str
    status_code: int = Field(alias="statusCode")


class ErrorResponse(BaseModel):
    """Envelope returned for every failure."""
    error: ErrorDetail
