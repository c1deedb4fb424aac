"""
In-memory product data access layer.

Holds products as an ordered list for the lifetime of the process. Insertion
order is the default listing order. There is no persistence; the store is
created once per application and handed to request handlers.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from catalog.utils.logger import get_logger

logger = get_logger("data.product_store")

NOT_FOUND_INDEX = -1

# Wire names (camelCase) -> dataclass attribute names
WIRE_TO_ATTRIBUTE = {
    "name": "name",
    "description": "description",
    "price": "price",
    "category": "category",
    "inStock": "in_stock",
}


def new_product_id() -> str:
    """Generate an opaque unique product identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Product:
    """A catalog item."""
    id: str
    name: str
    description: str
    price: float
    category: str
    in_stock: bool

    @classmethod
    def create(cls, fields: Mapping[str, Any]) -> "Product":
        """Build a new product with a fresh id from validated wire fields."""
        return cls(
            id=new_product_id(),
            name=fields["name"],
            description=fields["description"],
            price=fields["price"],
            category=fields["category"],
            in_stock=fields["inStock"],
        )

    def updated(self, fields: Mapping[str, Any]) -> "Product":
        """
        Return a copy with the supplied wire fields overwritten.

        Unknown keys, including "id", are ignored so the id stays immutable.
        """
        changes = {
            attribute: fields[wire_name]
            for wire_name, attribute in WIRE_TO_ATTRIBUTE.items()
            if wire_name in fields
        }
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "inStock": self.in_stock,
        }


SEED_PRODUCTS = [
    {
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": 999.99,
        "category": "Electronics",
        "inStock": True,
    },
    {
        "name": "Coffee Maker",
        "description": "Automatic coffee maker",
        "price": 79.99,
        "category": "Appliances",
        "inStock": True,
    },
    {
        "name": "Desk Chair",
        "description": "Ergonomic office chair",
        "price": 249.99,
        "category": "Furniture",
        "inStock": False,
    },
]


class ProductStore:
    """
    Ordered in-memory collection of products.

    The store trusts its callers: ids are unique because new_product_id()
    generates them, not because insert() checks.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        """Create a store holding the three default products."""
        store = cls(Product.create(fields) for fields in SEED_PRODUCTS)
        logger.info(f"Product store initialized with {len(store)} seed products")
        return store

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def snapshot(self) -> List[Product]:
        """Return a copy of the current sequence, unaffected by later mutation."""
        return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def find_index_by_id(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return NOT_FOUND_INDEX

    def get_at(self, index: int) -> Product:
        return self._products[index]

    def insert(self, product: Product) -> Product:
        self._products.append(product)
        logger.debug(f"Inserted product {product.id}")
        return product

    def replace_at(self, index: int, product: Product) -> Product:
        self._products[index] = product
        logger.debug(f"Replaced product at index {index} ({product.id})")
        return product

    def remove_at(self, index: int) -> Product:
        removed = self._products.pop(index)
        logger.debug(f"Removed product {removed.id}")
        return removed
