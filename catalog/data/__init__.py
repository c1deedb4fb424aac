"""Product data access."""
from catalog.data.product_store import NOT_FOUND_INDEX, Product, ProductStore, new_product_id

__all__ = ["NOT_FOUND_INDEX", "Product", "ProductStore", "new_product_id"]
