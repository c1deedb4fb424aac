"""
Product Catalog - in-memory product CRUD service

- Typed domain errors rendered as a uniform JSON envelope
- Field validation for full and partial product payloads
- Filtered, paginated listing plus search and statistics
- Static API key on mutating endpoints
"""

__version__ = '1.0.0'

from catalog.core.config import CatalogConfig, get_config, set_config
from catalog.core.errors import DomainError, ErrorKind

__all__ = [
    'CatalogConfig',
    'get_config',
    'set_config',
    'DomainError',
    'ErrorKind',
]
