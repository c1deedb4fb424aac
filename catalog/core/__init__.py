"""
Core catalog logic: configuration, error taxonomy, validation, access gate and queries.
"""
from catalog.core.config import CatalogConfig, get_config, set_config
from catalog.core.errors import DomainError, ErrorKind, status_code_of

__all__ = [
    "CatalogConfig",
    "get_config",
    "set_config",
    "DomainError",
    "ErrorKind",
    "status_code_of",
]
