"""
Static shared-secret check for mutating endpoints.
"""
from typing import Optional

from catalog.core.errors import authentication_failed


def check_api_key(provided: Optional[str], expected: str) -> None:
    """
    Compare the request-supplied API key with the configured secret.

    Plain string equality; a missing or empty key is rejected.

    Raises:
        DomainError: authentication kind when the key is missing or wrong
    """
    if not provided or provided != expected:
        raise authentication_failed("Invalid or missing API key")
