"""
Kiosk API Key Authentication

Kiosk-originated calls carry a shared secret in the X-API-Key header.
When KIOSK_API_KEY is unset, authentication is disabled so the service
can be exercised locally.
"""

import hashlib
import hmac
import logging
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from app.config import get_settings

logger = logging.getLogger(__name__)

# API Key header scheme
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def hash_api_key(api_key: str) -> str:
    """
    Hash an API key for comparison.

    Uses SHA-256 so compare_digest always sees equal-length inputs.
    """
    return hashlib.sha256(api_key.encode()).hexdigest()


def mask_api_key(api_key: str) -> str:
    """
    Mask API key for logging.

    Shows the first 3 and last 3 characters.
    """
    if len(api_key) < 10:
        return "***"
    return f"{api_key[:3]}...{api_key[-3:]}"


async def require_kiosk_key(
    api_key: Optional[str] = Security(api_key_header),
) -> None:
    """
    FastAPI dependency guarding kiosk endpoints.

    Raises:
        HTTPException: 401 if the key is missing or wrong
    """
    expected = get_settings().kiosk_api_key
    if not expected:
        return

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    if not hmac.compare_digest(hash_api_key(api_key), hash_api_key(expected)):
        logger.warning(f"Rejected kiosk call with key {mask_api_key(api_key)}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )
