"""
HTTP client for the kiosk staff-status API.

Barbers text AVAILABLE / UNAVAILABLE; the kiosk owns the roster, so the
change is forwarded there rather than applied locally.
"""

import logging
from typing import Optional

import httpx

from app.config import get_settings

logger = logging.getLogger(__name__)


class StaffStatusError(Exception):
    """Raised when the kiosk rejects a status update."""
    pass


class StaffStatusClient:
    """Posts availability changes to POST /api/barbers/{id}/status."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10.0):
        settings = get_settings()
        self.base_url = base_url if base_url is not None else settings.staff_status_url
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def set_availability(self, staff_id: str, available: bool) -> bool:
        """Report a barber's availability to the kiosk.

        Returns:
            True if the kiosk accepted the update, False if no kiosk
            URL is configured

        Raises:
            StaffStatusError: On transport failure or a non-2xx response
        """
        status_value = "available" if available else "unavailable"
        if not self.enabled:
            logger.warning(f"STAFF_STATUS_URL not set; skipping {staff_id} -> {status_value}")
            return False

        try:
            client = await self._get_client()
            response = await client.post(
                f"/api/barbers/{staff_id}/status",
                json={"status": status_value},
            )
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to set {staff_id} {status_value}: {e}")
            raise StaffStatusError(f"Status update failed for {staff_id}: {e}") from e

        logger.info(f"Barber {staff_id} marked {status_value}")
        return True


# Singleton
_status_client: Optional[StaffStatusClient] = None


def get_staff_status_client() -> StaffStatusClient:
    """Get singleton StaffStatusClient."""
    global _status_client
    if _status_client is None:
        _status_client = StaffStatusClient()
    return _status_client


async def close_staff_status_client() -> None:
    """Close the singleton client (called on shutdown)."""
    global _status_client
    if _status_client is not None:
        await _status_client.close()
        _status_client = None
