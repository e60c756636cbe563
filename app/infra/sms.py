"""
Infobip SMS client.

Sends single SMS through the Infobip "advanced" text endpoint:
POST {base_url}/sms/2/text/advanced
"""

import json
import logging
from typing import Any, Optional, Protocol

import httpx

from app.config import get_settings

logger = logging.getLogger(__name__)


class SmsSendError(Exception):
    """Raised when the provider rejects or never receives a message."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SmsSender(Protocol):
    """Anything that can deliver one SMS."""

    async def send(self, to: str, text: str) -> Any:
        ...


class InfobipClient:
    """
    Async HTTP client for Infobip SMS.

    The API key is sent verbatim as the Authorization header and must
    carry the "App " prefix.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        sender: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize client.

        Args:
            base_url: Infobip base URL (defaults to settings)
            api_key: Infobip API key including "App " (defaults to settings)
            sender: Sending number (defaults to settings)
            timeout: Request timeout in seconds
        """
        settings = get_settings()
        self.base_url = base_url or settings.infobip_base_url
        self.api_key = api_key or settings.infobip_api_key
        self.sender = sender or settings.infobip_sender
        self.timeout = timeout or settings.sms_timeout_seconds
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={
                    "Authorization": self.api_key,
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def send(self, to: str, text: str) -> Any:
        """Send one SMS.

        Args:
            to: Recipient phone (E.164)
            text: Message body

        Returns:
            Parsed JSON response, or the raw body when it is not JSON

        Raises:
            SmsSendError: On transport failure or a non-2xx response
        """
        logger.info(f"-> sending SMS to={to} from={self.sender} preview={text[:80]!r}")

        payload = {
            "messages": [
                {
                    "destinations": [{"to": to}],
                    "from": self.sender,
                    "text": text,
                }
            ]
        }

        try:
            client = await self._get_client()
            response = await client.post("/sms/2/text/advanced", json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"sendSms failed for {to}: {e}")
            raise SmsSendError(f"Infobip request failed: {e}") from e

        body = response.text
        if response.status_code >= 400:
            logger.error(f"<- Infobip ERROR {response.status_code}: {body}")
            raise SmsSendError(
                f"Infobip {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        logger.info(f"<- Infobip OK {body[:200]}")
        try:
            return json.loads(body)
        except json.JSONDecodeError:
            return body


# Singleton
_sms_client: Optional[InfobipClient] = None


def get_sms_client() -> InfobipClient:
    """Get singleton InfobipClient."""
    global _sms_client
    if _sms_client is None:
        _sms_client = InfobipClient()
    return _sms_client


async def close_sms_client() -> None:
    """Close the singleton client (called on shutdown)."""
    global _sms_client
    if _sms_client is not None:
        await _sms_client.close()
        _sms_client = None
