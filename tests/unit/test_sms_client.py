"""Tests for the Infobip SMS client."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from app.infra.sms import InfobipClient, SmsSendError


class TestInfobipClient:
    """Test InfobipClient."""

    @pytest.fixture
    def client(self):
        """Create client with explicit credentials."""
        return InfobipClient(
            base_url="https://example.api.infobip.com",
            api_key="App test-key",
            sender="+19725550100",
        )

    @pytest.fixture
    def mock_httpx_client(self):
        """Create mock httpx client."""
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_send_payload(self, client, mock_httpx_client):
        """Test the advanced-text request body."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = '{"messages": [{"messageId": "m-1"}]}'

        mock_httpx_client.post = AsyncMock(return_value=mock_response)
        client._client = mock_httpx_client

        result = await client.send("+12145550101", "Elite Kutz: hello")

        mock_httpx_client.post.assert_awaited_once_with(
            "/sms/2/text/advanced",
            json={
                "messages": [
                    {
                        "destinations": [{"to": "+12145550101"}],
                        "from": "+19725550100",
                        "text": "Elite Kutz: hello",
                    }
                ]
            },
        )
        assert result == {"messages": [{"messageId": "m-1"}]}

    @pytest.mark.asyncio
    async def test_send_non_json_body(self, client, mock_httpx_client):
        """Test a plain text success body is returned as-is."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = "accepted"

        mock_httpx_client.post = AsyncMock(return_value=mock_response)
        client._client = mock_httpx_client

        assert await client.send("+12145550101", "hi") == "accepted"

    @pytest.mark.asyncio
    async def test_send_error_status(self, client, mock_httpx_client):
        """Test non-2xx responses raise with status and body."""
        mock_response = MagicMock()
        mock_response.status_code = 401
        mock_response.text = '{"requestError": {"serviceException": {"messageId": "UNAUTHORIZED"}}}'

        mock_httpx_client.post = AsyncMock(return_value=mock_response)
        client._client = mock_httpx_client

        with pytest.raises(SmsSendError) as exc_info:
            await client.send("+12145550101", "hi")

        assert str(exc_info.value) == "Infobip 401"
        assert exc_info.value.status_code == 401
        assert "UNAUTHORIZED" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_send_transport_error(self, client, mock_httpx_client):
        """Test network failures become SmsSendError."""
        mock_httpx_client.post = AsyncMock(side_effect=httpx.ConnectError("refused"))
        client._client = mock_httpx_client

        with pytest.raises(SmsSendError) as exc_info:
            await client.send("+12145550101", "hi")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_auth_header_sent_verbatim(self, client):
        """Test the API key is used as-is for Authorization."""
        http = await client._get_client()
        try:
            assert http.headers["Authorization"] == "App test-key"
            assert str(http.base_url).startswith("https://example.api.infobip.com")
        finally:
            await client.close()

        assert client._client is None

    @pytest.mark.asyncio
    async def test_send_over_mock_transport(self):
        """Test a full request through httpx.MockTransport."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["auth"] = request.headers["Authorization"]
            return httpx.Response(200, json={"messages": [{"status": {"groupName": "PENDING"}}]})

        client = InfobipClient(
            base_url="https://example.api.infobip.com",
            api_key="App k",
            sender="ElitKutz",
        )
        client._client = httpx.AsyncClient(
            base_url=client.base_url,
            headers={"Authorization": client.api_key},
            transport=httpx.MockTransport(handler),
        )

        result = await client.send("+12145550101", "hi")
        await client.close()

        assert seen == {"path": "/sms/2/text/advanced", "auth": "App k"}
        assert result["messages"][0]["status"]["groupName"] == "PENDING"

    @pytest.mark.asyncio
    async def test_malformed_base_url(self):
        """Test a bad base URL fails the send instead of escaping."""
        client = InfobipClient(base_url="http://[::1", api_key="App k", sender="+1")

        with pytest.raises(SmsSendError):
            await client.send("+12145550101", "hi")
