"""Unit tests for base_client module."""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from curalink.data_sources.base_client import BaseClient, ClientConfig, DataSourceError


class ConcreteTestClient(BaseClient):
    """Concrete implementation of BaseClient for testing."""

    @property
    def _source_name(self) -> str:
        return "test_client"


def _mock_session(resp=None, side_effect=None) -> AsyncMock:
    session = AsyncMock()
    session.get = AsyncMock(return_value=resp, side_effect=side_effect)
    session.post = AsyncMock(return_value=resp, side_effect=side_effect)
    return session


def _mock_response(status: int = 200, body=None, text: str = "") -> AsyncMock:
    resp = AsyncMock()
    resp.status = status
    resp.json = AsyncMock(return_value=body)
    resp.text = AsyncMock(return_value=text)
    return resp


class TestBaseClient:
    """Unit tests for BaseClient session lifecycle (no network calls)."""

    async def test_client_context_manager(self):
        """Test that client can be used as async context manager."""
        async with ConcreteTestClient() as client:
            assert client._session is None  # Session created lazily
            session = await client._get_session()

            assert session is not None
            assert not session.closed

        # Session should be closed after exiting context
        assert client._session.closed

    async def test_session_reuse(self):
        """Test that session is reused across requests."""
        client = ConcreteTestClient()

        session1 = await client._get_session()
        session2 = await client._get_session()

        assert session1 is session2
        await client.close()

    async def test_user_agent_is_a_default_header(self):
        client = ConcreteTestClient(ClientConfig(user_agent="CuraLink/1.0 (mailto:x@y.z)"))

        session = await client._get_session()

        assert session.headers["User-Agent"] == "CuraLink/1.0 (mailto:x@y.z)"
        await client.close()


class TestRequest:
    """Unit tests for _request failure handling."""

    async def test_returns_json_on_success(self):
        client = ConcreteTestClient()
        session = _mock_session(_mock_response(body={"ok": True}))

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            result = await client._rest_get("https://example.com/x", {"q": "1"})

        assert result == {"ok": True}
        session.get.assert_awaited_once_with(
            "https://example.com/x", params={"q": "1"}, headers=None
        )

    async def test_post_sends_json_body(self):
        client = ConcreteTestClient()
        session = _mock_session(_mock_response(body={"results": []}))

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            await client._rest_post("https://example.com/search", {"criteria": {}})

        kwargs = session.post.call_args.kwargs
        assert kwargs["json"] == {"criteria": {}}
        assert kwargs["headers"]["Content-Type"] == "application/json"

    async def test_raises_on_http_error_without_retry(self):
        client = ConcreteTestClient()
        session = _mock_session(_mock_response(status=503, text="Service Unavailable"))

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            with pytest.raises(DataSourceError, match="HTTP 503") as exc_info:
                await client._rest_get("https://example.com/x")

        assert exc_info.value.status_code == 503
        assert exc_info.value.source == "test_client"
        session.get.assert_awaited_once()

    async def test_timeout_raises_datasource_error(self):
        client = ConcreteTestClient()
        session = _mock_session(side_effect=asyncio.TimeoutError())

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            with pytest.raises(DataSourceError, match="Timeout"):
                await client._rest_get("https://example.com/x")

    async def test_connection_error_raises_datasource_error(self):
        client = ConcreteTestClient()
        session = _mock_session(side_effect=aiohttp.ClientConnectionError("refused"))

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            with pytest.raises(DataSourceError, match="Connection error"):
                await client._rest_get("https://example.com/x")

    async def test_malformed_body_raises_datasource_error(self):
        client = ConcreteTestClient()
        resp = _mock_response()
        resp.json = AsyncMock(side_effect=json.JSONDecodeError("Expecting value", "<html>", 0))
        session = _mock_session(resp)

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            with pytest.raises(DataSourceError, match="Malformed JSON"):
                await client._rest_get("https://example.com/x")

    async def test_empty_body_raises_datasource_error(self):
        client = ConcreteTestClient()
        session = _mock_session(_mock_response(body=None))

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            with pytest.raises(DataSourceError, match="Empty response body"):
                await client._rest_get("https://example.com/x")

    async def test_undecodable_body_raises_datasource_error(self):
        client = ConcreteTestClient()
        resp = _mock_response()
        resp.json = AsyncMock(
            side_effect=UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")
        )
        session = _mock_session(resp)

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            with pytest.raises(DataSourceError, match="Malformed JSON"):
                await client._rest_get("https://example.com/x")

    @pytest.mark.parametrize("body", [["unexpected"], "text", 42])
    async def test_non_object_body_raises_datasource_error(self, body):
        client = ConcreteTestClient()
        session = _mock_session(_mock_response(body=body))

        with patch.object(client, "_get_session", new=AsyncMock(return_value=session)):
            with pytest.raises(DataSourceError, match="Unexpected response shape"):
                await client._rest_get("https://example.com/x")


class TestParsing:
    """Unit tests for the _parsing guard used around response parsers."""

    def test_shape_errors_become_datasource_error(self):
        client = ConcreteTestClient()

        with pytest.raises(DataSourceError, match="Unexpected response shape") as exc_info:
            with client._parsing("search"):
                None.get("result")

        assert exc_info.value.source == "test_client"
        assert isinstance(exc_info.value.__cause__, AttributeError)

    def test_passes_through_when_body_is_well_formed(self):
        client = ConcreteTestClient()

        with client._parsing("search"):
            value = {"result": [1]}.get("result")

        assert value == [1]
