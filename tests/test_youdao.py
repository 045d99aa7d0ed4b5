"""
Tests for the Youdao provider client
"""
import httpx
import pytest

from kanna.services.exceptions import ProviderError
from kanna.services.translation.youdao import YoudaoClient
from tests.helpers import youdao_payload

pytestmark = pytest.mark.asyncio


def _client(settings, handler) -> YoudaoClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YoudaoClient(settings, http)


async def test_fetch_returns_body_verbatim(settings):
    body = youdao_payload("hello", translation=["你好"])
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=body)

    client = _client(settings, handler)

    assert await client.fetch("hello") == body

    request = seen[0]
    assert request.method == "GET"
    assert str(request.url).startswith(settings.YOUDAO_BASE_URL)
    assert dict(request.url.params) == {
        "keyfrom": "YouDaoCV",
        "key": "test-key",
        "type": "data",
        "doctype": "json",
        "version": "1.2",
        "q": "hello",
    }


async def test_fetch_does_not_validate_body(settings):
    client = _client(settings, lambda request: httpx.Response(200, text="<html>not json</html>"))

    assert await client.fetch("hello") == "<html>not json</html>"


@pytest.mark.parametrize("status", [301, 404, 500, 503])
async def test_non_200_status_raises_provider_error(settings, status):
    client = _client(settings, lambda request: httpx.Response(status, text='{"errorCode": 50}'))

    with pytest.raises(ProviderError):
        await client.fetch("hello")


async def test_transport_error_raises_provider_error(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(settings, handler)

    with pytest.raises(ProviderError) as exc_info:
        await client.fetch("hello")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
