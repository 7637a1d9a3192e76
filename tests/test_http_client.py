import types
import httpx
import pytest
from http_client import HttpClient, RequestFailed

class FakeResponse:
    def __init__(self, status_code: int, json_data=None):
        self.status_code = status_code
        self._json = json_data or {}
        self.request = types.SimpleNamespace()

    def json(self):
        return self._json

class FakeAsyncClient:
    """Returns a sequence of responses for each call to request()."""
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    async def request(self, method, path, **kwargs):
        self.calls.append((method, path, kwargs))
        if not self._responses:
            raise RuntimeError("No more fake responses")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    async def aclose(self):
        pass

def make_client():
    return HttpClient(base_url="http://where_the_animals_at/", connect_timeout=1, read_timeout=1)

@pytest.mark.asyncio
async def test_success_returns_response_and_tags_request_id():
    hc = make_client()
    fake = FakeAsyncClient([FakeResponse(200, {"ok": 1})])

    async with hc:
        hc._client = fake
        resp = await hc.request("GET", "/animales", req_id="abc")

    assert resp.json() == {"ok": 1}
    assert fake.calls[0][2]["headers"]["X-Request-Id"] == "abc"
    assert hc.base_url == "http://where_the_animals_at"

@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_non_2xx_fails_once_without_retry(status):
    hc = make_client()
    fake = FakeAsyncClient([FakeResponse(status), FakeResponse(200)])

    async with hc:
        hc._client = fake
        with pytest.raises(RequestFailed) as exc:
            await hc.request("DELETE", "/animales/9")

    assert exc.value.status == status
    assert len(fake.calls) == 1

@pytest.mark.asyncio
async def test_network_error_becomes_request_failed():
    hc = make_client()
    fake = FakeAsyncClient([httpx.ConnectError("boom")])

    async with hc:
        hc._client = fake
        with pytest.raises(RequestFailed) as exc:
            await hc.request("GET", "/animales")

    assert exc.value.status is None
    assert isinstance(exc.value.cause, httpx.ConnectError)
