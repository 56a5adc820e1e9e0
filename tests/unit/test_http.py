"""Tests for the HTTP request layer."""

import httpx
import pytest

from scalr_client.errors import NotFoundError, ServerError, TooManyRequestsError, TransportError, UnauthorizedError
from scalr_client.http import AsyncHTTPClient, HTTPClient, encode_params
from scalr_client.jsonapi import MEDIA_TYPE
from scalr_client.testing import MockAPI, error_document, request_json

BASE_URL = "https://scalr.test/api/iacp/v3"


@pytest.fixture
def http(api):
    with HTTPClient(BASE_URL, "secret-token", retry_max=0, transport=api.transport) as client:
        yield client


class TestEncodeParams:
    @pytest.mark.unit
    def test_encoding(self):
        params = {
            "page[size]": 50,
            "filter[name]": "dev",
            "include": ["created-by", "tags"],
            "force": True,
            "dry": False,
            "empty": "",
            "missing": None,
        }

        assert encode_params(params) == {
            "page[size]": "50",
            "filter[name]": "dev",
            "include": "created-by,tags",
            "force": "true",
            "dry": "false",
        }


class TestRequests:
    @pytest.mark.unit
    def test_default_headers(self, api, http):
        api.add("GET", "environments", json={"data": []})

        http.get("environments")

        request = api.calls[0]
        assert request.url == httpx.URL(f"{BASE_URL}/environments")
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert request.headers["Content-Type"] == MEDIA_TYPE
        assert request.headers["Accept"] == MEDIA_TYPE
        assert request.headers["User-Agent"].startswith("scalr-client/")

    @pytest.mark.unit
    def test_leading_slash_stays_under_api_root(self, api, http):
        api.add("GET", "workspaces/ws-1", json={"data": None})

        http.get("/workspaces/ws-1")

        assert api.calls[0].url.path == "/api/iacp/v3/workspaces/ws-1"

    @pytest.mark.unit
    def test_params_and_json_body(self, api, http):
        api.add("POST", "vars", status_code=201, json={"data": None})

        http.post("vars", {"data": {"type": "vars"}}, params={"force": "true"})

        request = api.calls[0]
        assert request.url.params["force"] == "true"
        assert request_json(request) == {"data": {"type": "vars"}}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("body", "content"),
        [(b"raw", b"raw"), ("text", b"text"), (None, b"")],
    )
    def test_body_encoding(self, api, http, body, content):
        api.add("PATCH", "things", json={})

        http.patch("things", body)

        assert api.calls[0].content == content

    @pytest.mark.unit
    def test_put_and_delete(self, api, http):
        api.add("PUT", "things", status_code=204)
        api.add("DELETE", "things", status_code=204)

        assert http.put("things").status_code == 204
        assert http.delete("things", {"data": []}).status_code == 204
        assert [call.method for call in api.calls] == ["PUT", "DELETE"]


class TestHeaders:
    @pytest.mark.unit
    def test_precedence(self, api):
        api.add("GET", "environments", json={"data": []})
        client = HTTPClient(
            BASE_URL,
            "t",
            retry_max=0,
            transport=api.transport,
            headers={"Prefer": "profile=preview", "Accept": "application/json"},
        )

        client.get("environments", headers={"Prefer": "profile=internal"})

        request = api.calls[0]
        assert request.headers["Prefer"] == "profile=internal"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Authorization"] == "Bearer t"

    @pytest.mark.unit
    def test_with_header_leaves_original_untouched(self, api, http):
        api.add("GET", "environments", json={"data": []})

        scoped = http.with_header("X-Scalr-Account", "acc-1")
        scoped.get("environments")
        http.get("environments")

        assert api.calls[0].headers["X-Scalr-Account"] == "acc-1"
        assert "X-Scalr-Account" not in api.calls[1].headers
        assert "X-Scalr-Account" not in http.headers

    @pytest.mark.unit
    def test_user_agent_options(self, api):
        api.add("GET", "environments", json={"data": []})

        HTTPClient(BASE_URL, "t", transport=api.transport, app_info=("tool", "1.2")).get("environments")
        HTTPClient(BASE_URL, "t", transport=api.transport, user_agent="custom/1").get("environments")

        assert api.calls[0].headers["User-Agent"].startswith("tool/1.2 scalr-client/")
        assert api.calls[1].headers["User-Agent"] == "custom/1"


class TestErrors:
    @pytest.mark.unit
    def test_error_response_raises(self, api, http):
        body = error_document(404, "Not Found", "Environment not found")
        api.add("GET", "environments/env-x", status_code=404, json=body)

        with pytest.raises(NotFoundError) as exc_info:
            http.get("environments/env-x")

        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "not found: Not Found: Environment not found"

    @pytest.mark.unit
    def test_unauthorized(self, api, http):
        api.add("GET", "environments", status_code=401, json=error_document(401, "Unauthorized"))

        with pytest.raises(UnauthorizedError):
            http.get("environments")

    @pytest.mark.unit
    def test_exhausted_429_is_classified(self, api, no_sleep):
        api.add("GET", "environments", status_code=429, headers={"Retry-After": "1"}, json={"errors": []})
        client = HTTPClient(BASE_URL, "t", retry_max=2, transport=api.transport)

        with pytest.raises(TooManyRequestsError) as exc_info:
            client.get("environments")

        assert exc_info.value.retry_after == 1
        assert len(api.calls) == 3

    @pytest.mark.unit
    def test_server_errors_retried_only_when_enabled(self, api, no_sleep):
        api.add("GET", "environments", status_code=500, json={"errors": []})
        api.add("GET", "environments", status_code=500, json={"errors": []})
        api.add("GET", "environments", json={"data": []})

        with pytest.raises(ServerError):
            HTTPClient(BASE_URL, "t", retry_max=3, transport=api.transport).get("environments")

        response = HTTPClient(
            BASE_URL, "t", retry_max=3, retry_server_errors=True, transport=api.transport
        ).get("environments")
        assert response.status_code == 200
        assert len(api.calls) == 3

    @pytest.mark.unit
    def test_transport_error_after_retries(self, no_sleep):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = HTTPClient(BASE_URL, "t", retry_max=2, transport=httpx.MockTransport(refuse))

        with pytest.raises(TransportError, match="request failed after 2 retries: connection refused") as exc_info:
            client.get("environments")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert len(no_sleep) == 2

    @pytest.mark.unit
    def test_successful_request_logged(self, api, http, caplog):
        api.add("GET", "environments", json={"data": []})

        with caplog.at_level("DEBUG", logger="scalr_client.http"):
            http.get("environments")

        assert "HTTP request completed successfully: GET" in caplog.text
        assert "secret-token" not in caplog.text


class TestAsyncHTTPClient:
    @pytest.mark.unit
    async def test_request(self):
        api = MockAPI()
        api.add("GET", "environments", json={"data": []})

        async with AsyncHTTPClient(BASE_URL, "t", retry_max=0, transport=api.transport) as client:
            response = await client.get("environments", params={"page[size]": "10"})

        assert response.json() == {"data": []}
        assert api.calls[0].url.params["page[size]"] == "10"
        assert api.calls[0].headers["Authorization"] == "Bearer t"

    @pytest.mark.unit
    async def test_error(self):
        api = MockAPI()
        api.add("DELETE", "environments/env-1", status_code=404, json=error_document(404, "Not Found"))

        async with AsyncHTTPClient(BASE_URL, "t", retry_max=0, transport=api.transport) as client:
            with pytest.raises(NotFoundError):
                await client.delete("environments/env-1")
