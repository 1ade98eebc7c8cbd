"""
Unit tests for the Workers AI client.

The HTTP layer is replaced with ``httpx.MockTransport``; every failure
mode must come back as ``None``.
"""

import json

import httpx
import pytest

from app.fittrack.ai_client import CloudflareAIClient


# ======================================================================
# Helpers
# ======================================================================


def _make_client(handler, account_id: str = "acc-123", api_token: str = "tok-456") -> CloudflareAIClient:
    return CloudflareAIClient(
        account_id=account_id,
        api_token=api_token,
        model="@cf/meta/llama-3.1-8b-instruct",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


def _ok(body):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)
    return handler


# ======================================================================
# CloudflareAIClient
# ======================================================================


class TestCloudflareAIClient:
    """Test request shape and response handling."""

    def test_request_shape(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "result": {"response": "ok"}})

        client = _make_client(handler)
        assert client.complete("system text", "user text") == "ok"
        assert client.url == (
            "https://api.cloudflare.com/client/v4/accounts/acc-123/ai/run/@cf/meta/llama-3.1-8b-instruct"
        )
        assert "/accounts/acc-123/ai/run/" in seen["url"]
        assert seen["auth"] == "Bearer tok-456"
        assert seen["body"]["messages"] == [
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ]
        assert seen["body"]["max_tokens"] == 1000
        assert seen["body"]["temperature"] == pytest.approx(0.3)

    def test_decoded_object_is_reencoded(self):
        client = _make_client(_ok({"result": {"response": {"foods": []}}}))
        assert json.loads(client.complete("s", "u")) == {"foods": []}

    @pytest.mark.parametrize("account_id,api_token", [("", "tok"), ("acc", ""), ("", "")])
    def test_unconfigured_makes_no_request(self, account_id, api_token):
        def handler(request):
            raise AssertionError("no request expected")

        client = _make_client(handler, account_id=account_id, api_token=api_token)
        assert client.is_configured is False
        assert client.complete("s", "u") is None

    @pytest.mark.parametrize("status_code", [400, 401, 429, 500, 503])
    def test_error_status(self, status_code):
        client = _make_client(lambda request: httpx.Response(status_code, text="nope"))
        assert client.complete("s", "u") is None

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        assert _make_client(handler).complete("s", "u") is None

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        assert _make_client(handler).complete("s", "u") is None

    def test_non_json_body(self):
        client = _make_client(lambda request: httpx.Response(200, text="<html>"))
        assert client.complete("s", "u") is None

    @pytest.mark.parametrize("body", [
        {},
        {"result": None},
        {"result": {"response": ""}},
        {"result": {"text": "hello"}},
        ["unexpected"],
    ])
    def test_unexpected_body(self, body):
        assert _make_client(_ok(body)).complete("s", "u") is None
