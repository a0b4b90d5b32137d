"""Unit tests for OpenRouterService — request shape, retries, fallbacks."""
import json

import httpx
import pytest

from psychometrics.services.openrouter_service import (
    OpenRouterError,
    OpenRouterService,
    parse_retry_after,
)


def _completion(content=None, reasoning=None):
    message = {}
    if content is not None:
        message["content"] = content
    if reasoning is not None:
        message["reasoning"] = reasoning
    return {"choices": [{"message": message}]}


class _Recorder:
    """Scripted transport handler that records every request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _service(handler, sleeps=None):
    async def fake_sleep(seconds):
        if sleeps is not None:
            sleeps.append(seconds)

    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url="https://openrouter.test/api/v1",
    )
    return OpenRouterService(api_key="test-key", client=client, sleep=fake_sleep)


class TestRequestShape:

    @pytest.mark.asyncio
    async def test_posts_chat_completion(self):
        handler = _Recorder(httpx.Response(200, json=_completion("4")))
        service = _service(handler)

        reply = await service.complete("openai/gpt-4o-mini", "Rate this", 0.5, "You are a pirate.")

        assert reply == "4"
        request = handler.requests[0]
        assert request.url.path == "/api/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer test-key"
        assert request.headers["x-title"] == "AI Psychometric Profiler"
        assert "http-referer" in request.headers
        body = json.loads(request.content)
        assert body["model"] == "openai/gpt-4o-mini"
        assert body["temperature"] == 0.5
        assert body["max_tokens"] == 4096
        assert body["messages"] == [
            {"role": "system", "content": "You are a pirate."},
            {"role": "user", "content": "Rate this"},
        ]

    @pytest.mark.asyncio
    async def test_no_system_message_without_persona(self):
        handler = _Recorder(httpx.Response(200, json=_completion("3")))
        await _service(handler).complete("m", "p")
        body = json.loads(handler.requests[0].content)
        assert [m["role"] for m in body["messages"]] == ["user"]
        assert body["temperature"] == 0.7


class TestResponseFallbacks:

    @pytest.mark.asyncio
    async def test_reasoning_used_when_content_empty(self):
        handler = _Recorder(httpx.Response(200, json=_completion("", reasoning="I think 2")))
        assert await _service(handler).complete("m", "p") == "I think 2"

    @pytest.mark.asyncio
    async def test_raw_json_when_nothing_usable(self):
        handler = _Recorder(httpx.Response(200, json={"choices": [], "id": "x"}))
        reply = await _service(handler).complete("m", "p")
        assert reply.startswith("{")
        assert json.loads(reply)["id"] == "x"


class TestRetries:

    @pytest.mark.asyncio
    async def test_rate_limit_honours_retry_after(self):
        sleeps = []
        handler = _Recorder(
            httpx.Response(429, headers={"Retry-After": "2"}, text="slow down"),
            httpx.Response(200, json=_completion("5")),
        )
        reply = await _service(handler, sleeps).complete("m", "p")
        assert reply == "5"
        assert sleeps == [2.0]

    @pytest.mark.asyncio
    async def test_server_errors_back_off_exponentially_then_raise(self):
        sleeps = []
        handler = _Recorder(*[httpx.Response(503, text="unavailable") for _ in range(4)])

        with pytest.raises(OpenRouterError) as exc_info:
            await _service(handler, sleeps).complete("m", "p")

        assert exc_info.value.status_code == 503
        assert len(handler.requests) == 4
        for seconds, base in zip(sleeps, (1.0, 2.0, 4.0)):
            assert base <= seconds <= base + 0.25

    @pytest.mark.asyncio
    async def test_client_errors_are_not_retried(self):
        handler = _Recorder(httpx.Response(400, text="bad model"))
        with pytest.raises(OpenRouterError) as exc_info:
            await _service(handler).complete("m", "p")
        assert len(handler.requests) == 1
        assert "400" in str(exc_info.value)
        assert not exc_info.value.retryable

    @pytest.mark.asyncio
    async def test_network_errors_are_retried(self):
        handler = _Recorder(
            httpx.ConnectError("connection refused"),
            httpx.Response(200, json=_completion("1")),
        )
        assert await _service(handler).complete("m", "p") == "1"
        assert len(handler.requests) == 2


class TestRetryAfter:

    @pytest.mark.parametrize("value,expected", [
        ("3", 3.0),
        ("0", None),
        (None, None),
        ("", None),
        ("soon", None),
    ])
    def test_parse(self, value, expected):
        assert parse_retry_after(value) == expected

    def test_http_date_in_past_is_zero(self):
        assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0.0

    @pytest.mark.parametrize("status,retryable", [(408, True), (429, True), (500, True), (404, False)])
    def test_retryable_statuses(self, status, retryable):
        assert OpenRouterError(status).retryable is retryable
