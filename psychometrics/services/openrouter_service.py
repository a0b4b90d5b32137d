"""
LLM Psychometrics — OpenRouterService: chat-completion client.

Sends one stateless prompt (optionally preceded by a persona system prompt)
to the OpenRouter chat-completions endpoint and returns the assistant text.

Transient failures are retried with tenacity:

* HTTP 429, 408 and 5xx responses
* network errors and timeouts (``httpx.TransportError``)

The wait before each retry is the server's ``Retry-After`` when given,
otherwise ``min(base * 2**attempt, max)`` plus up to ``BACKOFF_JITTER_SECONDS``
of random jitter.  Other HTTP errors raise ``OpenRouterError`` immediately.
"""

from __future__ import annotations

import asyncio
import json
import random
import time
from email.utils import parsedate_to_datetime
from typing import Any, Awaitable, Callable, Optional

import httpx
import structlog
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt

from psychometrics.config import get_settings

logger = structlog.get_logger("psychometrics.openrouter_service")


class OpenRouterError(RuntimeError):
    """Non-2xx response from the provider."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        retry_after: Optional[float] = None,
    ) -> None:
        super().__init__(f"OpenRouter API Error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body
        self.retry_after = retry_after

    @property
    def retryable(self) -> bool:
        return self.status_code in (408, 429) or 500 <= self.status_code <= 599


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, OpenRouterError):
        return exc.retryable
    return isinstance(exc, httpx.TransportError)


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Convert a ``Retry-After`` header (seconds or HTTP date) to seconds."""
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        return seconds if seconds > 0 else None

    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    return max(when.timestamp() - time.time(), 0.0)


class OpenRouterService:
    """Thin async client for OpenRouter chat completions."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        settings = get_settings()
        self._settings = settings
        self._api_key = api_key if api_key is not None else settings.OPENROUTER_API_KEY
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=settings.OPENROUTER_BASE_URL,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
        self._sleep = sleep

    async def __aenter__(self) -> "OpenRouterService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ══════════════════════════════════════════════════════════════════
    # Public API
    # ══════════════════════════════════════════════════════════════════

    async def complete(
        self,
        model: str,
        prompt: str,
        temperature: Optional[float] = None,
        system_prompt: str = "",
    ) -> str:
        """Return the assistant's reply for ``prompt``.

        Falls back to the ``reasoning`` field when ``content`` is empty
        (thinking models), and to the raw response JSON when both are
        missing.

        Raises
        ------
        OpenRouterError
            Non-retryable HTTP error, or a retryable one after the final
            attempt.
        httpx.TransportError
            Network failure or timeout after the final attempt.
        """
        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": model,
            "messages": messages,
            "temperature": (
                self._settings.DEFAULT_TEMPERATURE if temperature is None else temperature
            ),
            "max_tokens": self._settings.MAX_OUTPUT_TOKENS,
        }

        async for attempt in AsyncRetrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self._settings.MAX_RETRIES + 1),
            wait=self._wait,
            sleep=self._sleep,
            before_sleep=self._log_retry,
            reraise=True,
        ):
            with attempt:
                data = await self._post(payload)

        return self._extract_text(data, model)

    # ══════════════════════════════════════════════════════════════════
    # Internals
    # ══════════════════════════════════════════════════════════════════

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self._settings.OPENROUTER_REFERER,
            "X-Title": self._settings.OPENROUTER_APP_TITLE,
        }

    async def _post(self, payload: dict) -> dict:
        response = await self._client.post(
            "/chat/completions",
            json=payload,
            headers=self._headers(),
        )
        if response.is_success:
            return response.json()

        raise OpenRouterError(
            status_code=response.status_code,
            body=response.text,
            retry_after=parse_retry_after(response.headers.get("retry-after")),
        )

    def _wait(self, retry_state) -> float:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(exc, OpenRouterError) and exc.retry_after is not None:
            return exc.retry_after

        attempt = retry_state.attempt_number - 1
        backoff = min(
            self._settings.BACKOFF_BASE_SECONDS * (2 ** attempt),
            self._settings.BACKOFF_MAX_SECONDS,
        )
        return backoff + random.uniform(0, self._settings.BACKOFF_JITTER_SECONDS)

    @staticmethod
    def _log_retry(retry_state) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "openrouter_retry",
            attempt_number=retry_state.attempt_number,
            wait_seconds=round(retry_state.next_action.sleep, 3) if retry_state.next_action else None,
            error=str(exc),
        )

    @staticmethod
    def _extract_text(data: dict, model: str) -> str:
        choices = data.get("choices") or [{}]
        message = choices[0].get("message") or {}

        content = message.get("content")
        if content:
            return content

        reasoning = message.get("reasoning")
        if reasoning:
            logger.info("content_empty_using_reasoning", model=model)
            return reasoning

        logger.warning("empty_completion_content", model=model)
        return json.dumps(data)
