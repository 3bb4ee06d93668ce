"""HTTP client for the Gemini generateContent endpoint."""

from __future__ import annotations

import logging
import time

import httpx

from ...config import settings

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.gemini_api_key
        if not self.api_key:
            raise ValueError("Gemini API key is not configured.")
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.assistant_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.assistant_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.assistant_backoff_seconds
        self.transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            headers={"x-goog-api-key": self.api_key},
            transport=self.transport,
        )

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` as a single user turn and return the concatenated reply text."""

        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.post(url, json=payload)
                    response.raise_for_status()
                    return extract_text(response.json())
                except httpx.HTTPStatusError as exc:
                    # Client errors (bad key, bad model) will not improve on retry.
                    if exc.response.status_code < 500 and exc.response.status_code != 429:
                        raise
                    attempt += 1
                    if attempt > self.max_retries:
                        raise
                    time.sleep(self.backoff_seconds * attempt)
                except (httpx.TimeoutException, httpx.NetworkError) as exc:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise ConnectionError(f"Failed to reach completion service at {self.base_url}: {exc}") from exc
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"Completion request failed, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries}): {exc}")
                    time.sleep(wait_time)
        finally:
            client.close()


def extract_text(data: dict) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))
