from __future__ import annotations

import logging
from typing import Any

import httpx

from gasstation.domain.exceptions import MalformedResponseError, UpstreamUnavailableError


logger = logging.getLogger(__name__)


class HttpxJsonFetcher:
    """Single bounded GET returning the decoded JSON body."""

    def __init__(
        self,
        *,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ):
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive.")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def get_json(self, url: str) -> Any:
        try:
            with httpx.Client(timeout=self._timeout_seconds, transport=self._transport) as client:
                response = client.get(url, headers={"Accept": "application/json"})
        except httpx.TimeoutException as exc:
            raise UpstreamUnavailableError(
                f"Request to {url} timed out after {self._timeout_seconds}s."
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "http_json_fetcher: invalid_status url=%s status=%s",
                url,
                response.status_code,
            )
            raise UpstreamUnavailableError(f"Invalid status code: {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Response from {url} is not valid JSON.") from exc
