"""Remote Monkey language service over HTTP."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from monkey_lens.models import ParseResult, TokenizeResult

_log = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 10.0


class HttpLanguageBackend:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def _post(self, endpoint: str, code: str) -> dict[str, Any]:
        response = await self._client.post(f"/{endpoint}", json={"code": code})
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected {endpoint} response: {payload!r}")
        return payload

    async def tokenize(self, code: str) -> TokenizeResult:
        try:
            return TokenizeResult.model_validate(await self._post("tokenize", code))
        except (httpx.HTTPError, ValueError, ValidationError):
            _log.warning("Tokenize request to %s failed", self.base_url, exc_info=True)
            return TokenizeResult(error="Failed to tokenize code")

    async def parse(self, code: str) -> ParseResult:
        try:
            return ParseResult.model_validate(await self._post("parse", code))
        except (httpx.HTTPError, ValueError, ValidationError):
            _log.warning("Parse request to %s failed", self.base_url, exc_info=True)
            return ParseResult(error="Failed to parse code")

    async def dispose(self) -> None:
        await self._client.aclose()
