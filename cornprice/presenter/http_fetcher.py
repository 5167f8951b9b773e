from __future__ import annotations

from typing import Any, Optional

import requests

from cornprice.schemas.quote import Quote


class FetchError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpQuoteFetcher:
    """Client side of ``GET /api/corn-price``; usable as a poller fetch callable."""

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        session: Optional[Any] = None,
        timeout: float = 10,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests
        self.timeout = timeout

    def __call__(self) -> Quote:
        response = self.session.get(f"{self.base_url}/api/corn-price", timeout=self.timeout)
        if not 200 <= response.status_code < 300:
            raise FetchError(self._error_message(response), status_code=response.status_code)
        return Quote.from_wire(response.json())

    @staticmethod
    def _error_message(response: Any) -> str:
        fallback = f"Request failed with status {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            return fallback
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return fallback
