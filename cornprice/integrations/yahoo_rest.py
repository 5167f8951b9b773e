from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from cornprice.errors import TransportError, ValidationError


class YahooQuoteClient:
    """Single-shot Yahoo Finance quote lookup returning the raw JSON envelope."""

    _DEFAULT_URL = "https://query1.finance.yahoo.com/v7/finance/quote"

    # provider rejects requests that do not look like browser traffic
    _HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
        ),
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.9",
        "Referer": "https://finance.yahoo.com/",
    }

    def __init__(
        self,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout: float = 5,
    ) -> None:
        self.session = session or requests
        self.base_url = base_url or self._DEFAULT_URL
        self.timeout = timeout

    def fetch_raw_quote(self, symbol: str) -> Dict[str, Any]:
        try:
            response = self.session.get(
                self.base_url,
                headers=dict(self._HEADERS),
                params={"symbols": symbol},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError("Failed to reach quote provider") from exc

        status_code = response.status_code
        if not 200 <= status_code < 300:
            raise TransportError(
                f"Upstream responded with status {status_code}",
                status_code=status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ValidationError("invalid JSON from quote provider") from exc
