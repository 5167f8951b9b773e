from __future__ import annotations

from typing import Callable

from cornprice.errors import QuoteError, ServiceError, TransportError
from cornprice.schemas.quote import Quote
from cornprice.services.normalizer import normalize


class QuoteService:
    """Fetch-then-normalize for one fixed instrument; one upstream call per request."""

    USER_MESSAGE = "Failed to fetch corn price"

    def __init__(
        self,
        *,
        rest_client,
        symbol: str = "ZC=F",
        normalizer: Callable[..., Quote] = normalize,
    ) -> None:
        self.rest_client = rest_client
        self.symbol = symbol
        self.normalizer = normalizer

    def get_quote(self) -> Quote:
        try:
            raw = self.rest_client.fetch_raw_quote(self.symbol)
            return self.normalizer(raw, symbol=self.symbol)
        except QuoteError as exc:
            kind = "transport" if isinstance(exc, TransportError) else "validation"
            status = getattr(exc, "status_code", None)
            print(
                f"[QUOTE][upstream_error] symbol={self.symbol} kind={kind} "
                f"status={status} detail={exc.message}",
                flush=True,
            )
            raise ServiceError(self.USER_MESSAGE, details=exc.message) from exc
        except Exception as exc:
            detail = f"{exc.__class__.__name__}: {exc}"
            print(
                f"[QUOTE][unexpected_error] symbol={self.symbol} detail={detail}",
                flush=True,
            )
            raise ServiceError(self.USER_MESSAGE, details=detail) from exc
