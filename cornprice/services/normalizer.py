from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Callable

from pydantic import ValidationError as PydanticValidationError

from cornprice.errors import ValidationError
from cornprice.schemas.quote import Quote


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_price(value: Any, *, field_name: str) -> float:
    # bool is an int subclass; reject it along with strings and other junk
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"invalid numeric value for {field_name}: {value!r}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise ValidationError(f"invalid numeric value for {field_name}: out of range") from exc
    if not math.isfinite(number) or number < 0:
        raise ValidationError(f"invalid numeric value for {field_name}: {value!r}")
    return number


def _to_instant(value: Any, clock: Callable[[], datetime]) -> datetime:
    if value is None:
        return clock()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"invalid regularMarketTime: {value!r}")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValidationError(f"invalid regularMarketTime: {value!r}") from exc


def _first_result(raw: Any) -> dict:
    if not isinstance(raw, dict):
        raise ValidationError("unexpected payload shape")
    envelope = raw.get("quoteResponse")
    results = envelope.get("result") if isinstance(envelope, dict) else None
    if not isinstance(results, list) or not results:
        raise ValidationError("no data returned")
    first = results[0]
    if not isinstance(first, dict):
        raise ValidationError("unexpected result entry")
    return first


def normalize(
    raw: Any,
    *,
    symbol: str | None = None,
    clock: Callable[[], datetime] = _utc_now,
) -> Quote:
    """Map a Yahoo ``quoteResponse`` envelope onto a :class:`Quote`.

    Only :class:`ValidationError` escapes. A missing ``regularMarketTime`` is
    replaced by ``clock()``; a missing previous close stays ``None``.
    """
    row = _first_result(raw)

    price_raw = row.get("regularMarketPrice")
    if price_raw is None:
        raise ValidationError("missing price in payload")
    price = _to_price(price_raw, field_name="regularMarketPrice")

    previous_raw = row.get("regularMarketPreviousClose")
    previous_close = None
    if previous_raw is not None:
        previous_close = _to_price(previous_raw, field_name="regularMarketPreviousClose")

    try:
        return Quote(
            symbol=str(row.get("symbol") or symbol or ""),
            price=price,
            currency=str(row.get("currency") or "USD"),
            exchange=str(row.get("fullExchangeName") or row.get("exchange") or ""),
            previous_close=previous_close,
            timestamp=_to_instant(row.get("regularMarketTime"), clock),
        )
    except PydanticValidationError as exc:
        raise ValidationError(f"quote failed validation: {exc.error_count()} error(s)") from exc
