from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator


def format_timestamp(value: datetime) -> str:
    """Canonical wire form: UTC, millisecond precision, ``Z`` suffix."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _check_price(value: float, *, field_name: str) -> float:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{field_name} must be a finite non-negative number")
    return value


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    price: float
    currency: str
    exchange: str
    previous_close: float | None = None
    timestamp: datetime

    @field_validator("price")
    @classmethod
    def _validate_price(cls, value: float) -> float:
        return _check_price(value, field_name="price")

    @field_validator("previous_close")
    @classmethod
    def _validate_previous_close(cls, value: float | None) -> float | None:
        if value is None:
            return None
        return _check_price(value, field_name="previous_close")

    @field_validator("timestamp")
    @classmethod
    def _validate_timestamp(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def to_wire(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "price": self.price,
            "currency": self.currency,
            "exchange": self.exchange,
            "previousClose": self.previous_close,
            "timestamp": format_timestamp(self.timestamp),
        }

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "Quote":
        return cls(
            symbol=payload["symbol"],
            price=payload["price"],
            currency=payload["currency"],
            exchange=payload["exchange"],
            previous_close=payload.get("previousClose"),
            timestamp=parse_timestamp(payload["timestamp"]),
        )


class Delta(BaseModel):
    model_config = ConfigDict(frozen=True)

    absolute_change: float
    percent_change: float

    @property
    def direction(self) -> Literal["up", "down"]:
        return "up" if self.absolute_change >= 0 else "down"


class HealthResponse(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
