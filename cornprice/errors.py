from __future__ import annotations


class QuoteError(Exception):
    """Base class for failures on the corn quote path."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(QuoteError):
    """Upstream could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationError(QuoteError):
    """Upstream answered but the payload cannot be turned into a quote."""


class ServiceError(QuoteError):
    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.details = details

    def to_payload(self) -> dict[str, str]:
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload
