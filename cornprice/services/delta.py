from __future__ import annotations

from cornprice.schemas.quote import Delta, Quote


def compute_delta(quote: Quote) -> Delta | None:
    """Change versus previous close; ``None`` when the percent is undefined."""
    previous_close = quote.previous_close
    if previous_close is None or previous_close == 0:
        return None

    absolute_change = quote.price - previous_close
    return Delta(
        absolute_change=absolute_change,
        percent_change=absolute_change / previous_close * 100,
    )
