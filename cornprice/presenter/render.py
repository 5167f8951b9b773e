from __future__ import annotations

from cornprice.presenter.poller import PollState
from cornprice.schemas.quote import format_timestamp

_ARROWS = {"up": "▲", "down": "▼"}


def render(state: PollState) -> str:
    if state.status == "error":
        return f"Error: {state.error}"
    if state.status != "success" or state.quote is None:
        return "Loading corn price..."

    quote = state.quote
    line = f"{quote.symbol} {quote.price:.2f} {quote.currency}"
    if quote.exchange:
        line += f" ({quote.exchange})"

    if state.delta is not None:
        delta = state.delta
        line += (
            f" {_ARROWS[delta.direction]} {delta.absolute_change:+.2f}"
            f" ({delta.percent_change:+.2f}%)"
        )
    else:
        line += " change n/a"

    return f"{line} as of {format_timestamp(quote.timestamp)}"
