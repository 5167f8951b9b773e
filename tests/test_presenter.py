import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from cornprice.presenter.http_fetcher import FetchError, HttpQuoteFetcher
from cornprice.presenter.poller import PollState
from cornprice.presenter.render import render
from cornprice.schemas.quote import Quote
from cornprice.services.delta import compute_delta

WIRE = {
    "symbol": "ZC=F",
    "price": 452.25,
    "currency": "USD",
    "exchange": "Chicago Board of Trade",
    "previousClose": 448.75,
    "timestamp": "2023-11-14T22:13:20.000Z",
}


def _response(status_code, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class HttpQuoteFetcherTest(unittest.TestCase):
    def test_decodes_wire_quote(self):
        session = MagicMock()
        session.get.return_value = _response(200, WIRE)

        quote = HttpQuoteFetcher("http://relay.test/", session=session)()

        session.get.assert_called_once_with("http://relay.test/api/corn-price", timeout=10)
        self.assertEqual(quote.price, 452.25)
        self.assertEqual(quote.previous_close, 448.75)
        self.assertEqual(quote.timestamp, datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))

    def test_502_surfaces_server_error_message(self):
        session = MagicMock()
        session.get.return_value = _response(502, {"error": "Failed to fetch corn price", "details": "no data returned"})

        with self.assertRaises(FetchError) as ctx:
            HttpQuoteFetcher(session=session)()

        self.assertEqual(str(ctx.exception), "Failed to fetch corn price")
        self.assertEqual(ctx.exception.status_code, 502)

    def test_non_json_error_body_falls_back_to_status(self):
        session = MagicMock()
        session.get.return_value = _response(404, json_error=ValueError("not json"))

        with self.assertRaises(FetchError) as ctx:
            HttpQuoteFetcher(session=session)()

        self.assertEqual(str(ctx.exception), "Request failed with status 404")


class RenderTest(unittest.TestCase):
    def test_loading_and_idle(self):
        self.assertEqual(render(PollState(status="loading")), "Loading corn price...")
        self.assertEqual(render(PollState()), "Loading corn price...")

    def test_error(self):
        state = PollState(status="error", error="Failed to fetch corn price")
        self.assertEqual(render(state), "Error: Failed to fetch corn price")

    def test_success_with_delta(self):
        quote = Quote.from_wire(WIRE)
        text = render(PollState(status="success", quote=quote, delta=compute_delta(quote)))

        self.assertEqual(
            text,
            "ZC=F 452.25 USD (Chicago Board of Trade) ▲ +3.50 (+0.78%) as of 2023-11-14T22:13:20.000Z",
        )

    def test_success_down_move(self):
        quote = Quote.from_wire({**WIRE, "price": 440.0})
        text = render(PollState(status="success", quote=quote, delta=compute_delta(quote)))

        self.assertIn("▼ -8.75 (-1.95%)", text)

    def test_success_without_previous_close(self):
        quote = Quote.from_wire({**WIRE, "previousClose": None})
        text = render(PollState(status="success", quote=quote, delta=compute_delta(quote)))

        self.assertIn("change n/a", text)
        self.assertNotIn("%", text)


if __name__ == "__main__":
    unittest.main()
