from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cornprice.api.routes import router
from cornprice.config.settings import Settings, get_settings
from cornprice.integrations.yahoo_rest import YahooQuoteClient
from cornprice.services.quote_service import QuoteService


def build_quote_service(settings: Settings) -> QuoteService:
    return QuoteService(
        rest_client=YahooQuoteClient(
            base_url=settings.QUOTE_URL,
            timeout=settings.UPSTREAM_TIMEOUT_SEC,
        ),
        symbol=settings.QUOTE_SYMBOL,
    )


def create_app(quote_service: QuoteService | None = None) -> FastAPI:
    app = FastAPI(title="Corn Price Relay", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(router, prefix="/api")

    app.state.quote_service = quote_service or build_quote_service(get_settings())
    return app


app = create_app()
