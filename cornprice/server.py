from __future__ import annotations

import uvicorn

from cornprice.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    print(f"[SERVER][start] host={settings.HOST} port={settings.PORT}", flush=True)
    uvicorn.run("cornprice.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
