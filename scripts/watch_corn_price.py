from __future__ import annotations

import argparse
from pathlib import Path
import sys
import threading

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cornprice.config.settings import get_settings
from cornprice.presenter.http_fetcher import HttpQuoteFetcher
from cornprice.presenter.poller import QuotePoller
from cornprice.presenter.render import render


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Poll the corn price relay and print updates.")
    parser.add_argument("--base-url", default=f"http://localhost:{settings.PORT}")
    parser.add_argument("--interval", type=float, default=settings.POLL_INTERVAL_SEC)
    args = parser.parse_args()

    poller = QuotePoller(
        HttpQuoteFetcher(args.base_url),
        interval_sec=args.interval,
        on_update=lambda state: print(render(state), flush=True),
    )
    poller.start()
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        pass
    finally:
        poller.stop(timeout=1.0)


if __name__ == "__main__":
    main()
