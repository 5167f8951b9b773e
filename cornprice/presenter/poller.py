from __future__ import annotations

import threading
from typing import Callable, Literal, Optional

from pydantic import BaseModel

from cornprice.schemas.quote import Delta, Quote
from cornprice.services.delta import compute_delta


class PollState(BaseModel):
    status: Literal["idle", "loading", "success", "error"] = "idle"
    quote: Quote | None = None
    delta: Delta | None = None
    error: str | None = None


class QuotePoller:
    """Background poller with a cooperative liveness flag.

    ``start()`` fetches immediately and then once per ``interval_sec``. Only the
    first acquisition reports ``loading``. After ``stop()`` any result still in
    flight is dropped instead of being applied.
    """

    def __init__(
        self,
        fetch: Callable[[], Quote],
        *,
        interval_sec: float = 5.0,
        on_update: Optional[Callable[[PollState], None]] = None,
    ) -> None:
        if interval_sec <= 0:
            raise ValueError("interval_sec must be positive")
        self._fetch = fetch
        self.interval_sec = interval_sec
        self._on_update = on_update
        self._lock = threading.RLock()
        self._state = PollState()
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    def state(self) -> PollState:
        with self._lock:
            return self._state.model_copy()

    def start(self) -> None:
        if self.running:
            raise RuntimeError("poller already running")

        stop_event = threading.Event()
        self._stop_event = stop_event
        self._apply(PollState(status="loading"), stop_event)

        thread = threading.Thread(
            target=self._run,
            args=(stop_event,),
            daemon=True,
            name="corn-price-poller",
        )
        self._thread = thread
        print(f"[POLL][start] interval_sec={self.interval_sec}", flush=True)
        thread.start()

    def stop(self, timeout: float | None = None) -> None:
        stop_event, thread = self._stop_event, self._thread
        if stop_event is None:
            return
        with self._lock:
            stop_event.set()
        self._thread = None
        print("[POLL][stop]", flush=True)
        if thread is not None and timeout is not None:
            thread.join(timeout=timeout)

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            self._tick(stop_event)
            if stop_event.wait(self.interval_sec):
                break

    def _tick(self, stop_event: threading.Event) -> None:
        try:
            quote = self._fetch()
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            print(f"[POLL][tick_error] error={message}", flush=True)
            next_state = PollState(status="error", error=message)
        else:
            next_state = PollState(
                status="success",
                quote=quote,
                delta=compute_delta(quote),
            )
        self._apply(next_state, stop_event)

    def _apply(self, next_state: PollState, stop_event: threading.Event) -> bool:
        # stop() takes the same lock, so no callback can run once it returns
        with self._lock:
            if stop_event.is_set():
                return False
            self._state = next_state
            if self._on_update is not None:
                self._on_update(next_state)
        return True
