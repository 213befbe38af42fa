"""
Warmup (keep‑warm) handling.

A scheduler periodically posts ``{"source": "warmup", "concurrency": N}``.
The receiving instance counts itself as warm and, when ``N > 0``, asks ``N``
sibling instances to warm up by dispatching child events with
``concurrency=0`` (so children never fan out again).

:class:`WarmupFanout` runs the ``N`` dispatches on separate threads, waits for
all of them, keeps only the first error and then sleeps briefly so that the
siblings overlap.  :class:`WarmupScheduler` is a daemon thread that triggers
the fan‑out on a fixed interval.
"""

import math
import time
import logging
import threading

from typing import Any, Callable, Dict, List, Optional

from translation_router_lib.utils.http import HttpRequester
from translation_router_lib.exceptions import WarmupError
from translation_router_lib.core.constants import WARMUP_DELAY_SECONDS
from translation_router_lib.data_models.constants import (
    WARMUP_SOURCE,
    WARMUP_SOURCE_PARAM,
    WARMUP_CONCURRENCY_PARAM,
)
from translation_router_lib.data_models.warmup import WarmupEvent, WarmupResponse


def is_warmup_event(payload: Any) -> Optional[WarmupEvent]:
    """
    Return the parsed event when *payload* is a warmup event, otherwise ``None``.

    Only a JSON number is accepted as ``concurrency`` and it is truncated
    towards zero (``2.5`` -> ``2``).  Anything else (missing, strings,
    booleans, non‑finite floats) is treated as ``0``.
    """
    if not isinstance(payload, dict):
        return None
    if payload.get(WARMUP_SOURCE_PARAM) != WARMUP_SOURCE:
        return None

    concurrency = 0
    raw = payload.get(WARMUP_CONCURRENCY_PARAM)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if math.isfinite(raw):
            concurrency = int(raw)
    return WarmupEvent(source=WARMUP_SOURCE, concurrency=concurrency)


class HttpSelfInvoker:
    """
    Dispatch child warmup events to the router's own public URL.

    Parameters
    ----------
    self_url : str
        Base URL of the router (load balancer address).
    endpoint : str
        Path accepting warmup events.
    timeout : int
        Request timeout in seconds.
    """

    def __init__(
        self,
        self_url: str,
        endpoint: str = "/api/warmup",
        timeout: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        self.endpoint = endpoint
        self.logger = logger or logging.getLogger(__name__)
        self._http = HttpRequester(base_url=self_url, timeout=timeout, logger=logger)

    def __call__(self, event: Dict[str, Any]) -> None:
        self._http.post(self.endpoint, json=event)


class WarmupFanout:
    """
    Handle warmup events, optionally warming sibling instances.

    Parameters
    ----------
    invoke_self : Callable[[dict], None], optional
        Dispatches one child event; ``None`` disables the fan‑out (only this
        instance is reported warm).
    delay_seconds : float
        Pause after dispatching, so that instances overlap.
    """

    def __init__(
        self,
        invoke_self: Optional[Callable[[Dict[str, Any]], None]] = None,
        delay_seconds: float = WARMUP_DELAY_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        self._invoke_self = invoke_self
        self.delay_seconds = delay_seconds
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, event: WarmupEvent) -> Dict[str, Any]:
        """Warm this instance (and siblings) and return the warmup response payload."""
        instances_warmed = 1

        if event.concurrency > 0:
            error = self.dispatch(event.concurrency)
            if error is None:
                instances_warmed += event.concurrency
            else:
                self.logger.warning(f"[warmup] fan-out failed: {error}")

        time.sleep(self.delay_seconds)

        self.logger.debug(f"[warmup] instances warmed: {instances_warmed}")
        return WarmupResponse(instancesWarmed=instances_warmed).as_payload()

    def dispatch(self, count: int) -> Optional[Exception]:
        """
        Dispatch *count* child events concurrently.

        Returns
        -------
        Exception | None
            The first error encountered; other dispatches are not cancelled.
        """
        if count <= 0:
            return None
        if self._invoke_self is None:
            return WarmupError("warmup fan-out is not configured")

        child = WarmupEvent(source=WARMUP_SOURCE, concurrency=0).model_dump()
        first_error: List[Exception] = []
        error_lock = threading.Lock()

        def _dispatch_one():
            try:
                self._invoke_self(dict(child))
            except Exception as exc:
                with error_lock:
                    if not first_error:
                        first_error.append(exc)

        threads = [
            threading.Thread(target=_dispatch_one, daemon=True) for _ in range(count)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        return first_error[0] if first_error else None


class WarmupScheduler:
    """
    Background thread that triggers the warmup fan‑out on a fixed interval.

    Parameters
    ----------
    fanout : WarmupFanout
        Fan‑out used to handle each scheduled event.
    interval_seconds : float
        Period between events.
    concurrency : int
        Sibling instances to warm on every tick.
    """

    def __init__(
        self,
        fanout: WarmupFanout,
        interval_seconds: float,
        concurrency: int = 0,
        logger: Optional[logging.Logger] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("Warmup interval must be positive")

        self._fanout = fanout
        self.interval_seconds = interval_seconds
        self.concurrency = concurrency
        self.logger = logger or logging.getLogger(__name__)

        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def start(self) -> None:
        self._thread.start()
        self.logger.debug("[warmup-scheduler] thread started")

    def stop(self) -> None:
        self._stop_event.set()
        self._thread.join()
        self.logger.debug("[warmup-scheduler] thread stopped")

    def tick(self) -> Dict[str, Any]:
        """Handle one scheduled warmup event."""
        return self._fanout.handle(
            WarmupEvent(source=WARMUP_SOURCE, concurrency=self.concurrency)
        )

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval_seconds):
            try:
                self.tick()
            except Exception as exc:
                self.logger.exception("WarmupScheduler error: %s", exc)
