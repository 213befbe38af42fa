"""Tests for warmup detection, fan-out and the keep-warm scheduler."""

import threading
from unittest import mock

import pytest

from translation_router_lib.core.warmup import (
    HttpSelfInvoker,
    WarmupFanout,
    WarmupScheduler,
    is_warmup_event,
)
from translation_router_lib.data_models.warmup import WarmupEvent
from translation_router_lib.exceptions import TranslatorTransportError, WarmupError


class RecordingSelfInvoker:
    def __init__(self, fail_every=0):
        self.events = []
        self.fail_every = fail_every
        self._lock = threading.Lock()

    def __call__(self, event):
        with self._lock:
            self.events.append(event)
            count = len(self.events)
        if self.fail_every and count % self.fail_every == 0:
            raise TranslatorTransportError("sibling unreachable")


class TestIsWarmupEvent:
    def test_detects_event(self):
        event = is_warmup_event({"source": "warmup", "concurrency": 3})
        assert event == WarmupEvent(source="warmup", concurrency=3)

    def test_missing_concurrency_is_zero(self):
        assert is_warmup_event({"source": "warmup"}).concurrency == 0

    def test_malformed_concurrency_is_zero(self):
        assert is_warmup_event({"source": "warmup", "concurrency": "lots"}).concurrency == 0

    @pytest.mark.parametrize(
        "raw,expected",
        [(2.5, 2), (3, 3), (-1, -1), (True, 0), ("3", 0), (None, 0), (float("inf"), 0)],
    )
    def test_only_numbers_are_truncated(self, raw, expected):
        event = is_warmup_event({"source": "warmup", "concurrency": raw})
        assert event.concurrency == expected

    @pytest.mark.parametrize(
        "payload",
        [None, [], {"texts": ["a"]}, {"source": "scheduler"}, "warmup"],
    )
    def test_not_an_event(self, payload):
        assert is_warmup_event(payload) is None


class TestWarmupFanout:
    def test_single_instance(self):
        fanout = WarmupFanout(invoke_self=RecordingSelfInvoker(), delay_seconds=0)
        assert fanout.handle(WarmupEvent(concurrency=0)) == {
            "statusCode": 200,
            "body": {"status": "warm", "instancesWarmed": 1},
        }

    def test_dispatches_children_without_further_fanout(self):
        invoke_self = RecordingSelfInvoker()
        fanout = WarmupFanout(invoke_self=invoke_self, delay_seconds=0)

        payload = fanout.handle(WarmupEvent(concurrency=4))

        assert payload["body"]["instancesWarmed"] == 5
        assert len(invoke_self.events) == 4
        assert all(
            e == {"source": "warmup", "concurrency": 0} for e in invoke_self.events
        )

    def test_failure_counts_only_this_instance(self):
        invoke_self = RecordingSelfInvoker(fail_every=2)
        fanout = WarmupFanout(invoke_self=invoke_self, delay_seconds=0)

        payload = fanout.handle(WarmupEvent(concurrency=3))

        assert payload["statusCode"] == 200
        assert payload["body"]["instancesWarmed"] == 1
        assert len(invoke_self.events) == 3

    def test_dispatch_returns_first_error(self):
        fanout = WarmupFanout(
            invoke_self=RecordingSelfInvoker(fail_every=1), delay_seconds=0
        )
        assert isinstance(fanout.dispatch(3), TranslatorTransportError)

    def test_any_dispatch_error_is_recorded(self):
        def invoke_self(event):
            raise ValueError("bad")

        fanout = WarmupFanout(invoke_self=invoke_self, delay_seconds=0)

        assert isinstance(fanout.dispatch(2), ValueError)
        assert fanout.handle(WarmupEvent(concurrency=2))["body"]["instancesWarmed"] == 1


    def test_dispatch_without_self_invoker(self):
        fanout = WarmupFanout(invoke_self=None, delay_seconds=0)
        assert isinstance(fanout.dispatch(2), WarmupError)
        assert fanout.handle(WarmupEvent(concurrency=2))["body"]["instancesWarmed"] == 1

    def test_sleeps_the_configured_delay(self):
        fanout = WarmupFanout(delay_seconds=0.075)
        with mock.patch("translation_router_lib.core.warmup.time.sleep") as sleep:
            fanout.handle(WarmupEvent())
        sleep.assert_called_once_with(0.075)


class TestHttpSelfInvoker:
    def test_posts_event_to_warmup_endpoint(self):
        with mock.patch("translation_router_lib.utils.http.requests.Session") as session_cls:
            session = session_cls.return_value
            session.post.return_value = mock.Mock(status_code=200)

            invoker = HttpSelfInvoker(self_url="http://router.local/")
            invoker({"source": "warmup", "concurrency": 0})

        session.post.assert_called_once_with(
            "http://router.local/api/warmup",
            json={"source": "warmup", "concurrency": 0},
            timeout=10,
        )


class TestWarmupScheduler:
    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            WarmupScheduler(fanout=WarmupFanout(delay_seconds=0), interval_seconds=0)

    def test_tick_uses_configured_concurrency(self):
        invoke_self = RecordingSelfInvoker()
        scheduler = WarmupScheduler(
            fanout=WarmupFanout(invoke_self=invoke_self, delay_seconds=0),
            interval_seconds=60,
            concurrency=2,
        )

        assert scheduler.tick()["body"]["instancesWarmed"] == 3
        assert len(invoke_self.events) == 2

    def test_runs_until_stopped(self):
        ticked = threading.Event()
        fanout = mock.Mock(spec=WarmupFanout)
        fanout.handle.side_effect = lambda event: ticked.set()

        scheduler = WarmupScheduler(fanout=fanout, interval_seconds=0.01)
        scheduler.start()
        try:
            assert ticked.wait(timeout=2)
        finally:
            scheduler.stop()

        assert fanout.handle.call_args[0][0] == WarmupEvent(concurrency=0)
