"""Tests for sequential hop execution."""

import pytest

from translation_router_lib.core.router import Router
from translation_router_lib.data_models.route import RouteStep
from translation_router_lib.exceptions import (
    HopExecutionError,
    TranslatorApplicationError,
    UnsupportedLanguagePairError,
)

from tests.conftest import FakeInvoker


class TestRouterExecute:
    def test_hops_run_in_order_on_previous_output(self, router, invoker):
        route = [
            RouteStep(service="translator-romance-en"),
            RouteStep(service="translator-en-romance", target_lang="fr"),
        ]
        result = router.execute(route, [["hola"], ["adiós"]])

        assert result == [
            ["hola>translator-romance-en>translator-en-romance@fr"],
            ["adiós>translator-romance-en>translator-en-romance@fr"],
        ]
        assert invoker.services_called == [
            "translator-romance-en",
            "translator-en-romance",
        ]
        assert invoker.calls[1]["batches"] == [
            ["hola>translator-romance-en"],
            ["adiós>translator-romance-en"],
        ]
        assert invoker.calls[0]["target_lang"] is None
        assert invoker.calls[1]["target_lang"] == "fr"

    def test_failing_second_hop(self):
        invoker = FakeInvoker(fail_on={"translator-en-romance"})
        router = Router(invoker=invoker)

        with pytest.raises(HopExecutionError) as exc_info:
            router.translate_batches("es", "fr", [["hola"]])

        exc = exc_info.value
        assert exc.step == 2
        assert exc.service == "translator-en-romance"
        assert str(exc).startswith("step 2 (translator-en-romance) failed:")
        assert exc.status_code == 502

    def test_failing_first_hop_stops_route(self):
        invoker = FakeInvoker(
            fail_on={"translator-romance-en"},
            error=TranslatorApplicationError("translator error: CUDA OOM"),
        )
        router = Router(invoker=invoker)

        with pytest.raises(HopExecutionError) as exc_info:
            router.translate_batches("es", "fr", [["hola"]])

        assert exc_info.value.step == 1
        assert "CUDA OOM" in str(exc_info.value)
        assert invoker.services_called == ["translator-romance-en"]

    def test_unexpected_invoker_error_is_wrapped(self):
        invoker = FakeInvoker(
            fail_on={"translator-romance-en"}, error=RuntimeError("boom")
        )
        router = Router(invoker=invoker)

        with pytest.raises(HopExecutionError) as exc_info:
            router.translate_batches("es", "en", [["hola"]])

        exc = exc_info.value
        assert exc.step == 1
        assert exc.service == "translator-romance-en"
        assert isinstance(exc.cause, RuntimeError)
        assert str(exc) == "step 1 (translator-romance-en) failed: boom"


class TestRouterTranslate:
    def test_empty_batches_make_no_calls(self, router, invoker):
        assert router.translate_batches("es", "fr", []) == []
        assert invoker.calls == []

    def test_empty_texts_make_no_calls(self, router, invoker):
        assert router.translate("es", "fr", []) == []
        assert invoker.calls == []

    def test_unsupported_pair(self, router, invoker):
        with pytest.raises(UnsupportedLanguagePairError):
            router.translate_batches("xx", "en", [["a"]])
        assert invoker.calls == []

    def test_single_batch(self, router):
        assert router.translate("de", "en", ["Hallo", "Welt"]) == [
            "Hallo>translator-de-en",
            "Welt>translator-de-en",
        ]
