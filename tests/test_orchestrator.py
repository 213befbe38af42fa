"""End-to-end tests of request orchestration over a recording invoker."""

import pytest

from translation_router_lib.core.chunker import Chunker
from translation_router_lib.core.router import Router
from translation_router_lib.core.orchestrator import RequestOrchestrator, validate_request
from translation_router_lib.data_models.translation import TranslationRequest
from translation_router_lib.exceptions import RequestValidationError

from tests.conftest import FakeInvoker


class TestValidateRequest:
    @pytest.mark.parametrize(
        "payload,message",
        [
            ({"texts": ["a"], "targetLang": "en"}, "sourceLang is required"),
            ({"texts": ["a"], "sourceLang": "es"}, "targetLang is required"),
            (
                {"texts": ["a"], "sourceLang": "es", "targetLang": "es"},
                "sourceLang and targetLang must be different",
            ),
            ({"sourceLang": "es", "targetLang": "en"}, "texts is required"),
        ],
    )
    def test_messages(self, payload, message):
        with pytest.raises(RequestValidationError, match=message):
            validate_request(TranslationRequest(**payload))


class TestRequestOrchestrator:
    def test_spanish_to_french_single_text(self, orchestrator, invoker):
        response = orchestrator.handle(
            TranslationRequest(texts=["Hola"], sourceLang="es", targetLang="fr")
        )

        assert response.as_payload() == {
            "translations": ["Hola>translator-romance-en>translator-en-romance@fr"],
            "chunksProcessed": 1,
        }
        assert invoker.services_called == [
            "translator-romance-en",
            "translator-en-romance",
        ]

    def test_empty_texts_make_no_remote_calls(self, orchestrator, invoker):
        response = orchestrator.handle(
            TranslationRequest(texts=[], sourceLang="es", targetLang="en")
        )

        assert response.as_payload() == {"translations": [], "chunksProcessed": 0}
        assert invoker.calls == []

    def test_hundred_fifty_items_in_three_ordered_chunks(self):
        invoker = FakeInvoker()
        orchestrator = RequestOrchestrator(
            router=Router(invoker=invoker),
            chunker=Chunker(strategy="count", max_items=50),
        )
        texts = [f"Producto {i}" for i in range(150)]

        response = orchestrator.handle(
            TranslationRequest(texts=texts, sourceLang="es", targetLang="en")
        )

        assert response.chunksProcessed == 3
        assert response.translations == [
            f"{t}>translator-romance-en" for t in texts
        ]
        assert [len(b) for b in invoker.calls[0]["batches"]] == [50, 50, 50]

    def test_hundred_fifty_items_within_token_budget(self):
        invoker = FakeInvoker()
        orchestrator = RequestOrchestrator(
            router=Router(invoker=invoker), chunker=Chunker(max_tokens=3000)
        )
        # 240 characters is 60 tokens; 50 of them fill the budget exactly
        texts = [f"{i:03d}" + "a" * 237 for i in range(150)]

        response = orchestrator.handle(
            TranslationRequest(texts=texts, sourceLang="es", targetLang="en")
        )

        assert response.chunksProcessed == 3
        assert [len(b) for b in invoker.calls[0]["batches"]] == [50, 50, 50]
        assert response.translations == [
            f"{t}>translator-romance-en" for t in texts
        ]

    def test_same_language_is_rejected_without_calls(self, orchestrator, invoker):
        response = orchestrator.handle(
            TranslationRequest(texts=["Hola"], sourceLang="es", targetLang="es")
        )

        assert response.as_payload() == {
            "error": "sourceLang and targetLang must be different"
        }
        assert response.status_code == 400
        assert invoker.calls == []

    def test_token_budget_splits_large_requests(self, invoker):
        orchestrator = RequestOrchestrator(
            router=Router(invoker=invoker), chunker=Chunker(max_tokens=10)
        )
        texts = ["x" * 40, "y" * 40, "z" * 40]  # 10 tokens each

        response = orchestrator.handle(
            TranslationRequest(texts=texts, sourceLang="en", targetLang="de")
        )

        assert response.chunksProcessed == 3
        assert len(response.translations) == 3

    def test_unsupported_pair(self, orchestrator, invoker):
        response = orchestrator.handle(
            TranslationRequest(texts=["a"], sourceLang="xx", targetLang="en")
        )

        assert response.as_payload() == {"error": "unsupported language pair: xx-en"}
        assert response.status_code == 400
        assert invoker.calls == []

    def test_hop_failure(self):
        invoker = FakeInvoker(fail_on={"translator-en-de"})
        orchestrator = RequestOrchestrator(router=Router(invoker=invoker))

        response = orchestrator.handle(
            TranslationRequest(texts=["Ciao"], sourceLang="it", targetLang="de")
        )

        assert response.is_error
        assert response.status_code == 502
        assert response.error.startswith(
            "translation failed: step 2 (translator-en-de) failed:"
        )
        assert "translations" not in response.as_payload()


class TestHandlePayload:
    def test_valid_mapping(self, orchestrator):
        response = orchestrator.handle_payload(
            {"texts": ["Hallo"], "sourceLang": "de", "targetLang": "en"}
        )
        assert response.translations == ["Hallo>translator-de-en"]

    def test_malformed_types(self, orchestrator, invoker):
        response = orchestrator.handle_payload(
            {"texts": "Hola", "sourceLang": "es", "targetLang": "en"}
        )

        assert response.error.startswith("invalid request: texts")
        assert response.status_code == 400
        assert invoker.calls == []

    def test_none_payload(self, orchestrator):
        response = orchestrator.handle_payload(None)
        assert response.as_payload() == {"error": "sourceLang is required"}

    @pytest.mark.parametrize(
        "payload,message",
        [
            (
                {"texts": ["a"], "sourceLang": None, "targetLang": "en"},
                "sourceLang is required",
            ),
            (
                {"texts": ["a"], "sourceLang": "es", "targetLang": None},
                "targetLang is required",
            ),
        ],
    )
    def test_null_languages_read_as_missing(self, orchestrator, payload, message):
        response = orchestrator.handle_payload(payload)
        assert response.as_payload() == {"error": message}

    def test_null_text_item_is_empty_string(self, orchestrator, invoker):
        response = orchestrator.handle_payload(
            {"texts": ["Hallo", None], "sourceLang": "de", "targetLang": "en"}
        )

        assert response.translations == ["Hallo>translator-de-en", ">translator-de-en"]
        assert invoker.calls[0]["batches"] == [["Hallo", ""]]
