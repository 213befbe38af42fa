"""
Request orchestration: validate, chunk, route, execute and flatten.

:class:`RequestOrchestrator` is the single entry point used by the REST layer.
It never raises for request‑level problems; every
:class:`~translation_router_lib.exceptions.TranslationRouterError` becomes an
error :class:`TranslationResponse`.
"""

import logging

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from translation_router_lib.core.router import Router
from translation_router_lib.core.chunker import Chunker
from translation_router_lib.core.route_resolver import RouteResolver
from translation_router_lib.data_models.translation import (
    TranslationRequest,
    TranslationResponse,
)
from translation_router_lib.exceptions import (
    HopExecutionError,
    RequestValidationError,
    TranslationRouterError,
)


def validate_request(request: TranslationRequest) -> None:
    """
    Check the request before any routing work.

    Raises
    ------
    RequestValidationError
        With the first problem found.
    """
    if not request.sourceLang:
        raise RequestValidationError("sourceLang is required")
    if not request.targetLang:
        raise RequestValidationError("targetLang is required")
    if request.sourceLang == request.targetLang:
        raise RequestValidationError("sourceLang and targetLang must be different")
    if request.texts is None:
        raise RequestValidationError("texts is required")


class RequestOrchestrator:
    """
    Run one translation request through the whole pipeline.

    Parameters
    ----------
    router : Router
        Executes the resolved hops.
    chunker : Chunker, optional
        Batch policy; token budget with defaults when omitted.
    resolver : RouteResolver, optional
        Route resolver; the router's resolver when omitted.
    logger : logging.Logger, optional
        Logger for request diagnostics.
    """

    def __init__(
        self,
        router: Router,
        chunker: Optional[Chunker] = None,
        resolver: Optional[RouteResolver] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.router = router
        self.logger = logger or logging.getLogger(__name__)
        self.chunker = chunker or Chunker(logger=self.logger)
        self.resolver = resolver or router.resolver

    def handle_payload(self, payload: Optional[Dict[str, Any]]) -> TranslationResponse:
        """Parse a JSON‑shaped mapping and handle it."""
        try:
            request = TranslationRequest(**(payload or {}))
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}"
                for e in exc.errors()
            )
            return TranslationResponse.failure(f"invalid request: {errors}")
        return self.handle(request)

    def handle(self, request: TranslationRequest) -> TranslationResponse:
        try:
            translations, chunks_processed = self.translate(request)
        except HopExecutionError as exc:
            return TranslationResponse.failure(
                f"translation failed: {exc}", status_code=exc.status_code
            )
        except TranslationRouterError as exc:
            return TranslationResponse.failure(str(exc), status_code=exc.status_code)

        return TranslationResponse.success(
            translations=translations, chunks_processed=chunks_processed
        )

    def translate(self, request: TranslationRequest) -> tuple[List[str], int]:
        """
        Translate the request and return ``(translations, chunks_processed)``.

        Raises
        ------
        RequestValidationError, UnsupportedLanguagePairError, HopExecutionError
        """
        validate_request(request)

        if not request.texts:
            return [], 0

        route = self.resolver.require_route(request.sourceLang, request.targetLang)
        chunks = self.chunker.chunk(request.texts)

        self.logger.info(
            f"[orchestrator] {request.sourceLang}->{request.targetLang} "
            f"texts={len(request.texts)} chunks={len(chunks)} "
            f"route={[s.service for s in route]}"
        )

        results = self.router.execute(route, chunks)

        translations: List[str] = []
        for chunk_result in results:
            translations.extend(chunk_result)

        return translations, len(chunks)
