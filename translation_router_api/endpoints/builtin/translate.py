"""
Translation endpoints.

``POST /api/translate`` accepts ``{"texts": [...], "sourceLang": ..,
"targetLang": ..}`` and answers with either ``{"translations": [...],
"chunksProcessed": N}`` or ``{"error": "..."}``.  Warmup events posted to the
same URL are recognised first and answered by the warmup fan‑out, so a
scheduler may target a single address.
"""

from typing import Optional, Dict, Any

from translation_router_lib.core.warmup import WarmupFanout, is_warmup_event
from translation_router_lib.core.orchestrator import RequestOrchestrator
from translation_router_lib.data_models.constants import (
    WARMUP_REQ,
    WARMUP_OPT,
    WARMUP_SOURCE,
    WARMUP_SOURCE_PARAM,
)

from translation_router_api.core.decorators import EP
from translation_router_api.core.errors import error_as_dict
from translation_router_api.base.constants import REST_API_LOG_LEVEL
from translation_router_api.endpoints.endpoint_i import EndpointI


class Translate(EndpointI):
    REQUIRED_ARGS = []
    OPTIONAL_ARGS = []

    def __init__(
        self,
        orchestrator: RequestOrchestrator,
        warmup_fanout: WarmupFanout,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        ep_name: str = "translate",
    ):
        super().__init__(
            ep_name=ep_name,
            method="POST",
            logger_file_name=logger_file_name,
            logger_level=logger_level,
            direct_return=True,
        )
        self._orchestrator = orchestrator
        self._warmup_fanout = warmup_fanout

    def prepare_payload(self, params: Optional[Dict[str, Any]]):
        event = is_warmup_event(params)
        if event is not None:
            self.logger.debug(f"[translate] warmup event: {event}")
            return self._warmup_fanout.handle(event), 200

        response = self._orchestrator.handle_payload(params)
        if response.is_error:
            self.logger.warning(
                f"[translate] request failed ({response.status_code}): "
                f"{response.error}"
            )
        return response.as_payload(), response.status_code


class Warmup(EndpointI):
    """
    Explicit keep‑warm trigger.

    Accepts ``{"source": "warmup", "concurrency": N}``; ``concurrency`` sibling
    instances are asked to warm up through the configured self URL.
    """

    REQUIRED_ARGS = WARMUP_REQ
    OPTIONAL_ARGS = WARMUP_OPT

    def __init__(
        self,
        warmup_fanout: WarmupFanout,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        ep_name: str = "warmup",
    ):
        super().__init__(
            ep_name=ep_name,
            method="POST",
            logger_file_name=logger_file_name,
            logger_level=logger_level,
            direct_return=True,
        )
        self._warmup_fanout = warmup_fanout

    @EP.require_params
    def prepare_payload(self, params: Optional[Dict[str, Any]]):
        event = is_warmup_event(params)
        if event is None:
            return self.return_response_not_ok(
                error_as_dict(
                    error=f"{WARMUP_SOURCE_PARAM} must be '{WARMUP_SOURCE}'"
                ),
                status_code=400,
            )
        return self._warmup_fanout.handle(event), 200
