"""
Pydantic models for warmup (keep‑warm) events.

A warmup event is posted by a scheduler to keep router instances ready.  When
``concurrency`` is positive the receiving instance asks that many sibling
instances to become ready as well; children always receive ``concurrency=0``.
"""

from typing import Any, Dict

from pydantic import BaseModel

from translation_router_lib.data_models.constants import WARMUP_SOURCE


class WarmupEvent(BaseModel):
    source: str = WARMUP_SOURCE
    concurrency: int = 0


class WarmupResponse(BaseModel):
    status: str = "warm"
    instancesWarmed: int = 1

    def as_payload(self) -> Dict[str, Any]:
        return {"statusCode": 200, "body": self.model_dump()}
