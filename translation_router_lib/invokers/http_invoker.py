"""
HTTP implementation of the remote invocation capability.

Each translator service is reachable at ``<api_host><endpoint>`` and speaks the
batch protocol::

    request  {"chunks": [[...], ...], "target_lang": "es"}   # target_lang optional
    response {"translations": [[...], ...], "error": "..."}   # error optional
"""

import logging

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from translation_router_lib.utils.http import HttpRequester
from translation_router_lib.invokers.invoker_interface import TranslatorInvokerI
from translation_router_lib.data_models.translation import (
    TranslatorBatchRequest,
    TranslatorBatchResponse,
)
from translation_router_lib.exceptions import (
    TranslatorTransportError,
    TranslatorApplicationError,
)


@dataclass(frozen=True)
class TranslatorService:
    """
    Immutable description of one translator service.

    Attributes
    ----------
    name : str
        Service identifier used by routes.
    api_host : str
        Base URL of the service.
    endpoint : str
        Path of the batch translation endpoint.
    api_token : str
        Bearer token (may be empty).
    timeout : int
        Request timeout in seconds.
    """

    name: str
    api_host: str
    endpoint: str = "/translate"
    api_token: str = ""
    timeout: int = 300

    @staticmethod
    def from_config(
        name: str, cfg: Dict[str, Any], default_timeout: int = 300
    ) -> "TranslatorService":
        if "api_host" not in cfg:
            raise KeyError(f"Translator service {name} has no api_host!")
        return TranslatorService(
            name=name,
            api_host=str(cfg["api_host"]),
            endpoint=str(cfg.get("endpoint", "/translate")),
            api_token=str(cfg.get("api_token", "")),
            timeout=int(cfg.get("timeout", default_timeout)),
        )


class HttpTranslatorInvoker(TranslatorInvokerI):
    """
    Call translator services over HTTP.

    Parameters
    ----------
    services : Mapping[str, TranslatorService]
        Service identifier -> service description.
    logger : logging.Logger, optional
        Logger for hop diagnostics.
    """

    def __init__(
        self,
        services: Mapping[str, TranslatorService],
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self._services = dict(services)
        self._requesters: Dict[str, HttpRequester] = {
            name: HttpRequester(
                base_url=service.api_host,
                token=service.api_token,
                timeout=service.timeout,
                logger=self.logger,
            )
            for name, service in self._services.items()
        }

    @property
    def services(self) -> List[str]:
        return sorted(self._services.keys())

    def invoke(
        self,
        service: str,
        batches: List[List[str]],
        target_lang: Optional[str] = None,
    ) -> List[List[str]]:
        requester = self._requesters.get(service)
        if requester is None:
            raise TranslatorTransportError(f"translator {service} is not configured")

        payload = TranslatorBatchRequest(
            chunks=batches, target_lang=target_lang
        ).as_payload()

        self.logger.info(
            f"[invoke] {service} chunks={len(batches)} target_lang={target_lang}"
        )
        resp = requester.post(self._services[service].endpoint, json=payload)

        try:
            body = TranslatorBatchResponse(**resp.json())
        except (ValueError, TypeError, ValidationError) as exc:
            raise TranslatorApplicationError(
                f"failed to parse response from {service}: {exc}"
            ) from exc

        if body.error:
            raise TranslatorApplicationError(f"translator error: {body.error}")

        if len(body.translations) != len(batches):
            raise TranslatorApplicationError(
                f"{service} returned {len(body.translations)} chunks "
                f"for {len(batches)} sent"
            )

        return body.translations
