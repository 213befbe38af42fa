import logging
from typing import Optional, Dict, Any, Union, List

from translation_router_lib.utils.http import HttpRequester
from translation_router_lib.exceptions import NoArgsAndNoPayloadError
from translation_router_lib.data_models.translation import TranslationRequest
from translation_router_lib.services.translation import (
    TranslateService,
    SupportedLanguagesService,
    PingService,
    VersionService,
)


class TranslationRouterClient:

    def __init__(
        self,
        api: str,
        token: Optional[str] = None,
        timeout: int = 10,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = api.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.http = HttpRequester(
            base_url=self.base_url,
            token=self.token,
            timeout=self.timeout,
            logger=self.logger,
        )

    # ------------------------------------------------------------------ #
    def translate(
        self,
        payload: Optional[Union[Dict[str, Any], TranslationRequest]] = None,
        texts: Optional[List[str]] = None,
        source_lang: Optional[str] = None,
        target_lang: Optional[str] = None,
    ) -> Dict[str, Any]:
        if payload is None:
            if texts is None or not source_lang or not target_lang:
                raise NoArgsAndNoPayloadError(
                    "No payload and no arguments were passed!"
                )
            payload = TranslationRequest(
                texts=texts, sourceLang=source_lang, targetLang=target_lang
            )

        return TranslateService(self.http, self.logger).call(payload)

    # ------------------------------------------------------------------ #
    def supported_languages(self) -> List[str]:
        response = SupportedLanguagesService(self.http, self.logger).call()
        return response.get("body", {}).get("languages", [])

    # ------------------------------------------------------------------ #
    def ping(self) -> Dict[str, Any]:
        return PingService(self.http, self.logger).call()

    # ------------------------------------------------------------------ #
    def version(self) -> Dict[str, Any]:
        return VersionService(self.http, self.logger).call()
