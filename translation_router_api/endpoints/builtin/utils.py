"""
Informational endpoints: router version and supported languages.
"""

import os

from typing import Optional, Dict, Any

from translation_router_lib.core.languages import LanguageGraph

from translation_router_api.core.decorators import EP
from translation_router_api.base.constants import REST_API_LOG_LEVEL
from translation_router_api.endpoints.endpoint_i import EndpointI


class ApiVersion(EndpointI):
    VERSION_FILE = ".version"

    REQUIRED_ARGS = []
    OPTIONAL_ARGS = []

    def __init__(
        self,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        ep_name: str = "version",
    ):
        """
        Create an endpoint that returns the router version.

        The version is read once from :attr:`VERSION_FILE`; ``0.0.1`` is
        reported when the file does not exist.
        """
        super().__init__(
            method="GET",
            ep_name=ep_name,
            logger_file_name=logger_file_name,
            logger_level=logger_level,
            direct_return=True,
        )

        self.version = "0.0.1"
        if os.path.exists(self.VERSION_FILE):
            with open(self.VERSION_FILE) as f:
                self.version = f.read().strip()

        self.logger.info(f"  -> Running translation-router version: {self.version}")

    @EP.response_time
    def prepare_payload(
        self, params: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        return {"version": self.version}


class SupportedLanguages(EndpointI):
    """
    List every language code the router can translate from or to.

    Response body: ``{"languages": ["ca", "de", "en", ...]}`` (sorted).
    """

    REQUIRED_ARGS = []
    OPTIONAL_ARGS = []

    def __init__(
        self,
        language_graph: LanguageGraph,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        ep_name: str = "languages",
    ):
        super().__init__(
            method="GET",
            ep_name=ep_name,
            logger_file_name=logger_file_name,
            logger_level=logger_level,
        )
        self._language_graph = language_graph

    def prepare_payload(
        self, params: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        return {"languages": self._language_graph.supported_languages()}
