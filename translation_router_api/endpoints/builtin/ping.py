from typing import Optional, Dict, Any

from translation_router_api.core.decorators import EP
from translation_router_api.base.constants import REST_API_LOG_LEVEL
from translation_router_api.endpoints.endpoint_i import EndpointI


class Ping(EndpointI):
    """
    Health‑check endpoint that returns a simple *pong* response.

    This endpoint is registered under the name ``ping`` and only supports
    the HTTP ``GET`` method.  It does not require any request parameters
    and is typically used by load balancers to verify that the service
    is up and responding.
    """

    REQUIRED_ARGS = []
    OPTIONAL_ARGS = []

    def __init__(
        self,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        ep_name: str = "ping",
    ):
        super().__init__(
            method="GET",
            ep_name=ep_name,
            logger_file_name=logger_file_name,
            logger_level=logger_level,
            direct_return=True,
        )

    @EP.response_time
    def prepare_payload(
        self, params: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        """
        Returns
        -------
        dict
            ``{"status": True, "body": "pong"}``.
        """
        return self.return_response_ok("pong")
