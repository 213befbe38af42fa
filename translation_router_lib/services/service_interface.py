import abc
from typing import Any, Dict, Iterable, Optional, Type

from translation_router_lib.utils.http import HttpRequester
from translation_router_lib.exceptions import TranslationRouterError


class BaseServiceInterface(abc.ABC):
    """
    Abstract base class for router‑API service wrappers.

    Sub‑classes set ``endpoint`` (the relative URL), ``method`` and, for
    ``POST`` services, ``model_cls`` (the Pydantic model describing the
    payload).  ``allow_statuses`` lists error codes whose JSON body is a
    regular answer of the endpoint (e.g. ``{"error": ...}``) and must be
    returned instead of raised.
    """

    # Relative URL of the endpoint to call
    endpoint: str = ""

    # HTTP verb used by ``call``
    method: str = "POST"

    # Pydantic model class used to validate the request payload.
    model_cls: Optional[Type[Any]] = None

    allow_statuses: Iterable[int] = ()

    def __init__(self, http: HttpRequester, logger):
        """
        Initialise the service wrapper.

        Parameters
        ----------
        http : HttpRequester
            Helper object that knows how to perform HTTP requests.
        logger : logging.Logger
            Logger instance used for debugging and error reporting.
        """
        self.http = http
        self.logger = logger

    def call(self, raw_payload: Optional[Any] = None) -> Dict[str, Any]:
        """
        Send the request to the configured endpoint and return the JSON body.

        When ``model_cls`` is set, ``raw_payload`` (a mapping or an instance of
        ``model_cls``) is validated through it and sent as ``model_dump()``.

        Raises
        ------
        pydantic.ValidationError
            If the payload does not match ``model_cls``.
        TranslationRouterError
            If the response body cannot be decoded as JSON.
        """
        if self.model_cls is not None and raw_payload is not None:
            if not isinstance(raw_payload, self.model_cls):
                raw_payload = self.model_cls(**raw_payload)
            raw_payload = raw_payload.model_dump()

        if self.method == "GET":
            resp = self.http.get(self.endpoint, allow_statuses=self.allow_statuses)
        else:
            resp = self.http.post(
                self.endpoint, json=raw_payload, allow_statuses=self.allow_statuses
            )
        try:
            j = resp.json()
        except Exception as exc:
            raise TranslationRouterError(f"Invalid response format: {exc}")
        return j
