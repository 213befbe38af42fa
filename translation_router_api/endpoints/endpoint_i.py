"""
Endpoint abstraction layer for the translation‑router REST service.

This module defines the abstract base class that represents a *single* HTTP
endpoint.  Concrete implementations (``translation_router_api.endpoints``
sub‑modules) are discovered automatically by
:class:`~translation_router_api.register.auto_loader.EndpointAutoLoader`.

The class exposes a small public API:

* ``name`` – the URL path of the endpoint.
* ``method`` – the HTTP verb (GET or POST) the endpoint expects.
* ``run_ep`` – the entry point called by the Flask registrar.
* ``prepare_payload`` – conversion of raw request parameters into the
  response body.
"""

import abc
import time

from typing import Optional, Dict, Any, Tuple, Union

from translation_router_lib.utils.logger import prepare_logger

from translation_router_api.base.constants import REST_API_LOG_LEVEL

EndpointResult = Union[Dict[str, Any], Tuple[Dict[str, Any], int], None]


class EndpointI(abc.ABC):
    """
    Abstract representation of a single REST endpoint.

    Attributes
    ----------
    _ep_name: str
        Relative URL path of the endpoint (e.g. ``"translate"``).
    _ep_method: str
        HTTP method this endpoint expects – ``"GET"`` or ``"POST"``.
    logger: logging.Logger
        Logger configured with the supplied log file and level.
    direct_return: bool
        When ``True`` the value of :meth:`prepare_payload` is sent as it is,
        otherwise it is wrapped with :meth:`return_response_ok`.
    """

    METHODS = ["GET", "POST"]
    """Supported HTTP methods for any endpoint."""

    REQUIRED_ARGS = []
    """Names of parameters that **must** be supplied by the client."""

    OPTIONAL_ARGS = []
    """Names of parameters that are accepted but not required."""

    def __init__(
        self,
        ep_name: str,
        method: str = "POST",
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        logger_file_name: Optional[str] = None,
        dont_add_api_prefix: bool = False,
        direct_return: bool = False,
    ):
        """
        Initialise an endpoint definition.

        Parameters
        ----------
        ep_name :
            URL fragment that identifies this endpoint (e.g. ``"translate"``).
        method :
            HTTP verb the endpoint will respond to; defaults to ``"POST"``.
            Must be one of :attr:`METHODS`.
        logger_level :
            Logging level name (``"INFO"``, ``"DEBUG"``, …).
        logger_file_name :
            Path to a file where log records will be written. When ``None``
            records go to the console only.
        dont_add_api_prefix :
            If ``True`` the endpoint URL will be registered without the
            global ``DEFAULT_API_PREFIX`` prefix.
        direct_return:
            If ``True`` the payload is returned without the
            ``{"status": ..., "body": ...}`` envelope.

        Raises
        ------
        ValueError
            If ``method`` is not listed in :attr:`METHODS`.
        """
        self._check_method_is_allowed(method=method)

        self._ep_name = ep_name
        self._ep_method = method
        self.logger = prepare_logger(
            logger_name=__name__,
            logger_file_name=logger_file_name,
            log_level=logger_level,
            use_default_config=True,
        )

        self.direct_return = direct_return
        self._dont_add_api_prefix = dont_add_api_prefix

        # marker when ep stared
        self._start_time = None

    # ------------------------------------------------------------------
    # Public read‑only properties
    # ------------------------------------------------------------------
    @property
    def name(self):
        """
        Return the raw endpoint name as supplied to the constructor.

        The value is used by the Flask registrar to build the final route.
        """
        return self._ep_name

    @property
    def method(self):
        """
        Return the HTTP verb this endpoint expects (``"GET"`` or ``"POST"``).
        """
        return self._ep_method

    @property
    def add_api_prefix(self):
        """
        Indicate whether the global API prefix (``DEFAULT_API_PREFIX``) should
        be prepended to the endpoint's URL when it is registered.
        """
        return not self._dont_add_api_prefix

    # ------------------------------------------------------------------
    # Core workflow
    # ------------------------------------------------------------------
    def run_ep(self, params: Optional[Dict[str, Any]]) -> EndpointResult:
        """
        Execute the endpoint for a given request payload.

        Parameters
        ----------
        params :
            Dictionary of request parameters extracted by the Flask
            registrar.

        Returns
        -------
        dict | Tuple[dict, int] | None
            The body that will be JSON‑encoded, optionally paired with an
            HTTP status code.
        """
        self._start_time = time.time()

        result = self.prepare_payload(params)
        if self.direct_return or isinstance(result, tuple):
            return result

        return self.return_response_ok(result)

    @abc.abstractmethod
    def prepare_payload(self, params: Optional[Dict[str, Any]]) -> EndpointResult:
        """
        Convert raw request parameters into the endpoint's response body.

        Parameters
        ----------
        params :
            Dictionary of parameters extracted from the HTTP request.

        Returns
        -------
        dict | Tuple[dict, int] | None
            Response body, or a ``(body, status)`` pair for error responses.
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Helper utilities for standardised JSON responses
    # ------------------------------------------------------------------
    @staticmethod
    def return_response_ok(body: Any) -> Dict[str, Any]:
        """
        Build a successful response payload: ``{"status": True, "body": <data>}``.
        """
        return {"status": True, "body": body}

    @staticmethod
    def return_response_not_ok(
        body: Optional[Any], status_code: Optional[int] = None
    ) -> Tuple[Dict[str, Any], int]:
        """
        Build an error response payload with an appropriate HTTP status code.

        Parameters
        ----------
        body : Optional[Any]
            The error information; an exception, a string, a dictionary or
            ``None``.
        status_code : int, optional
            Explicit HTTP status. When omitted it is taken from the
            ``status_code`` attribute of *body* (library exceptions carry
            one) and falls back to ``500``.

        Returns
        -------
        Tuple[dict, int]
            ``({"status": False, "body": ...}, status_code)``; Flask interprets
            this as ``(Response, Status)``.
        """
        if status_code is None:
            status_code = 500
            if hasattr(body, "status_code") and isinstance(body.status_code, int):
                status_code = body.status_code

        if body is None or not str(body):
            error_body = {"status": False}
        elif isinstance(body, dict):
            error_body = {"status": False, "body": body}
        else:
            error_body = {"status": False, "body": str(body)}

        return error_body, status_code

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------
    def _check_required_params(self, params: Optional[Dict[str, Any]]) -> None:
        """
        Verify that all keys listed in :attr:`REQUIRED_ARGS` are present.

        Raises
        ------
        ValueError
            If any required key is missing from *params*.
        """
        if (
            params is None
            or self.REQUIRED_ARGS is None
            or not len(self.REQUIRED_ARGS)
        ):
            return

        missing = [arg for arg in self.REQUIRED_ARGS if arg not in params]
        if missing:
            raise ValueError(
                f"Missing required argument(s) {missing} "
                f"for endpoint {self._ep_name}"
            )

    def _check_method_is_allowed(self, method: str) -> None:
        """
        Ensure that *method* is one of the supported HTTP verbs.

        Raises
        ------
        ValueError
            If *method* is not present in :attr:`METHODS`.
        """
        if method not in self.METHODS:
            _m_str = ", ".join(self.METHODS)
            raise ValueError(
                f"Unknown method {method}. Method must be one of {_m_str}"
            )
