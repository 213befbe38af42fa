"""
Thin wrapper around ``requests`` that adds logging and unified error handling.

The :class:`HttpRequester` class is used throughout the library to communicate
with downstream services (translator services, the router itself when it
fans out warmup events, and the router API from the client).  It centralises:

* construction of absolute URLs from a base URL,
* automatic inclusion of a bearer token,
* conversion of connection failures and HTTP error codes into the
  library‑specific exception hierarchy (:class:`AuthenticationError`,
  :class:`TranslatorTransportError`).

Requests are never retried: a failed call is reported to the caller at once.
"""

import logging
from typing import Any, Dict, Iterable, Optional

import requests

from translation_router_lib.exceptions import (
    AuthenticationError,
    TranslatorTransportError,
)


class HttpRequester:
    """
    Helper for making HTTP calls with error translation.

    Parameters
    ----------
    base_url : str
        Base URL of the remote service (e.g. ``"http://translator-de-en:8000"``).
        A trailing slash is stripped automatically.
    token : str, optional
        Bearer token used for ``Authorization`` header; if empty, no header is added.
    timeout : int, default ``10``
        Per‑request timeout in seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: int = 10,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

        self.logger = logger or logging.getLogger(__name__)

    def _full_url(self, path: str) -> str:
        """
        Build the absolute URL for a request.

        Parameters
        ----------
        path : str
            URL path to be appended to ``self.base_url``.  The method ensures
            exactly one ``/`` separates the base and the path.

        Returns
        -------
        str
            Fully qualified URL.
        """
        if not path:
            return self.base_url
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    @staticmethod
    def _handle_response(
        resp: requests.Response, allow_statuses: Iterable[int] = ()
    ) -> requests.Response:
        """
        Translate HTTP error codes into library‑specific exceptions.

        * :class:`AuthenticationError` for ``401``/``403``.
        * :class:`TranslatorTransportError` for any other 4xx/5xx status.

        If the response is successful, or its status is listed in
        *allow_statuses* (error codes whose JSON body the caller handles
        itself), it is returned unchanged.
        """
        if resp.status_code in allow_statuses:
            return resp
        if resp.status_code in (401, 403):
            raise AuthenticationError("Invalid or missing token")
        if 400 <= resp.status_code < 600:
            raise TranslatorTransportError(f"HTTP {resp.status_code}: {resp.text}")
        return resp

    def get(
        self, path: str, allow_statuses: Iterable[int] = (), **kwargs
    ) -> requests.Response:
        """
        Perform a ``GET`` request.

        Parameters
        ----------
        path : str
            Relative URL path (e.g. ``"/api/ping"``) that will be combined with
            the base URL.
        **kwargs
            Additional arguments forwarded to ``requests.Session.get``.

        Returns
        -------
        requests.Response
            The validated response object.

        Raises
        ------
        TranslatorTransportError
            When the connection fails or the server answers with an error code.
        """
        url = self._full_url(path)
        self.logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise TranslatorTransportError(f"GET {url} failed: {exc}") from exc
        return self._handle_response(resp, allow_statuses=allow_statuses)

    def post(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        allow_statuses: Iterable[int] = (),
        **kwargs,
    ) -> requests.Response:
        """
        Perform a ``POST`` request with a JSON body.

        Parameters
        ----------
        path : str
            Relative URL path to post to.
        json : Optional[Dict[str, Any]]
            JSON‑serialisable payload sent as the request body.
        **kwargs
            Additional arguments forwarded to ``requests.Session.post``.

        Returns
        -------
        requests.Response
            The validated response object.

        Raises
        ------
        TranslatorTransportError
            When the connection fails or the server answers with an error code.
        """
        url = self._full_url(path)
        self.logger.debug("POST %s | payload=%s", url, json)
        try:
            resp = self.session.post(url, json=json, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise TranslatorTransportError(f"POST {url} failed: {exc}") from exc
        return self._handle_response(resp, allow_statuses=allow_statuses)
