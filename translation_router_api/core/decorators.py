"""
translation_router_api.core.decorators
======================================

Utility decorators used by the REST‑endpoint classes.

Two cross‑cutting concerns are expressed as decorators that wrap the
endpoint's ``prepare_payload`` method:

* **Parameter validation** – an endpoint declares its mandatory arguments in
  ``EndpointI.REQUIRED_ARGS``; missing arguments produce a consistent error
  payload before any business logic runs.

* **Execution‑time measurement** – a ``response_time`` field (seconds) is added
  to mapping responses.

The actual validation lives in ``EndpointI._check_required_params``; the
decorator only translates the raised :class:`ValueError` into the error format.
"""

import time
from typing import Callable, Any, Dict, Optional

from translation_router_api.core.errors import error_as_dict, ERROR_NO_REQUIRED_PARAMS


class EP:
    """
    Namespace container for endpoint‑related decorators.

    >>> from translation_router_api.core.decorators import EP
    >>> @EP.require_params
    ... def prepare_payload(self, params): ...
    """

    @staticmethod
    def require_params(
        func: Callable[[Any, Optional[Dict[str, Any]]], Any],
    ) -> Callable:
        """
        Validate required endpoint arguments before executing the wrapped method.

        Parameters
        ----------
        func : Callable[[Any, Optional[Dict[str, Any]]], Any]
            The endpoint method to be wrapped (normally ``prepare_payload``).

        Returns
        -------
        Callable
            A wrapper returning ``return_response_not_ok(...)`` (status 400)
            when any argument listed in ``REQUIRED_ARGS`` is missing.
        """

        def wrapper(self, params: Optional[Dict[str, Any]] = None):
            try:
                self._check_required_params(params or {})
            except ValueError as exc:
                return self.return_response_not_ok(
                    error_as_dict(
                        error=ERROR_NO_REQUIRED_PARAMS,
                        error_msg=str(exc),
                    ),
                    status_code=400,
                )
            return func(self, params)

        return wrapper

    @staticmethod
    def response_time(
        func: Callable[[Any, Optional[Dict[str, Any]]], Any],
    ) -> Callable:
        """
        Measure how long the wrapped endpoint method takes to execute.

        When the wrapped method returns a ``dict`` a ``response_time`` key
        (seconds, float) is added to a copy of it; other results are returned
        unchanged.
        """

        def wrapper(self, params: Optional[Dict[str, Any]] = None):
            start = time.time()
            result = func(self, params)
            end = time.time()
            if isinstance(result, dict):
                result = result.copy()
                result["response_time"] = end - start
            return result

        return wrapper
