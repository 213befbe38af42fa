"""
Wiring of :class:`translation_router_api.endpoints.endpoint_i.EndpointI`
objects into the Flask application.

Each endpoint becomes one URL rule under the API prefix (unless the endpoint
opts out of it).  Endpoints answer either with a body or with a
``(body, status)`` pair; failures that escape an endpoint are mapped to an
``{"error": ...}`` body.
"""

from __future__ import annotations

import logging

from flask import Flask, request, jsonify
from typing import Callable, Iterable, Any, Dict, Set, Tuple, Optional

from translation_router_lib.utils.logger import prepare_logger
from translation_router_lib.exceptions import TranslationRouterError

from translation_router_api.core.errors import error_as_dict
from translation_router_api.endpoints.endpoint_i import EndpointI
from translation_router_api.base.constants import DEFAULT_API_PREFIX


class FlaskEndpointRegistrar:
    """
    Register ``EndpointI`` instances as routes of a Flask app.

    Parameters
    ----------
    app : Flask
        Application receiving the routes.
    url_prefix : str, optional
        Prefix of every rule, ``"/api"`` by default; a trailing slash is
        dropped and a missing leading one is added.
    logger : logging.Logger, optional
        Logger for registration and unhandled endpoint errors.
    """

    def __init__(
        self,
        app: Flask,
        url_prefix: str = DEFAULT_API_PREFIX,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if app is None:
            raise ValueError("Flask `app` must be provided")

        self._app = app
        self._prefix = self._normalize_prefix(url_prefix)
        self._logger = logger or prepare_logger(__name__, use_default_config=True)
        self._rules: Set[Tuple[str, str]] = set()

    @property
    def rules(self) -> Set[Tuple[str, str]]:
        """Registered ``(rule, method)`` pairs."""
        return set(self._rules)

    def register_endpoints(self, endpoints: Iterable[EndpointI]) -> None:
        for ep in endpoints:
            self.register_endpoint(ep)

    def register_endpoint(self, endpoint: EndpointI) -> str:
        """
        Add *endpoint* as a Flask view and return its URL rule.

        Raises
        ------
        RuntimeError
            When the same rule and method are already registered.
        """
        method = endpoint.method.upper()
        rule = self.rule_for(endpoint)

        if (rule, method) in self._rules:
            raise RuntimeError(f"Duplicate route: {method} {rule}")
        self._rules.add((rule, method))

        self._app.add_url_rule(
            rule,
            endpoint=f"{endpoint.__class__.__name__}:{method}:{rule}",
            view_func=self._make_view(endpoint),
            methods=[method],
        )
        self._logger.info(
            f"Registered endpoint {method} {rule} ({endpoint.__class__.__name__})"
        )
        return rule

    def rule_for(self, endpoint: EndpointI) -> str:
        name = endpoint.name if endpoint.name.startswith("/") else f"/{endpoint.name}"
        if not endpoint.add_api_prefix:
            return name
        return f"{self._prefix}{name}"

    def _make_view(self, endpoint: EndpointI) -> Callable[[], Any]:
        def handler():
            try:
                params = self._extract_params(endpoint.method)
                result = endpoint.run_ep(params)
            except TranslationRouterError as exc:
                return jsonify(error_as_dict(str(exc))), exc.status_code
            except ValueError as exc:
                return jsonify(error_as_dict(str(exc))), 400
            except Exception as exc:
                self._logger.exception(
                    f"Unhandled exception in endpoint {endpoint.__class__.__name__}"
                )
                return jsonify(error_as_dict("internal error", str(exc))), 500

            if isinstance(result, tuple):
                body, status = result
                return jsonify(body or {}), status
            return jsonify(result or {}), 200

        return handler

    @staticmethod
    def _normalize_prefix(url_prefix: Optional[str]) -> str:
        if not url_prefix:
            return ""
        if not url_prefix.startswith("/"):
            url_prefix = "/" + url_prefix
        return url_prefix.rstrip("/")

    @staticmethod
    def _extract_params(method: str) -> Dict[str, Any]:
        """
        Query string for ``GET``; a JSON object (or form data) otherwise.

        Raises
        ------
        ValueError
            When the JSON body is not an object.
        """
        if method.upper() == "GET":
            return dict(request.args)
        if not request.is_json:
            return dict(request.form)

        payload = request.get_json(silent=True)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ValueError("JSON body must be an object")
        return payload

    def __enter__(self) -> "FlaskEndpointRegistrar":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        return False
