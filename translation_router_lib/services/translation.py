"""
Service wrappers for the translation router REST API.

Each class binds one endpoint of ``translation_router_api`` to the shared
:class:`BaseServiceInterface` request logic.
"""

from translation_router_lib.data_models.translation import TranslationRequest
from translation_router_lib.services.service_interface import BaseServiceInterface


class TranslateService(BaseServiceInterface):
    """
    Service for the ``/api/translate`` endpoint.

    Validation and routing errors (``400``) and hop failures (``502``) come
    back as ``{"error": "..."}`` and are returned to the caller as is.
    """

    endpoint = "/api/translate"
    model_cls = TranslationRequest
    allow_statuses = (400, 502)


class SupportedLanguagesService(BaseServiceInterface):
    """Service for the ``/api/languages`` endpoint."""

    endpoint = "/api/languages"
    method = "GET"


class PingService(BaseServiceInterface):
    """Service wrapper for the health‑check ``/api/ping`` endpoint."""

    endpoint = "/api/ping"
    method = "GET"


class VersionService(BaseServiceInterface):
    """Service wrapper for the ``/api/version`` endpoint."""

    endpoint = "/api/version"
    method = "GET"
