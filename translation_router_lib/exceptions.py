"""
Custom exception hierarchy for the translation router.

All public exceptions inherit from :class:`TranslationRouterError`, allowing
callers to catch a single base class for any router‑related failure while still
being able to differentiate specific error conditions when needed.

Each class carries a ``status_code`` that the REST layer uses when the error is
reported back to a client.
"""

from typing import Optional


class TranslationRouterError(Exception):
    """Base exception for all translation‑router errors."""

    status_code = 500


class RequestValidationError(TranslationRouterError):
    """Raised when an inbound translation request is missing or has invalid fields."""

    status_code = 400


class UnsupportedLanguagePairError(TranslationRouterError):
    """Raised when no route of at most two hops connects the language pair."""

    status_code = 400

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"unsupported language pair: {source}-{target}")


class TranslatorTransportError(TranslationRouterError):
    """Raised when a translator service cannot be reached or returns an HTTP error."""

    status_code = 502


class TranslatorApplicationError(TranslationRouterError):
    """Raised when a translator service answers with an application‑level error."""

    status_code = 502


class HopExecutionError(TranslationRouterError):
    """
    Raised by the router when one hop of a route fails.

    Attributes
    ----------
    step : int
        1‑based position of the failing hop in the route.
    service : str
        Identifier of the translator service called by the hop.
    cause : Exception | None
        The transport or application error reported by the invoker.
    """

    status_code = 502

    def __init__(self, step: int, service: str, cause: Optional[Exception] = None):
        self.step = step
        self.service = service
        self.cause = cause
        super().__init__(f"step {step} ({service}) failed: {cause}")


class WarmupError(TranslationRouterError):
    """Raised (and recorded, never propagated to clients) when a warmup dispatch fails."""

    pass


class AuthenticationError(TranslationRouterError):
    """Raised when the server returns HTTP 401/403 – invalid or missing token."""

    status_code = 401


class NoArgsAndNoPayloadError(TranslationRouterError):
    """Raised when a client method receives neither a payload nor required arguments."""

    status_code = 400
