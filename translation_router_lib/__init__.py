from translation_router_lib.client import TranslationRouterClient
from translation_router_lib.exceptions import (
    TranslationRouterError,
    RequestValidationError,
    UnsupportedLanguagePairError,
    HopExecutionError,
    TranslatorTransportError,
    TranslatorApplicationError,
)

__all__ = [
    "TranslationRouterClient",
    "TranslationRouterError",
    "RequestValidationError",
    "UnsupportedLanguagePairError",
    "HopExecutionError",
    "TranslatorTransportError",
    "TranslatorApplicationError",
]
