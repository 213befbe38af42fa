"""
Pydantic models for the translation request/response and the downstream
batch protocol.

Field names of :class:`TranslationRequest` and :class:`TranslationResponse`
follow the public JSON payload (``sourceLang``, ``chunksProcessed``), while the
downstream models follow the translator services' snake‑case protocol
(``target_lang``).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class TranslationRequest(BaseModel):
    """
    Inbound translation request.

    Attributes
    ----------
    texts : List[str] | None
        Ordered text items.  ``None`` (field absent or null) is a validation
        error, while an empty list is a valid request with nothing to do.  A null
        item is read as an empty string.
    sourceLang : str
        Source language code, e.g. ``"es"`` or ``"es_MX"``.  Null is read as
        ``""``, which fails validation as a missing language.
    targetLang : str
        Target language code.
    """

    texts: Optional[List[str]] = None
    sourceLang: str = ""
    targetLang: str = ""

    @field_validator("texts", mode="before")
    @classmethod
    def _null_items_are_empty(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value

    @field_validator("sourceLang", "targetLang", mode="before")
    @classmethod
    def _null_lang_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class TranslationResponse(BaseModel):
    """
    Outcome of one translation request.

    Exactly one shape is populated: ``translations`` + ``chunksProcessed`` on
    success, ``error`` on failure.  ``status_code`` is never serialised; the
    REST layer uses it as the HTTP status.
    """

    translations: Optional[List[str]] = None
    chunksProcessed: Optional[int] = None
    error: Optional[str] = None
    status_code: int = Field(default=200, exclude=True)

    @classmethod
    def success(
        cls, translations: List[str], chunks_processed: int
    ) -> "TranslationResponse":
        return cls(translations=translations, chunksProcessed=chunks_processed)

    @classmethod
    def failure(cls, error: str, status_code: int = 400) -> "TranslationResponse":
        return cls(error=error, status_code=status_code)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def as_payload(self) -> Dict[str, Any]:
        """Return the JSON payload with only the populated shape."""
        if self.is_error:
            return {"error": self.error}
        return {
            "translations": list(self.translations or []),
            "chunksProcessed": self.chunksProcessed or 0,
        }


class TranslatorBatchRequest(BaseModel):
    """
    Payload sent to a translator service for one hop.

    ``target_lang`` is only present when the hop lands on a multi‑language
    family (e.g. ``en`` → any romance language).
    """

    chunks: List[List[str]]
    target_lang: Optional[str] = None

    def as_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class TranslatorBatchResponse(BaseModel):
    """Payload returned by a translator service for one hop."""

    translations: List[List[str]] = Field(default_factory=list)
    error: Optional[str] = None
