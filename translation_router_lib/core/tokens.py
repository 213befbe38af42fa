"""Approximate token counting used to size translation batches."""

import math

from translation_router_lib.core.constants import DEFAULT_CHARS_PER_TOKEN


def estimate_tokens(text: str, chars_per_token: int = DEFAULT_CHARS_PER_TOKEN) -> int:
    """
    Estimate the processing cost of *text* in tokens.

    The heuristic is ``ceil(len(text) / chars_per_token)`` with a floor of one
    token for any non‑empty text; the empty string costs ``0``.

    >>> estimate_tokens("")
    0
    >>> estimate_tokens("Hi")
    1
    >>> estimate_tokens("iPhone 12 Pro en buen estado")
    7
    """
    if not text:
        return 0
    if chars_per_token <= 0:
        chars_per_token = DEFAULT_CHARS_PER_TOKEN
    return max(1, math.ceil(len(text) / chars_per_token))


def slot_cost(text: str, chars_per_token: int = DEFAULT_CHARS_PER_TOKEN) -> int:
    """Cost of *text* inside a batch: an empty string still occupies one slot."""
    return max(1, estimate_tokens(text, chars_per_token=chars_per_token))
