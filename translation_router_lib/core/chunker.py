"""
Batch chunking of ordered texts.

Two policies are available:

* :func:`chunk_by_tokens` – keeps the estimated token cost of every batch
  within a budget (the default policy);
* :func:`chunk_by_count` – bounds the number of items per batch.

Both keep every text whole, never reorder texts and never return an empty
batch.  :class:`Chunker` selects one of them from configuration.
"""

import logging

from typing import List, Optional, Sequence

from translation_router_lib.core.tokens import slot_cost
from translation_router_lib.core.constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MAX_ITEMS,
    DEFAULT_CHARS_PER_TOKEN,
    ChunkingStrategies,
    POSSIBLE_CHUNKING_STRATEGIES,
)


def chunk_by_tokens(
    texts: Optional[Sequence[str]],
    max_tokens: int = DEFAULT_MAX_TOKENS,
    chars_per_token: int = DEFAULT_CHARS_PER_TOKEN,
) -> List[List[str]]:
    """
    Split *texts* into batches whose estimated cost does not exceed *max_tokens*.

    A text whose own cost already exceeds the budget is emitted alone, after
    flushing whatever batch was being accumulated.

    Parameters
    ----------
    texts : Sequence[str] | None
        Ordered texts; ``None`` and empty input produce ``[]``.
    max_tokens : int
        Token budget per batch; values ``<= 0`` fall back to
        :data:`DEFAULT_MAX_TOKENS`.
    chars_per_token : int
        Constant used by the token estimator.

    Returns
    -------
    List[List[str]]
        Ordered batches; their concatenation equals *texts*.
    """
    if not texts:
        return []

    if max_tokens <= 0:
        max_tokens = DEFAULT_MAX_TOKENS

    chunks: List[List[str]] = []
    current_chunk: List[str] = []
    current_tokens = 0

    for text in texts:
        text_tokens = slot_cost(text, chars_per_token=chars_per_token)

        if text_tokens > max_tokens:
            if current_chunk:
                chunks.append(current_chunk)
                current_chunk = []
                current_tokens = 0
            chunks.append([text])
            continue

        if current_chunk and current_tokens + text_tokens > max_tokens:
            chunks.append(current_chunk)
            current_chunk = []
            current_tokens = 0

        current_chunk.append(text)
        current_tokens += text_tokens

    if current_chunk:
        chunks.append(current_chunk)

    return chunks


def chunk_by_count(
    texts: Optional[Sequence[str]], max_items: int = DEFAULT_MAX_ITEMS
) -> List[List[str]]:
    """
    Split *texts* into batches of at most *max_items* items.

    Values of *max_items* ``<= 0`` fall back to :data:`DEFAULT_MAX_ITEMS`.
    """
    if not texts:
        return []

    if max_items <= 0:
        max_items = DEFAULT_MAX_ITEMS

    texts = list(texts)
    return [texts[i : i + max_items] for i in range(0, len(texts), max_items)]


class Chunker:
    """
    Configured chunking policy.

    Parameters
    ----------
    strategy : str
        One of :data:`POSSIBLE_CHUNKING_STRATEGIES` (``"tokens"`` or ``"count"``).
    max_tokens : int
        Budget for the ``"tokens"`` strategy.
    max_items : int
        Batch size for the ``"count"`` strategy.
    chars_per_token : int
        Token estimator constant.
    """

    def __init__(
        self,
        strategy: str = ChunkingStrategies.TOKENS,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        max_items: int = DEFAULT_MAX_ITEMS,
        chars_per_token: int = DEFAULT_CHARS_PER_TOKEN,
        logger: Optional[logging.Logger] = None,
    ):
        strategy = (strategy or ChunkingStrategies.TOKENS).lower().strip()
        if strategy not in POSSIBLE_CHUNKING_STRATEGIES:
            raise ValueError(
                f"Unknown chunking strategy {strategy}. "
                f"Strategy must be one of {', '.join(POSSIBLE_CHUNKING_STRATEGIES)}"
            )

        self.strategy = strategy
        self.max_tokens = max_tokens
        self.max_items = max_items
        self.chars_per_token = chars_per_token
        self.logger = logger or logging.getLogger(__name__)

    def chunk(self, texts: Optional[Sequence[str]]) -> List[List[str]]:
        if self.strategy == ChunkingStrategies.COUNT:
            chunks = chunk_by_count(texts, max_items=self.max_items)
        else:
            chunks = chunk_by_tokens(
                texts,
                max_tokens=self.max_tokens,
                chars_per_token=self.chars_per_token,
            )

        self.logger.debug(
            f"[chunker] strategy={self.strategy} "
            f"texts={len(texts or [])} chunks={len(chunks)}"
        )
        return chunks
