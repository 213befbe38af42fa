"""Tests for batch chunking."""

import pytest

from translation_router_lib.core.chunker import Chunker, chunk_by_tokens, chunk_by_count
from translation_router_lib.core.tokens import slot_cost


def _flatten(chunks):
    return [text for chunk in chunks for text in chunk]


class TestChunkByTokens:
    def test_empty_input(self):
        assert chunk_by_tokens([]) == []
        assert chunk_by_tokens(None) == []

    def test_small_texts_share_one_chunk(self):
        texts = ["uno", "dos", "tres"]
        assert chunk_by_tokens(texts) == [texts]

    def test_preserves_order_and_count(self):
        texts = [f"texto número {i} " * (i % 7 + 1) for i in range(200)]
        chunks = chunk_by_tokens(texts, max_tokens=50)

        assert _flatten(chunks) == texts
        assert all(chunk for chunk in chunks)

    def test_chunks_respect_budget(self):
        texts = ["x" * 40] * 10  # 10 tokens each
        chunks = chunk_by_tokens(texts, max_tokens=25)

        assert [len(c) for c in chunks] == [2, 2, 2, 2, 2]
        for chunk in chunks:
            assert sum(slot_cost(t) for t in chunk) <= 25

    def test_budget_is_inclusive(self):
        texts = ["x" * 40] * 3  # exactly 30 tokens
        assert chunk_by_tokens(texts, max_tokens=30) == [texts]

    def test_oversized_text_is_a_singleton(self):
        big = "y" * 400  # 100 tokens
        texts = ["a", "b", big, "c"]
        chunks = chunk_by_tokens(texts, max_tokens=10)

        assert chunks == [["a", "b"], [big], ["c"]]

    def test_oversized_text_first(self):
        big = "y" * 400
        assert chunk_by_tokens([big, "a"], max_tokens=10) == [[big], ["a"]]

    def test_empty_strings_occupy_slots(self):
        chunks = chunk_by_tokens([""] * 5, max_tokens=2)
        assert chunks == [["", ""], ["", ""], [""]]

    @pytest.mark.parametrize("budget", [0, -1])
    def test_non_positive_budget_uses_default(self, budget):
        texts = ["x" * 4000] * 6  # 1000 tokens each
        assert chunk_by_tokens(texts, max_tokens=budget) == chunk_by_tokens(
            texts, max_tokens=3000
        )


class TestChunkByCount:
    def test_empty_input(self):
        assert chunk_by_count([]) == []

    def test_batches_of_fifty(self):
        texts = [str(i) for i in range(120)]
        chunks = chunk_by_count(texts, max_items=50)

        assert [len(c) for c in chunks] == [50, 50, 20]
        assert _flatten(chunks) == texts

    def test_non_positive_size_uses_default(self):
        texts = [str(i) for i in range(60)]
        assert [len(c) for c in chunk_by_count(texts, max_items=0)] == [50, 10]


class TestChunker:
    def test_default_strategy_is_tokens(self):
        chunker = Chunker()
        assert chunker.strategy == "tokens"
        assert chunker.chunk(["a"] * 150) == [["a"] * 150]

    def test_count_strategy(self):
        chunker = Chunker(strategy="count", max_items=50)
        assert len(chunker.chunk(["a"] * 150)) == 3

    def test_strategy_name_is_normalised(self):
        assert Chunker(strategy=" COUNT ").strategy == "count"

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            Chunker(strategy="sentences")

    def test_empty_input(self):
        assert Chunker().chunk([]) == []
