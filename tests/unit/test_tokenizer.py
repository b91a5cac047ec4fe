import pytest

from chunkwise.config.splitting.models import SplitterConfig
from chunkwise.services.splitting import tokenizer
from chunkwise.services.splitting.strategies.recursive_character import RecursiveCharacterTextSplitter


class _WordEncoding:
    """Stand-in for a tiktoken encoding: one token per whitespace-separated word."""

    def encode(self, text: str) -> list[str]:
        return text.split()


@pytest.fixture
def word_encoding(monkeypatch):
    requested: list[str] = []

    def fake_get_encoding(name: str):
        requested.append(name)
        return _WordEncoding()

    monkeypatch.setattr(tokenizer, "_get_encoding", fake_get_encoding)
    return requested


def test_characters_length_function_is_len():
    assert tokenizer.get_length_function("characters") is len


def test_unknown_length_unit():
    with pytest.raises(ValueError):
        tokenizer.get_length_function("bytes")


def test_count_tokens(word_encoding):
    assert tokenizer.count_tokens("") == 0
    assert tokenizer.count_tokens("three little words", "p50k_base") == 3
    assert word_encoding == ["p50k_base"]


def test_token_length_splitting(word_encoding):
    config = SplitterConfig(separators=[" "], chunk_size=3, chunk_overlap=0, length_unit="tokens")
    splitter = RecursiveCharacterTextSplitter.from_config(config)

    assert splitter.split_text("one two three four five") == ["one two three", "four five"]
    assert set(word_encoding) == {"cl100k_base"}
