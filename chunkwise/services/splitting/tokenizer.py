"""Length functions for splitting. Characters by default; tiktoken tokens on request."""

from functools import lru_cache
from typing import Callable

import tiktoken

from chunkwise.config.logging import get_logger

logger = get_logger(__name__)

LengthFunction = Callable[[str], int]


@lru_cache(maxsize=8)
def _get_encoding(encoding_name: str) -> tiktoken.Encoding:
    """Load a tiktoken encoding once per name. cl100k_base is the OpenAI default."""
    logger.debug("Loading tiktoken encoding", extra={"encoding_name": encoding_name})
    return tiktoken.get_encoding(encoding_name)


def count_tokens(text: str, encoding_name: str = "cl100k_base") -> int:
    """Return the token count of text under the given encoding."""
    if not text:
        return 0
    return len(_get_encoding(encoding_name).encode(text))


def get_length_function(length_unit: str, encoding_name: str = "cl100k_base") -> LengthFunction:
    """Return the length function for a config's length_unit (characters|tokens)."""
    if length_unit == "characters":
        return len
    if length_unit == "tokens":
        return lambda text: count_tokens(text, encoding_name)
    raise ValueError(f"Unknown length unit: {length_unit!r}")
