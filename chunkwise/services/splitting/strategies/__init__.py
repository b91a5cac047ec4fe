"""Splitting strategy implementations."""

from chunkwise.config.splitting.models import SplitterConfig
from chunkwise.services.splitting.base import BaseDocumentSplitter
from chunkwise.services.splitting.strategies.recursive_character import RecursiveCharacterTextSplitter
from chunkwise.services.splitting.strategies.regex_delimiter import RegexDelimiterSplitter

STRATEGY_REGISTRY: dict[str, type[RecursiveCharacterTextSplitter] | type[RegexDelimiterSplitter]] = {
    "recursive_character": RecursiveCharacterTextSplitter,
    "regex_delimiter": RegexDelimiterSplitter,
}


def get_splitter(config: SplitterConfig) -> BaseDocumentSplitter | None:
    """Return a splitter built from config for its strategy name, or None if unknown."""
    cls = STRATEGY_REGISTRY.get(config.strategy)
    if cls is None:
        return None
    return cls.from_config(config)
