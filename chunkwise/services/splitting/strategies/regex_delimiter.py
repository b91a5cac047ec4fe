"""Regex-delimiter splitting. One piece per delimiter match; no size bound, overlap or recursion."""

import re

from chunkwise.config.splitting.models import SplitterConfig
from chunkwise.models.document import SplitResult
from chunkwise.services.splitting.base import BaseDocumentSplitter
from chunkwise.services.splitting.errors import SplitterConfigError


class RegexDelimiterSplitter(BaseDocumentSplitter):
    """Split on every match of a regular expression. Zero-length pieces are dropped."""

    def __init__(self, delimiter: str):
        try:
            self._pattern = re.compile(delimiter)
        except re.error as e:
            raise SplitterConfigError(f"Invalid delimiter pattern {delimiter!r}: {e}", cause=e) from e

    @classmethod
    def from_config(cls, config: SplitterConfig) -> "RegexDelimiterSplitter":
        return cls(config.delimiter)

    @property
    def strategy_name(self) -> str:
        return "regex_delimiter"

    @property
    def delimiter(self) -> str:
        return self._pattern.pattern

    def split_text_with_diagnostics(self, text: str | None) -> SplitResult:
        if not text or text.isspace():
            return SplitResult()
        # Cut at match boundaries; re.split would also return capturing-group text
        pieces: list[str] = []
        start = 0
        for match in self._pattern.finditer(text):
            pieces.append(text[start : match.start()])
            start = match.end()
        pieces.append(text[start:])
        return SplitResult(chunks=[p for p in pieces if p])
