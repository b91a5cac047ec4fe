"""
Recursive character splitting. Breaks text at the coarsest separator present
(paragraph, line, sentence, word, character), re-splits pieces that are still
too long with finer separators, and greedily packs short pieces into chunks
that overlap by up to chunk_overlap.
"""

from collections import deque
from typing import NamedTuple, Sequence

from chunkwise.config.logging import get_logger, log_extra
from chunkwise.config.splitting.models import DEFAULT_SEPARATORS, SplitterConfig
from chunkwise.models.document import OversizedChunk, SplitResult
from chunkwise.services.splitting.base import BaseDocumentSplitter
from chunkwise.services.splitting.errors import SplitterConfigError
from chunkwise.services.splitting.tokenizer import LengthFunction, get_length_function

logger = get_logger(__name__)


class _SplitTask(NamedTuple):
    text: str
    start: int  # first separator index to try
    at_text_start: bool = False


class _MergeTask(NamedTuple):
    pieces: list[str]
    separator: str
    at_text_start: bool = False  # pieces[0] begins the whole input


class _AtomicTask(NamedTuple):
    text: str


class RecursiveCharacterTextSplitter(BaseDocumentSplitter):
    """
    Split text into chunks of at most chunk_size, preferring natural boundaries.

    A piece that no configured separator can shrink below chunk_size is emitted
    whole and reported as an OversizedChunk instead of being cut mid-unit.
    """

    def __init__(
        self,
        separators: Sequence[str] | None = None,
        chunk_size: int = 500,
        chunk_overlap: int = 50,
        length_function: LengthFunction = len,
    ):
        if separators is None:
            separators = DEFAULT_SEPARATORS
        if not separators:
            raise SplitterConfigError("separators must not be empty")
        if chunk_size < 1:
            raise SplitterConfigError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise SplitterConfigError(
                f"chunk_overlap must be >= 0 and < chunk_size ({chunk_size}), got {chunk_overlap}"
            )
        self._separators = tuple(separators)
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._length = length_function

    @classmethod
    def from_config(cls, config: SplitterConfig) -> "RecursiveCharacterTextSplitter":
        return cls(
            separators=config.separators,
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap,
            length_function=get_length_function(config.length_unit, config.encoding_name),
        )

    @property
    def strategy_name(self) -> str:
        return "recursive_character"

    @property
    def separators(self) -> tuple[str, ...]:
        return self._separators

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._chunk_overlap

    def split_text_with_diagnostics(self, text: str | None) -> SplitResult:
        result = SplitResult()
        if not text or text.isspace():
            return result

        # Tasks are popped in the order their pieces appear in the text
        stack: list[_SplitTask | _MergeTask | _AtomicTask] = [_SplitTask(text, 0, at_text_start=True)]
        while stack:
            task = stack.pop()
            if isinstance(task, _MergeTask):
                self._merge_splits(task.pieces, task.separator, result, keep_leading_empty=task.at_text_start)
            elif isinstance(task, _AtomicTask):
                self._emit(result, task.text, self._length(task.text))
            else:
                stack.extend(reversed(self._plan(task)))
        return result

    def _select_separator(self, text: str, start: int) -> tuple[str, int]:
        """First separator from start that occurs in text (or is empty); else the last one."""
        for i in range(start, len(self._separators)):
            separator = self._separators[i]
            if separator == "" or separator in text:
                return separator, i
        return self._separators[-1], len(self._separators) - 1

    def _plan(self, task: _SplitTask) -> list[_SplitTask | _MergeTask | _AtomicTask]:
        separator, index = self._select_separator(task.text, task.start)
        pieces = list(task.text) if separator == "" else task.text.split(separator)

        planned: list[_SplitTask | _MergeTask | _AtomicTask] = []
        good_splits: list[str] = []
        good_start = 0
        for i, piece in enumerate(pieces):
            if self._length(piece) < self._chunk_size:
                if not good_splits:
                    good_start = i
                good_splits.append(piece)
                continue
            if good_splits:
                planned.append(_MergeTask(good_splits, separator, task.at_text_start and good_start == 0))
                good_splits = []
            if index + 1 < len(self._separators):
                planned.append(_SplitTask(piece, index + 1, task.at_text_start and i == 0))
            else:
                planned.append(_AtomicTask(piece))
        if good_splits:
            planned.append(_MergeTask(good_splits, separator, task.at_text_start and good_start == 0))
        return planned

    def _merge_splits(
        self, splits: list[str], separator: str, result: SplitResult, keep_leading_empty: bool = False
    ) -> None:
        """
        Greedily pack splits into chunks; the window's surviving tail becomes the overlap.

        Empty splits come from adjacent separators. Inside a window they keep the
        separator run intact. They never open a window (except at the very start
        of the input) and never close one.
        """
        separator_len = self._length(separator)
        window: deque[str] = deque()
        total = 0

        def pop_front() -> None:
            nonlocal total
            total -= self._length(window[0]) + (separator_len if len(window) > 1 else 0)
            window.popleft()

        for i, split in enumerate(splits):
            length = self._length(split)
            overflows = total + length + (separator_len if window else 0) > self._chunk_size
            if not split and (overflows or not (window or (keep_leading_empty and i == 0))):
                continue
            if overflows and window:
                if any(window):
                    self._emit(result, separator.join(window), total)
                while window and (
                    total > self._chunk_overlap
                    or total + length + separator_len > self._chunk_size
                ):
                    pop_front()
                while window and not window[0]:
                    pop_front()
            window.append(split)
            total += length + (separator_len if len(window) > 1 else 0)

        if any(window):
            self._emit(result, separator.join(window), total)

    def _emit(self, result: SplitResult, chunk: str, length: int) -> None:
        if not chunk:
            return
        if length > self._chunk_size:
            logger.warning(
                "Created a chunk longer than chunk_size",
                **log_extra({"length": length, "limit": self._chunk_size, "index": len(result.chunks)}),
            )
            result.warnings.append(OversizedChunk(index=len(result.chunks), length=length, limit=self._chunk_size))
        result.chunks.append(chunk)
