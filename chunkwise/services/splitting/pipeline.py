"""
Splitting pipeline: resolve config → build splitter → split documents into chunks.
Deterministic for the same documents and config.
"""

from typing import Any, Iterable

from pydantic import BaseModel, Field

from chunkwise.config.logging import get_logger
from chunkwise.config.settings import get_settings
from chunkwise.config.splitting.models import SplitterConfig
from chunkwise.config.splitting.static import resolve_splitter_config
from chunkwise.models.document import Chunk, Document, OversizedChunk
from chunkwise.services.splitting.base import BaseDocumentSplitter, build_chunks
from chunkwise.services.splitting.errors import DocumentTooLargeError, SplitterConfigError
from chunkwise.services.splitting.strategies import get_splitter
from chunkwise.utils.ids import IdGenerator

logger = get_logger(__name__)


class DocumentWarning(BaseModel):
    """An oversized chunk, located by the index of its source document."""

    document_index: int = Field(..., ge=0)
    warning: OversizedChunk


class SplitOutcome(BaseModel):
    """Chunks of all documents in order plus the oversized-chunk diagnostics."""

    chunks: list[Chunk] = Field(default_factory=list)
    warnings: list[DocumentWarning] = Field(default_factory=list)


def build_splitter(config: SplitterConfig) -> BaseDocumentSplitter:
    """Return the splitter for config.strategy. Raises SplitterConfigError if unknown."""
    splitter = get_splitter(config)
    if splitter is None:
        raise SplitterConfigError(f"Unknown splitting strategy: {config.strategy!r}")
    return splitter


def split_documents(
    documents: Iterable[Document | None] | None,
    profile_name: str = "active",
    inline_config: dict[str, Any] | None = None,
    id_generator: IdGenerator | None = None,
) -> SplitOutcome:
    """
    Split documents with the resolved profile (or inline config). None documents and
    documents without text are skipped. Raises SplitterConfigError for a bad config and
    DocumentTooLargeError when a document exceeds max_document_length.
    """
    config = resolve_splitter_config(profile_name, inline_config)
    splitter = build_splitter(config)
    limit = get_settings().max_document_length
    outcome = SplitOutcome()
    if not documents:
        return outcome

    for doc_index, document in enumerate(documents):
        if document is None or not document.has_text():
            continue
        if limit is not None and len(document.text) > limit:
            raise DocumentTooLargeError(len(document.text), limit)
        result = splitter.split_text_with_diagnostics(document.text)
        outcome.chunks.extend(build_chunks(result.chunks, document, id_generator))
        outcome.warnings.extend(DocumentWarning(document_index=doc_index, warning=w) for w in result.warnings)

    logger.info(
        "Split documents",
        extra={
            "strategy": config.strategy,
            "chunk_count": len(outcome.chunks),
            "oversized_count": len(outcome.warnings),
        },
    )
    return outcome
