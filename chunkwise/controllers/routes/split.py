"""POST /split: split documents into overlapping chunks with a named profile."""

from fastapi import APIRouter, HTTPException

from chunkwise.config.logging import get_logger
from chunkwise.config.settings import get_settings
from chunkwise.config.splitting.static import resolve_splitter_config
from chunkwise.controllers.schema.split import ChunkOut, SplitRequest, SplitResponse, WarningOut
from chunkwise.services.splitting.errors import DocumentTooLargeError, SplitterConfigError
from chunkwise.services.splitting.pipeline import split_documents
from chunkwise.utils.ids import ContentHashIdGenerator

logger = get_logger(__name__)

router = APIRouter(prefix="/split", tags=["splitting"])


@router.post("", response_model=SplitResponse)
def split(body: SplitRequest) -> SplitResponse:
    """
    Split the given documents. Strategy and options come from the requested profile
    (or the default one); only chunk_size/chunk_overlap can be overridden.
    """
    profile = body.profile or get_settings().default_profile
    try:
        base = resolve_splitter_config(profile)
        overrides = {}
        if body.chunk_size is not None:
            overrides["chunk_size"] = body.chunk_size
        if body.chunk_overlap is not None:
            overrides["chunk_overlap"] = body.chunk_overlap
        inline_config = {**base.model_dump(), **overrides} if overrides else None
        outcome = split_documents(
            body.documents,
            profile_name=profile,
            inline_config=inline_config,
            id_generator=ContentHashIdGenerator() if body.with_ids else None,
        )
    except (SplitterConfigError, DocumentTooLargeError) as e:
        logger.info("Rejected split request", extra={"profile": profile, "error": str(e)})
        raise HTTPException(status_code=422, detail=str(e)) from e

    return SplitResponse(
        strategy=base.strategy,
        total_chunks=len(outcome.chunks),
        chunks=[ChunkOut(id=c.id, text=c.text, metadata=c.metadata) for c in outcome.chunks],
        warnings=[
            WarningOut(
                document_index=w.document_index,
                chunk_index=w.warning.index,
                length=w.warning.length,
                limit=w.warning.limit,
            )
            for w in outcome.warnings
        ],
    )
