"""Request/response schemas for POST /split."""

from pydantic import BaseModel, Field

from chunkwise.models.document import Document, Metadata


class SplitRequest(BaseModel):
    """POST /split request body. Documents are split with a named profile, optionally overridden."""

    documents: list[Document] = Field(..., min_length=1, max_length=1000, description="Documents to split")
    profile: str | None = Field(default=None, description="Splitter profile; defaults to settings.default_profile")
    chunk_size: int | None = Field(default=None, ge=1, le=100000, description="Optional override for chunk size")
    chunk_overlap: int | None = Field(default=None, ge=0, le=50000, description="Optional override for overlap")
    with_ids: bool = Field(default=True, description="Attach content-hash ids to chunks")


class ChunkOut(BaseModel):
    id: str | None = None
    text: str
    metadata: Metadata = Field(default_factory=dict)


class WarningOut(BaseModel):
    """An oversized chunk: its document, position in the output, length and limit."""

    document_index: int = Field(..., ge=0)
    chunk_index: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)


class SplitResponse(BaseModel):
    """POST /split response body."""

    strategy: str
    total_chunks: int = Field(..., ge=0)
    chunks: list[ChunkOut] = Field(default_factory=list)
    warnings: list[WarningOut] = Field(default_factory=list)
