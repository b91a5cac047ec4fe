"""Document and chunk models shared by the splitters, the pipeline and the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

MetadataValue = str | int | float
Metadata = dict[str, MetadataValue]


def check_metadata(metadata: dict[str, Any] | None) -> dict[str, Any]:
    """Reject metadata values that are not str, int or float."""
    if metadata is None:
        return {}
    for key, value in metadata.items():
        # bool is an int subclass but is not a supported metadata type
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValueError(
                f"The metadata key {key!r} has the value {value!r}, which is of the unsupported type "
                f"{type(value).__name__!r}. Supported types are: str, int, float"
            )
    return metadata


class Document(BaseModel):
    """A text payload with pass-through metadata."""

    text: str = ""
    metadata: Metadata = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _supported_metadata(cls, v: dict[str, Any] | None) -> dict[str, Any]:
        return check_metadata(v)

    def has_text(self) -> bool:
        """False for empty or whitespace-only text."""
        return bool(self.text) and not self.text.isspace()


class Chunk(BaseModel):
    """One piece of a split document. Owns its text and a copy of the source metadata."""

    model_config = ConfigDict(frozen=True)

    text: str
    metadata: Metadata = Field(default_factory=dict)
    id: str | None = None

    @field_validator("metadata", mode="before")
    @classmethod
    def _supported_metadata(cls, v: dict[str, Any] | None) -> dict[str, Any]:
        return check_metadata(v)


class OversizedChunk(BaseModel):
    """Diagnostic for a chunk longer than the configured chunk_size."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position of the chunk in the split output")
    length: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)


class SplitResult(BaseModel):
    """Chunks of a single text together with the oversized-chunk diagnostics."""

    chunks: list[str] = Field(default_factory=list)
    warnings: list[OversizedChunk] = Field(default_factory=list)
