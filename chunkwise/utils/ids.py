"""Id generation for chunks. Deterministic: a pure function of chunk text and metadata."""

import hashlib
import json
from typing import Protocol

from chunkwise.models.document import Chunk


class IdGenerator(Protocol):
    """Maps an already-built chunk (final text plus metadata) to a stable identifier."""

    def generate_id(self, chunk: Chunk) -> str: ...


def generate_chunk_id(text: str, metadata: dict, prefix: str = "chunk") -> str:
    """Generate a deterministic chunk id from text and canonical metadata JSON."""
    metadata_canonical = json.dumps(metadata, sort_keys=True, ensure_ascii=False)
    payload = f"{text}|{metadata_canonical}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"{prefix}_{digest}"


class ContentHashIdGenerator:
    """IdGenerator hashing the chunk's own content; the source document's id never enters it."""

    def __init__(self, prefix: str = "chunk"):
        self.prefix = prefix

    def generate_id(self, chunk: Chunk) -> str:
        return generate_chunk_id(chunk.text, chunk.metadata, self.prefix)
