"""Base document splitter and contract shared by all splitting strategies."""

from abc import ABC, abstractmethod
from typing import Iterable

from chunkwise.models.document import Chunk, Document, SplitResult
from chunkwise.utils.ids import IdGenerator


def build_chunks(texts: list[str], document: Document, id_generator: IdGenerator | None = None) -> list[Chunk]:
    """Wrap chunk texts as Chunks carrying a copy of the document metadata and optional ids."""
    chunks: list[Chunk] = []
    for text in texts:
        chunk = Chunk(text=text, metadata=dict(document.metadata))
        if id_generator is not None:
            # id is derived from the finished chunk, so set it last
            chunk = chunk.model_copy(update={"id": id_generator.generate_id(chunk)})
        chunks.append(chunk)
    return chunks


class BaseDocumentSplitter(ABC):
    """
    Abstract splitter. Subclasses implement split_text_with_diagnostics; building
    chunks from documents (metadata copy, optional ids) is shared here.
    Instances are immutable after construction and safe to share across threads.
    """

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'recursive_character'."""
        ...

    @abstractmethod
    def split_text_with_diagnostics(self, text: str | None) -> SplitResult:
        """Split text into ordered chunk texts plus any oversized-chunk warnings."""
        ...

    def split_text(self, text: str | None) -> list[str]:
        """Split text into ordered chunk texts. Empty or missing text gives []."""
        return self.split_text_with_diagnostics(text).chunks

    def split(self, document: Document | None, id_generator: IdGenerator | None = None) -> list[Chunk]:
        """
        Split one document. Every chunk gets a copy of the document metadata and,
        when id_generator is given, an id computed from the chunk itself.
        """
        if document is None or not document.has_text():
            return []
        return build_chunks(self.split_text(document.text), document, id_generator)

    def split_all(
        self, documents: Iterable[Document | None] | None, id_generator: IdGenerator | None = None
    ) -> list[Chunk]:
        """Split each document in order and flatten the results. None documents are skipped."""
        if not documents:
            return []
        return [chunk for document in documents for chunk in self.split(document, id_generator)]
