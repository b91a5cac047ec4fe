"""Errors raised by the splitting services. Empty input and oversized chunks are not errors."""


class SplitterConfigError(ValueError):
    """Raised when a splitter configuration, profile, or strategy name is invalid."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class DocumentTooLargeError(ValueError):
    """Raised when a document exceeds the configured max_document_length."""

    def __init__(self, length: int, limit: int):
        super().__init__(f"Document of length {length} exceeds the limit of {limit} characters")
        self.length = length
        self.limit = limit
