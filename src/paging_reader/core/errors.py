"""Error types."""

from __future__ import annotations


class PagingReaderError(Exception):
    """Base exception for this package."""


class ConfigurationError(PagingReaderError):
    """Missing or invalid reader configuration."""


class ExecutionError(PagingReaderError):
    """Query execution failed inside a query executor."""

    def __init__(
        self,
        message: str,
        *,
        query_id: str | None = None,
        page_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.query_id = query_id
        self.page_index = page_index


class ReaderStateError(PagingReaderError):
    """Operation is not allowed in the reader's current lifecycle state."""


class ReaderClosedError(ReaderStateError):
    """Raised when reader is used after close."""


class UnsupportedOperationError(PagingReaderError):
    """Raised when a capability the reader lacks is requested strictly."""


__all__ = [
    "PagingReaderError",
    "ConfigurationError",
    "ExecutionError",
    "ReaderStateError",
    "ReaderClosedError",
    "UnsupportedOperationError",
]
