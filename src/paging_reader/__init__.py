"""Public package exports for the paging query reader."""

from .async_reader import AsyncPagingReader
from .config import PagingReaderConfig
from .core.errors import (
    ConfigurationError,
    ExecutionError,
    PagingReaderError,
    ReaderClosedError,
    ReaderStateError,
    UnsupportedOperationError,
)
from .core.models import END_OF_DATA, EndOfData
from .core.restart import ReaderState
from .reader import PagingReader

__all__ = [
    "PagingReader",
    "AsyncPagingReader",
    "PagingReaderConfig",
    "ReaderState",
    "END_OF_DATA",
    "EndOfData",
    "PagingReaderError",
    "ConfigurationError",
    "ExecutionError",
    "ReaderStateError",
    "ReaderClosedError",
    "UnsupportedOperationError",
]
