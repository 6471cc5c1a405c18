"""Core building blocks for paging readers."""

from .errors import (
    ConfigurationError,
    ExecutionError,
    PagingReaderError,
    ReaderClosedError,
    ReaderStateError,
    UnsupportedOperationError,
)
from .executor import AsyncQueryExecutor, QueryExecutor
from .models import END_OF_DATA, EndOfData
from .params import PAGE_KEY, PAGE_SIZE_KEY, RESERVED_KEYS, SKIP_ROWS_KEY, PageRequest
from .restart import ReaderState

__all__ = [
    "PagingReaderError",
    "ConfigurationError",
    "ExecutionError",
    "ReaderStateError",
    "ReaderClosedError",
    "UnsupportedOperationError",
    "QueryExecutor",
    "AsyncQueryExecutor",
    "EndOfData",
    "END_OF_DATA",
    "PAGE_KEY",
    "PAGE_SIZE_KEY",
    "SKIP_ROWS_KEY",
    "RESERVED_KEYS",
    "PageRequest",
    "ReaderState",
]
