"""Synchronous paging reader."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import TracebackType
from typing import Any

from .core.executor import QueryExecutor
from .core.models import END_OF_DATA
from .core.restart import ReaderState
from .core.state import PagingState
from .reader_shared import PagingReaderBase

logger = logging.getLogger("paging_reader")


class PagingReader(PagingReaderBase):
    """Reads a query result one item at a time, re-querying per page.

    Each refill calls ``executor.execute(query_id, params)`` where ``params``
    is ``parameter_values`` overlaid with ``_page``, ``_pagesize`` and
    ``_skiprows``. Reading ends at the first empty page.

    Not safe for concurrent ``read()`` callers.
    """

    _executor: QueryExecutor | None

    def read(self) -> Any:
        """Return the next item, or ``END_OF_DATA`` once the result is drained."""

        paging = self._ensure_open()
        if paging.limit_reached():
            return END_OF_DATA
        if paging.needs_refill():
            self._read_page(paging)
        if not paging.buffer.has_next():
            return END_OF_DATA
        return paging.take()

    def _read_page(self, paging: PagingState) -> None:
        request = paging.next_request()
        try:
            items = self._executor.execute(request.query_id, request.to_parameters())
        except Exception as exc:
            self._log_failure(paging, exc)
            raise
        size = paging.accept_page(items)
        self._log_page(paging, request.page_index, size)

    def open(self, state: ReaderState | Mapping[str, object] | None = None) -> None:
        """(Re)open from page 0, re-reading past ``state.item_count`` items."""

        _, restart = self._prepare_open(state)
        if restart is None:
            return
        for skipped in range(restart.item_count):
            if self.read() is END_OF_DATA:
                logger.warning(
                    "end of data before restart position reader=%s skipped=%s expected=%s",
                    self.name,
                    skipped,
                    restart.item_count,
                )
                return

    def close(self) -> None:
        self._close_state()

    def __iter__(self) -> Iterator[Any]:
        while True:
            item = self.read()
            if item is END_OF_DATA:
                return
            yield item

    def __enter__(self) -> "PagingReader":
        if not self.initialized:
            self.initialize()
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "PagingReader",
]
