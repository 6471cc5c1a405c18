"""Asynchronous paging reader."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from types import TracebackType
from typing import Any

from .core.executor import AsyncQueryExecutor
from .core.models import END_OF_DATA
from .core.restart import ReaderState
from .core.state import PagingState
from .reader_shared import PagingReaderBase

logger = logging.getLogger("paging_reader")


class AsyncPagingReader(PagingReaderBase):
    """Async counterpart of :class:`paging_reader.reader.PagingReader`."""

    _executor: AsyncQueryExecutor | None

    async def read(self) -> Any:
        paging = self._ensure_open()
        if paging.limit_reached():
            return END_OF_DATA
        if paging.needs_refill():
            await self._read_page(paging)
        if not paging.buffer.has_next():
            return END_OF_DATA
        return paging.take()

    async def _read_page(self, paging: PagingState) -> None:
        request = paging.next_request()
        try:
            items = await self._executor.execute(request.query_id, request.to_parameters())
        except Exception as exc:
            self._log_failure(paging, exc)
            raise
        size = paging.accept_page(items)
        self._log_page(paging, request.page_index, size)

    async def open(self, state: ReaderState | Mapping[str, object] | None = None) -> None:
        _, restart = self._prepare_open(state)
        if restart is None:
            return
        for skipped in range(restart.item_count):
            if await self.read() is END_OF_DATA:
                logger.warning(
                    "end of data before restart position reader=%s skipped=%s expected=%s",
                    self.name,
                    skipped,
                    restart.item_count,
                )
                return

    async def close(self) -> None:
        self._close_state()

    def __aiter__(self) -> AsyncIterator[Any]:
        return self

    async def __anext__(self) -> Any:
        item = await self.read()
        if item is END_OF_DATA:
            raise StopAsyncIteration
        return item

    async def __aenter__(self) -> "AsyncPagingReader":
        if not self.initialized:
            self.initialize()
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncPagingReader",
]
