"""Page state machine shared by sync and async readers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from .buffer import PageBuffer
from .params import PageRequest


class PagingState:
    """Page counter, served-item counter and page buffer.

    ``page_index`` names the page the next refill fetches. It moves forward
    only through ``accept_page``, which callers invoke after a fetch has
    succeeded, so a failed fetch is retried against the same page.
    """

    def __init__(
        self,
        *,
        query_id: str,
        page_size: int,
        base_parameters: Mapping[str, object] | None = None,
        max_item_count: int | None = None,
    ) -> None:
        self._query_id = query_id
        self._page_size = page_size
        self._base_parameters = MappingProxyType(dict(base_parameters or {}))
        self._max_item_count = max_item_count
        self.buffer = PageBuffer()
        self.page_index = 0
        self.item_count = 0
        self.exhausted = False

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def query_id(self) -> str:
        return self._query_id

    def limit_reached(self) -> bool:
        return self._max_item_count is not None and self.item_count >= self._max_item_count

    def needs_refill(self) -> bool:
        return not self.exhausted and not self.buffer.has_next()

    def next_request(self) -> PageRequest:
        return PageRequest(
            query_id=self._query_id,
            page_index=self.page_index,
            page_size=self._page_size,
            base_parameters=self._base_parameters,
        )

    def accept_page(self, items: Iterable[Any]) -> int:
        self.buffer.replace(items)
        self.page_index += 1
        size = len(self.buffer)
        if size == 0:
            self.exhausted = True
        return size

    def take(self) -> Any:
        item = self.buffer.take()
        self.item_count += 1
        return item

    def reset(self) -> None:
        self.buffer.clear()
        self.page_index = 0
        self.item_count = 0
        self.exhausted = False


__all__ = [
    "PagingState",
]
