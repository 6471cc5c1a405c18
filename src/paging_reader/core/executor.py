"""Query executor contracts consumed by readers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class QueryExecutor(Protocol):
    """Runs a named query and returns its rows in store order."""

    def execute(self, query_id: str, parameters: Mapping[str, object]) -> Sequence[Any]:
        """Execute ``query_id`` bound to ``parameters``; must not mutate ``parameters``."""


@runtime_checkable
class AsyncQueryExecutor(Protocol):
    """Async counterpart of :class:`QueryExecutor`."""

    async def execute(self, query_id: str, parameters: Mapping[str, object]) -> Sequence[Any]:
        """Execute ``query_id`` bound to ``parameters``; must not mutate ``parameters``."""


__all__ = [
    "QueryExecutor",
    "AsyncQueryExecutor",
]
