"""SQLAlchemy-backed query executor."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.expression import Executable

from ..core.errors import ExecutionError
from ..core.params import PAGE_KEY

logger = logging.getLogger("paging_reader")


def _coerce_statement(query_id: str, statement: str | Executable) -> Executable:
    if isinstance(statement, str):
        if not statement.strip():
            raise ValueError(f"statement for {query_id!r} must not be empty")
        return text(statement)
    if isinstance(statement, Executable):
        return statement
    raise TypeError(f"statement for {query_id!r} must be str or an SQLAlchemy executable")


class SqlQueryExecutor:
    """Runs registered statements by id, one short-lived session per call.

    Statements bind paging values by name, e.g.
    ``SELECT ... ORDER BY id LIMIT :_pagesize OFFSET :_skiprows``.
    Parameters a statement does not reference are ignored.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        statements: Mapping[str, str | Executable],
        *,
        row_mapper: Callable[[RowMapping], Any] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._statements = {
            query_id: _coerce_statement(query_id, statement)
            for query_id, statement in statements.items()
        }
        self._row_mapper = row_mapper or dict

    def has_query(self, query_id: str) -> bool:
        return query_id in self._statements

    def execute(self, query_id: str, parameters: Mapping[str, object]) -> list[Any]:
        statement = self._statements.get(query_id)
        if statement is None:
            raise ExecutionError(f"unknown query_id {query_id!r}", query_id=query_id)
        page_index = parameters.get(PAGE_KEY)
        try:
            with self._session_factory() as session:
                result = session.execute(statement, dict(parameters))
                rows = [self._row_mapper(row) for row in result.mappings()]
        except SQLAlchemyError as exc:
            logger.error(
                "query failed query_id=%s page=%s error=%s",
                query_id,
                page_index,
                type(exc).__name__,
            )
            raise ExecutionError(
                f"query {query_id!r} failed",
                query_id=query_id,
                page_index=page_index if isinstance(page_index, int) else None,
            ) from exc
        logger.debug("query executed query_id=%s page=%s rows=%s", query_id, page_index, len(rows))
        return rows


__all__ = [
    "SqlQueryExecutor",
]
