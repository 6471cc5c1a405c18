from __future__ import annotations

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, select, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from paging_reader.core.errors import ExecutionError
from paging_reader.core.models import END_OF_DATA
from paging_reader.reader import PagingReader
from paging_reader.sql.executor import SqlQueryExecutor

SELECT_ACTIVE = (
    "SELECT id, name FROM customers WHERE status = :status "
    "ORDER BY id LIMIT :_pagesize OFFSET :_skiprows"
)

metadata = MetaData()
customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("status", String(20), nullable=False),
)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            customers.insert(),
            [
                {"id": index, "name": f"c{index}", "status": "active" if index % 3 else "inactive"}
                for index in range(1, 11)
            ],
        )
    factory = sessionmaker(bind=engine, autoflush=False)
    yield factory
    engine.dispose()


def test_sql_executor_returns_row_dicts_in_order(session_factory):
    executor = SqlQueryExecutor(session_factory, {"selectActive": SELECT_ACTIVE})
    rows = executor.execute(
        "selectActive",
        {"status": "active", "_page": 0, "_pagesize": 3, "_skiprows": 0},
    )
    assert rows == [{"id": 1, "name": "c1"}, {"id": 2, "name": "c2"}, {"id": 4, "name": "c4"}]


def test_sql_executor_applies_row_mapper(session_factory):
    executor = SqlQueryExecutor(
        session_factory,
        {"selectActive": SELECT_ACTIVE},
        row_mapper=lambda row: row["name"],
    )
    rows = executor.execute(
        "selectActive",
        {"status": "active", "_page": 1, "_pagesize": 3, "_skiprows": 3},
    )
    assert rows == ["c5", "c7", "c8"]


def test_sql_executor_accepts_core_statements(session_factory):
    statement = (
        select(customers.c.id)
        .where(customers.c.status == "inactive")
        .order_by(customers.c.id)
    )
    executor = SqlQueryExecutor(session_factory, {"selectInactive": statement})
    assert executor.execute("selectInactive", {"_page": 0}) == [{"id": 3}, {"id": 6}, {"id": 9}]


def test_sql_executor_does_not_mutate_parameters(session_factory):
    executor = SqlQueryExecutor(session_factory, {"selectActive": SELECT_ACTIVE})
    params = {"status": "active", "_page": 0, "_pagesize": 2, "_skiprows": 0}
    executor.execute("selectActive", params)
    assert params == {"status": "active", "_page": 0, "_pagesize": 2, "_skiprows": 0}


def test_sql_executor_unknown_query_id_raises_execution_error(session_factory):
    executor = SqlQueryExecutor(session_factory, {"selectActive": SELECT_ACTIVE})
    assert executor.has_query("selectActive") is True
    assert executor.has_query("missing") is False
    with pytest.raises(ExecutionError, match="unknown query_id 'missing'") as exc_info:
        executor.execute("missing", {})
    assert exc_info.value.query_id == "missing"


def test_sql_executor_wraps_database_errors(session_factory):
    executor = SqlQueryExecutor(session_factory, {"broken": "SELECT * FROM no_such_table"})
    with pytest.raises(ExecutionError) as exc_info:
        executor.execute("broken", {"_page": 4})
    assert exc_info.value.query_id == "broken"
    assert exc_info.value.page_index == 4
    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize("statement", ["", "   "])
def test_sql_executor_rejects_empty_statements(session_factory, statement):
    with pytest.raises(ValueError):
        SqlQueryExecutor(session_factory, {"q": statement})


def test_sql_executor_rejects_unsupported_statement_types(session_factory):
    with pytest.raises(TypeError):
        SqlQueryExecutor(session_factory, {"q": 42})  # type: ignore[dict-item]


def test_reader_pages_through_sqlite_table(session_factory):
    executor = SqlQueryExecutor(
        session_factory,
        {"selectActive": SELECT_ACTIVE, "count": text("SELECT count(*) AS n FROM customers")},
        row_mapper=lambda row: row["id"],
    )
    reader = PagingReader(
        query_id="selectActive",
        executor=executor,
        parameter_values={"status": "active"},
        page_size=2,
    )
    reader.initialize()

    ids = list(reader)

    assert ids == [1, 2, 4, 5, 7, 8, 10]
    assert reader.page_index == 5
    assert reader.read() is END_OF_DATA
