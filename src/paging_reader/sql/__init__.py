"""SQL query executors."""

from .executor import SqlQueryExecutor

__all__ = ["SqlQueryExecutor"]
