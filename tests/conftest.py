from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from paging_reader.reader import PagingReader  # noqa: E402
from tests.shared.executors import RecordingExecutor  # noqa: E402


@pytest.fixture
def make_reader():
    def _make(pages, *, page_size: int = 2, initialize: bool = True, **kwargs) -> PagingReader:
        executor = kwargs.pop("executor", None) or RecordingExecutor(pages)
        reader = PagingReader(
            query_id=kwargs.pop("query_id", "selectActive"),
            executor=executor,
            page_size=page_size,
            **kwargs,
        )
        if initialize:
            reader.initialize()
        return reader

    return _make
