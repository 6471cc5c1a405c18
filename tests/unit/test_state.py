from __future__ import annotations

from paging_reader.core.state import PagingState


def _state(**kwargs) -> PagingState:
    return PagingState(query_id="q", page_size=3, base_parameters={"k": "v"}, **kwargs)


def test_next_request_uses_current_page_index():
    state = _state()
    assert state.next_request().to_parameters() == {
        "k": "v",
        "_page": 0,
        "_pagesize": 3,
        "_skiprows": 0,
    }
    state.accept_page([1, 2, 3])
    assert state.next_request().skip_rows == 3


def test_accept_page_advances_page_index_and_fills_buffer():
    state = _state()
    size = state.accept_page(["a", "b"])

    assert size == 2
    assert state.page_index == 1
    assert state.exhausted is False
    assert state.needs_refill() is False


def test_empty_page_marks_state_exhausted():
    state = _state()
    state.accept_page([])

    assert state.exhausted is True
    assert state.needs_refill() is False


def test_take_counts_served_items():
    state = _state()
    state.accept_page(["a", "b"])
    state.take()
    state.take()

    assert state.item_count == 2
    assert state.needs_refill() is True


def test_limit_reached_honours_max_item_count():
    state = _state(max_item_count=1)
    state.accept_page(["a", "b"])
    assert state.limit_reached() is False
    state.take()
    assert state.limit_reached() is True


def test_limit_reached_is_false_without_limit():
    state = _state()
    state.item_count = 10_000
    assert state.limit_reached() is False


def test_reset_returns_to_first_page():
    state = _state()
    state.accept_page(["a"])
    state.take()
    state.accept_page([])
    state.reset()

    assert state.page_index == 0
    assert state.item_count == 0
    assert state.exhausted is False
    assert state.buffer.snapshot() == ()


def test_base_parameters_are_copied_at_construction():
    base = {"k": "v"}
    state = PagingState(query_id="q", page_size=1, base_parameters=base)
    base["k"] = "changed"
    assert state.next_request().to_parameters()["k"] == "v"
