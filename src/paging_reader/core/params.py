"""Paging parameter construction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

PAGE_KEY = "_page"
PAGE_SIZE_KEY = "_pagesize"
SKIP_ROWS_KEY = "_skiprows"
RESERVED_KEYS = frozenset({PAGE_KEY, PAGE_SIZE_KEY, SKIP_ROWS_KEY})


def build_page_parameters(
    base: Mapping[str, object] | None,
    *,
    page_index: int,
    page_size: int,
) -> dict[str, object]:
    """Return a fresh parameter dict for one page.

    Base parameters are copied first and the reserved paging keys are written
    afterwards, so a base parameter sharing a reserved name never leaks into
    the request.
    """

    if page_index < 0:
        raise ValueError("page_index must be >= 0")
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    params: dict[str, object] = dict(base) if base else {}
    params[PAGE_KEY] = page_index
    params[PAGE_SIZE_KEY] = page_size
    params[SKIP_ROWS_KEY] = page_index * page_size
    return params


def shadowed_keys(base: Mapping[str, object] | None) -> list[str]:
    if not base:
        return []
    return sorted(key for key in base if key in RESERVED_KEYS)


@dataclass(slots=True, frozen=True)
class PageRequest:
    query_id: str
    page_index: int
    page_size: int
    base_parameters: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise ValueError("page_index must be >= 0")
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")
        object.__setattr__(
            self,
            "base_parameters",
            MappingProxyType(dict(self.base_parameters)),
        )

    @property
    def skip_rows(self) -> int:
        return self.page_index * self.page_size

    def to_parameters(self) -> dict[str, object]:
        return build_page_parameters(
            self.base_parameters,
            page_index=self.page_index,
            page_size=self.page_size,
        )


__all__ = [
    "PAGE_KEY",
    "PAGE_SIZE_KEY",
    "SKIP_ROWS_KEY",
    "RESERVED_KEYS",
    "build_page_parameters",
    "shadowed_keys",
    "PageRequest",
]
