"""Reader configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_PAGE_SIZE = 10


@dataclass(slots=True, frozen=True)
class PagingReaderConfig:
    """Static settings for a paging reader."""

    query_id: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    parameter_values: dict[str, object] = field(default_factory=dict)
    max_item_count: int | None = None
    strict_jump: bool = False
    name: str | None = None

    def validate(self) -> None:
        if not isinstance(self.query_id, str) or not self.query_id.strip():
            raise ValueError("query_id must not be empty")
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise ValueError("page_size must be int")
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")
        if not isinstance(self.parameter_values, Mapping):
            raise ValueError("parameter_values must be a mapping")
        if self.max_item_count is not None:
            if isinstance(self.max_item_count, bool) or not isinstance(self.max_item_count, int):
                raise ValueError("max_item_count must be int")
            if self.max_item_count < 0:
                raise ValueError("max_item_count must be >= 0")
        if not isinstance(self.strict_jump, bool):
            raise ValueError("strict_jump must be bool")
        if self.name is not None and not self.name:
            raise ValueError("name must not be empty")


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "PagingReaderConfig",
]
