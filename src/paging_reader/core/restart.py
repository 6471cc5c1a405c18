"""Restart records exposed to an external checkpoint mechanism."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError

RECORD_KIND = "paging_reader"


def _as_str(value: object, *, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} is invalid")
    return value


def _as_count(value: object, *, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{field_name} is invalid")
    return value


@dataclass(slots=True, frozen=True)
class ReaderState:
    """Position of a reader, as the surrounding framework persists it."""

    name: str
    page_index: int
    item_count: int

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise ValueError("page_index must be >= 0")
        if self.item_count < 0:
            raise ValueError("item_count must be >= 0")

    def to_record(self) -> dict[str, object]:
        return {
            "kind": RECORD_KIND,
            "name": self.name,
            "page_index": self.page_index,
            "item_count": self.item_count,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> "ReaderState":
        if not isinstance(record, Mapping):
            raise ConfigurationError("restart record is invalid")
        if record.get("kind") != RECORD_KIND:
            raise ConfigurationError("restart record kind mismatch")
        return cls(
            name=_as_str(record.get("name"), field_name="name"),
            page_index=_as_count(record.get("page_index"), field_name="page_index"),
            item_count=_as_count(record.get("item_count"), field_name="item_count"),
        )


__all__ = [
    "RECORD_KIND",
    "ReaderState",
]
