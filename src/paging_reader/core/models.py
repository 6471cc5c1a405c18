"""Core value types."""

from __future__ import annotations

from typing import Final


class EndOfData:
    """Sentinel returned by readers once the result set is exhausted."""

    _instance: "EndOfData | None" = None

    def __new__(cls) -> "EndOfData":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "END_OF_DATA"

    def __reduce__(self) -> str:
        return "END_OF_DATA"


END_OF_DATA: Final = EndOfData()


__all__ = [
    "EndOfData",
    "END_OF_DATA",
]
