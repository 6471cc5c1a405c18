"""Configuration, lifecycle and restart plumbing shared by sync/async readers."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from .config import DEFAULT_PAGE_SIZE, PagingReaderConfig
from .core.errors import (
    ConfigurationError,
    ReaderClosedError,
    ReaderStateError,
    UnsupportedOperationError,
)
from .core.params import shadowed_keys
from .core.restart import ReaderState
from .core.state import PagingState

logger = logging.getLogger("paging_reader")


def validate_reader_config(config: PagingReaderConfig, executor: object | None) -> None:
    if executor is None:
        raise ConfigurationError("an executor is required")
    if not callable(getattr(executor, "execute", None)):
        raise ConfigurationError("executor must provide execute()")
    try:
        config.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def resolve_restart_state(
    state: ReaderState | Mapping[str, object] | None,
    *,
    name: str,
) -> ReaderState | None:
    if state is None:
        return None
    resolved = state if isinstance(state, ReaderState) else ReaderState.from_record(state)
    if resolved.name != name:
        raise ConfigurationError(
            f"restart state belongs to reader {resolved.name!r}, not {name!r}"
        )
    return resolved


class PagingReaderBase:
    """Shared configuration surface and state accessors.

    Subclasses supply ``read``/``open``/``close`` against a concrete
    executor flavour and drive ``_state`` through the helpers below.
    """

    supports_jump_to_page = False

    def __init__(
        self,
        *,
        query_id: str | None = None,
        executor: Any | None = None,
        parameter_values: Mapping[str, object] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_item_count: int | None = None,
        strict_jump: bool = False,
        name: str | None = None,
    ) -> None:
        self._config = PagingReaderConfig(
            query_id=query_id,
            page_size=page_size,
            parameter_values=dict(parameter_values or {}),
            max_item_count=max_item_count,
            strict_jump=strict_jump,
            name=name,
        )
        self._executor = executor
        self._state: PagingState | None = None
        self._closed = False

    @classmethod
    def from_config(cls, config: PagingReaderConfig, *, executor: Any | None = None):
        return cls(
            query_id=config.query_id,
            executor=executor,
            parameter_values=config.parameter_values,
            page_size=config.page_size,
            max_item_count=config.max_item_count,
            strict_jump=config.strict_jump,
            name=config.name,
        )

    # -- configuration -------------------------------------------------

    def _configure(self, **changes: Any) -> None:
        if self._state is not None:
            raise ReaderStateError("reader is already initialized")
        self._config = dataclasses.replace(self._config, **changes)

    @property
    def config(self) -> PagingReaderConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name or type(self).__name__

    @property
    def query_id(self) -> str | None:
        return self._config.query_id

    @query_id.setter
    def query_id(self, value: str) -> None:
        self._configure(query_id=value)

    @property
    def executor(self) -> Any | None:
        return self._executor

    @executor.setter
    def executor(self, value: Any) -> None:
        if self._state is not None:
            raise ReaderStateError("reader is already initialized")
        self._executor = value

    @property
    def parameter_values(self) -> dict[str, object]:
        return dict(self._config.parameter_values)

    @parameter_values.setter
    def parameter_values(self, value: Mapping[str, object] | None) -> None:
        self._configure(parameter_values=dict(value or {}))

    @property
    def page_size(self) -> int:
        return self._config.page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        self._configure(page_size=value)

    @property
    def max_item_count(self) -> int | None:
        return self._config.max_item_count

    @max_item_count.setter
    def max_item_count(self, value: int | None) -> None:
        self._configure(max_item_count=value)

    # -- lifecycle -----------------------------------------------------

    def initialize(self) -> None:
        """Validate configuration; must run once, after all setters."""

        if self._state is not None:
            raise ReaderStateError("reader is already initialized")
        validate_reader_config(self._config, self._executor)
        shadowed = shadowed_keys(self._config.parameter_values)
        if shadowed:
            logger.warning(
                "reserved paging keys override parameter_values reader=%s keys=%s",
                self.name,
                ",".join(shadowed),
            )
        self._state = PagingState(
            query_id=self._config.query_id,
            page_size=self._config.page_size,
            base_parameters=self._config.parameter_values,
            max_item_count=self._config.max_item_count,
        )
        logger.debug(
            "reader initialized reader=%s query_id=%s page_size=%s",
            self.name,
            self._config.query_id,
            self._config.page_size,
        )

    @property
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_initialized(self) -> PagingState:
        if self._state is None:
            raise ReaderStateError(f"{self.name} is not initialized")
        return self._state

    def _ensure_open(self) -> PagingState:
        state = self._ensure_initialized()
        if self._closed:
            raise ReaderClosedError(f"{self.name} is already closed")
        return state

    def reset(self) -> None:
        self._ensure_open().reset()

    def _close_state(self) -> None:
        if self._closed:
            return
        if self._state is not None:
            self._state.reset()
        self._closed = True
        logger.debug("reader closed reader=%s", self.name)

    def _prepare_open(
        self,
        state: ReaderState | Mapping[str, object] | None,
    ) -> tuple[PagingState, ReaderState | None]:
        paging = self._ensure_initialized()
        restart = resolve_restart_state(state, name=self.name)
        paging.reset()
        self._closed = False
        if restart is not None:
            logger.info(
                "reader restart reader=%s skip_items=%s saved_page=%s",
                self.name,
                restart.item_count,
                restart.page_index,
            )
        return paging, restart

    # -- paging --------------------------------------------------------

    def jump_to_page(self, index: int) -> None:
        """Seeking is unsupported; restarts re-read from page 0 instead."""

        if index < 0:
            raise ValueError("index must be >= 0")
        if self._config.strict_jump:
            raise UnsupportedOperationError(f"{self.name} does not support jump_to_page")
        logger.debug("jump_to_page ignored reader=%s index=%s", self.name, index)

    def _log_page(self, paging: PagingState, page_index: int, size: int) -> None:
        logger.debug(
            "page fetched reader=%s query_id=%s page=%s skip_rows=%s rows=%s",
            self.name,
            paging.query_id,
            page_index,
            page_index * paging.page_size,
            size,
        )
        if size == 0:
            logger.info(
                "end of data reader=%s page=%s items=%s",
                self.name,
                page_index,
                paging.item_count,
            )

    def _log_failure(self, paging: PagingState, exc: BaseException) -> None:
        logger.warning(
            "page fetch failed reader=%s query_id=%s page=%s error=%s",
            self.name,
            paging.query_id,
            paging.page_index,
            type(exc).__name__,
        )

    # -- restart accessors ---------------------------------------------

    @property
    def page_index(self) -> int:
        return self._state.page_index if self._state is not None else 0

    @property
    def item_count(self) -> int:
        return self._state.item_count if self._state is not None else 0

    @property
    def current_item_index(self) -> int:
        return self._state.buffer.cursor if self._state is not None else 0

    @property
    def exhausted(self) -> bool:
        return self._state.exhausted if self._state is not None else False

    def save_state(self) -> ReaderState:
        paging = self._ensure_initialized()
        return ReaderState(
            name=self.name,
            page_index=paging.page_index,
            item_count=paging.item_count,
        )

    def buffered_items(self) -> tuple[Any, ...]:
        if self._state is None:
            return ()
        return self._state.buffer.snapshot()


__all__ = [
    "validate_reader_config",
    "resolve_restart_state",
    "PagingReaderBase",
]
