from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from bench_browser.core.exceptions import LoadCancelledError, SourceUnavailableError
from bench_browser.core.record_store import RecordStore
from bench_browser.services.source_loader import load_records

logger = logging.getLogger(__name__)

Loader = Callable[..., RecordStore]


class CatalogService:
    """
    Owns the session's RecordStore and the single in-flight load producing it.

    Each load carries its own cancel event and a generation number. Starting a
    new load, or calling cancel(), retires the previous one: it stops at its
    next checkpoint and its result is never published.
    """

    def __init__(
        self,
        sources: Sequence[str],
        *,
        config_root: Optional[Path] = None,
        timeout_s: float = 10.0,
        loader: Loader = load_records,
    ) -> None:
        self._sources: List[str] = list(sources)
        self._config_root = config_root
        self._timeout_s = timeout_s
        self._loader = loader

        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="catalog-load")
        self._lock = threading.Lock()
        self._generation = 0
        self._cancel_event: Optional[threading.Event] = None
        self._future: Optional[Future] = None

        self._store: Optional[RecordStore] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def store(self) -> Optional[RecordStore]:
        return self._store

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def start_load(self, sources: Optional[Sequence[str]] = None) -> Future:
        """
        Begin loading, superseding any load still in flight. Passing `sources`
        retries against a different list of candidate locations.
        """
        with self._lock:
            if self._cancel_event is not None:
                self._cancel_event.set()
            if sources is not None:
                self._sources = list(sources)

            self._generation += 1
            generation = self._generation
            cancel_event = threading.Event()
            self._cancel_event = cancel_event

            logger.info(
                "Starting record load",
                extra={"generation": generation, "sources": self._sources},
            )
            self._future = self._executor.submit(
                self._run, generation, cancel_event, list(self._sources)
            )
            return self._future

    def _is_current(self, generation: int, cancel_event: threading.Event) -> bool:
        return generation == self._generation and not cancel_event.is_set()

    def _run(
        self,
        generation: int,
        cancel_event: threading.Event,
        sources: List[str],
    ) -> RecordStore:
        try:
            store = self._loader(
                sources,
                config_root=self._config_root,
                timeout_s=self._timeout_s,
                cancel_event=cancel_event,
            )
        except LoadCancelledError:
            logger.info("Record load cancelled", extra={"generation": generation})
            raise
        except SourceUnavailableError as e:
            with self._lock:
                if not self._is_current(generation, cancel_event):
                    raise LoadCancelledError("Record load superseded") from e
            raise

        with self._lock:
            if not self._is_current(generation, cancel_event):
                logger.info(
                    "Discarding result of superseded record load",
                    extra={"generation": generation},
                )
                raise LoadCancelledError("Record load superseded")
            self._store = store
        return store

    def result(self, timeout: Optional[float] = None) -> RecordStore:
        """
        Block until the current load finishes and return its store. A new load
        is started first if none was requested yet, or if the last one failed
        or was cancelled, so every call retries the configured locations.
        """
        future = self._future
        if future is None or self._finished_without_store(future):
            future = self.start_load()
        return future.result(timeout=timeout)

    @staticmethod
    def _finished_without_store(future: Future) -> bool:
        if not future.done():
            return False
        return future.cancelled() or future.exception() is not None

    def cancel(self) -> None:
        with self._lock:
            if self._cancel_event is not None:
                self._cancel_event.set()
            # Any result still arriving belongs to a retired generation
            self._generation += 1

    def close(self) -> None:
        self.cancel()
        self._executor.shutdown(wait=False)
