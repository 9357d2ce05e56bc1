from __future__ import annotations

import io
import logging
import os
import threading
import time
import warnings
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd
import requests

from bench_browser.core.exceptions import LoadCancelledError, SourceUnavailableError
from bench_browser.core.record import Record
from bench_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)

DATA_ROOT_ENV = "BENCH_BROWSER_DATA_ROOT"


def is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def resolve_location(location: str, config_root: Optional[Path] = None) -> str:
    """
    Resolve a configured data source to something fetchable.

    URLs are returned unchanged. Relative paths are tried against the config
    root first, then against $BENCH_BROWSER_DATA_ROOT (also without a leading
    'data/' component).
    """
    if is_url(location):
        return location

    path = Path(location)
    if path.is_absolute():
        return str(path)

    candidates: List[Path] = []
    if config_root is not None:
        candidates.append(Path(config_root) / path)

    data_root = os.environ.get(DATA_ROOT_ENV)
    if data_root:
        candidates.append(Path(data_root) / path)
        if len(path.parts) > 1 and path.parts[0] == "data":
            candidates.append(Path(data_root) / Path(*path.parts[1:]))

    for candidate in candidates:
        if candidate.is_file():
            return str(candidate.resolve())

    return str(candidates[0] if candidates else path)


def fetch_text(location: str, timeout_s: float) -> str:
    if is_url(location):
        resp = requests.get(location, timeout=float(timeout_s))
        resp.raise_for_status()
        return resp.content.decode("utf-8-sig")
    return Path(location).read_text(encoding="utf-8-sig")


def parse_records(text: str) -> List[Record]:
    """
    Parse CSV text (header row + one row per record) into Records.

    Every cell is read as a string and mapped by header name. Short rows are
    padded with "", cells past the header width (trailing delimiters, ragged
    rows) are dropped.
    """
    if not text.strip():
        return []
    width = len(pd.read_csv(io.StringIO(text), dtype=str, nrows=0).columns)

    def _truncate(bad_line: List[str]) -> List[str]:
        return bad_line[:width]

    with warnings.catch_warnings():
        # Emitted when extra trailing cells are dropped under index_col=False
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines=_truncate,
        )
    df = df.fillna("")
    return [Record.from_row(row) for row in df.to_dict("records")]


def _check_cancelled(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise LoadCancelledError("Record load cancelled")


def load_records(
    locations: Sequence[str],
    *,
    config_root: Optional[Path] = None,
    timeout_s: float = 10.0,
    cancel_event: Optional[threading.Event] = None,
) -> RecordStore:
    """
    Try each location in order and return a RecordStore for the first one that
    yields at least one record.

    Raises SourceUnavailableError once every location has failed, chaining the
    last underlying error. Raises LoadCancelledError as soon as `cancel_event`
    is observed set.
    """
    attempts: List[Tuple[str, str]] = []
    last_error: Optional[BaseException] = None

    for location in locations:
        _check_cancelled(cancel_event)
        resolved = resolve_location(location, config_root)
        started = time.perf_counter()

        try:
            text = fetch_text(resolved, timeout_s)
            _check_cancelled(cancel_event)
            records = parse_records(text)
        except (
            requests.RequestException,
            OSError,
            UnicodeDecodeError,
            pd.errors.ParserError,
            pd.errors.EmptyDataError,
        ) as e:
            logger.warning(
                "Failed to load records from source",
                extra={"location": resolved, "error": str(e)},
            )
            attempts.append((location, str(e)))
            last_error = e
            continue

        _check_cancelled(cancel_event)

        if not records:
            logger.warning("Source yielded no records", extra={"location": resolved})
            attempts.append((location, "no records"))
            continue

        logger.info(
            "Loaded records",
            extra={
                "location": resolved,
                "n_records": len(records),
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return RecordStore(records, source=resolved)

    logger.error(
        "All data sources failed",
        extra={"attempts": [loc for loc, _ in attempts]},
    )
    raise SourceUnavailableError(attempts) from last_error
