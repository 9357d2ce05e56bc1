from __future__ import annotations

import threading

import pytest
import requests

from bench_browser.core.exceptions import LoadCancelledError, SourceUnavailableError
from bench_browser.services import source_loader
from bench_browser.services.source_loader import (
    load_records,
    parse_records,
    resolve_location,
)

CSV_TEXT = (
    "dataset_id,task,area,modalities,year_published,description\n"
    'MNIST,Image Classification,Computer Vision,Images,1998,"digits, handwritten"\n'
    "SQuAD,Question Answering\n"
    "\n"
)


class _FakeResponse:
    def __init__(self, body: bytes, status_code: int = 200):
        self.content = body
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def _write_csv(tmp_path, name: str, text: str):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_records_handles_quotes_and_short_rows():
    records = parse_records(CSV_TEXT)

    assert [r.id for r in records] == ["MNIST", "SQuAD"]
    assert records[0].description == "digits, handwritten"
    assert records[1].area == ""
    assert records[1].year_published == ""


def test_parse_records_keeps_na_like_strings():
    records = parse_records("dataset_id,license\nNA,None\n")
    assert records[0].id == "NA"
    assert records[0].license == "None"


def test_parse_records_trailing_delimiters_keep_header_mapping():
    records = parse_records(
        "dataset_id,task,area\n"
        "MNIST,Image Classification,Computer Vision,\n"
        "SQuAD,QA,NLP,\n"
    )

    assert [(r.id, r.task, r.area) for r in records] == [
        ("MNIST", "Image Classification", "Computer Vision"),
        ("SQuAD", "QA", "NLP"),
    ]


def test_parse_records_ragged_long_row_is_truncated():
    records = parse_records("dataset_id,task\nMNIST,IC\nSQuAD,QA,extra\n")

    assert [(r.id, r.task) for r in records] == [("MNIST", "IC"), ("SQuAD", "QA")]


def test_parse_records_empty_text():
    assert parse_records("") == []
    assert parse_records("dataset_id,task\n") == []


def test_load_records_falls_back_to_next_location(tmp_path):
    _write_csv(tmp_path, "good.csv", CSV_TEXT)

    store = load_records(["missing.csv", "good.csv"], config_root=tmp_path)

    assert len(store) == 2
    assert store.source.endswith("good.csv")


def test_load_records_skips_sources_without_records(tmp_path):
    _write_csv(tmp_path, "empty.csv", "dataset_id,task\n")
    _write_csv(tmp_path, "good.csv", CSV_TEXT)

    store = load_records(["empty.csv", "good.csv"], config_root=tmp_path)

    assert [r.id for r in store] == ["MNIST", "SQuAD"]


def test_load_records_raises_aggregate_error(tmp_path):
    _write_csv(tmp_path, "empty.csv", "dataset_id,task\n")

    with pytest.raises(SourceUnavailableError) as exc_info:
        load_records(["empty.csv", "missing.csv"], config_root=tmp_path)

    err = exc_info.value
    assert [loc for loc, _ in err.attempts] == ["empty.csv", "missing.csv"]
    assert err.attempts[0][1] == "no records"
    assert isinstance(err.__cause__, OSError)


def test_load_records_with_no_locations():
    with pytest.raises(SourceUnavailableError):
        load_records([])


def test_load_records_fetches_urls_with_timeout(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        if "broken" in url:
            raise requests.ConnectionError("refused")
        if "notfound" in url:
            return _FakeResponse(b"", status_code=404)
        return _FakeResponse(CSV_TEXT.encode("utf-8"))

    monkeypatch.setattr(source_loader.requests, "get", fake_get)

    store = load_records(
        [
            "https://broken.example/data.csv",
            "https://notfound.example/data.csv",
            "https://ok.example/data.csv",
        ],
        timeout_s=3,
    )

    assert len(store) == 2
    assert store.source == "https://ok.example/data.csv"
    assert [timeout for _, timeout in calls] == [3.0, 3.0, 3.0]


def test_load_records_strips_utf8_bom(monkeypatch):
    monkeypatch.setattr(
        source_loader.requests,
        "get",
        lambda url, timeout: _FakeResponse(b"\xef\xbb\xbf" + CSV_TEXT.encode("utf-8")),
    )

    store = load_records(["https://ok.example/data.csv"])

    assert store[0].id == "MNIST"


def test_load_records_honours_cancel_event(tmp_path):
    _write_csv(tmp_path, "good.csv", CSV_TEXT)
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(LoadCancelledError):
        load_records(["good.csv"], config_root=tmp_path, cancel_event=cancel)


def test_cancel_during_fetch_stops_before_parse(tmp_path, monkeypatch):
    cancel = threading.Event()

    def fetch_then_cancel(location, timeout_s):
        cancel.set()
        return CSV_TEXT

    monkeypatch.setattr(source_loader, "fetch_text", fetch_then_cancel)

    with pytest.raises(LoadCancelledError):
        load_records(["a.csv", "b.csv"], config_root=tmp_path, cancel_event=cancel)


def test_resolve_location_uses_data_root(tmp_path, monkeypatch):
    data_root = tmp_path / "shared"
    data_root.mkdir()
    _write_csv(data_root, "datasets.csv", CSV_TEXT)
    monkeypatch.setenv("BENCH_BROWSER_DATA_ROOT", str(data_root))

    resolved = resolve_location("data/datasets.csv", config_root=tmp_path / "config")

    assert resolved == str((data_root / "datasets.csv").resolve())


def test_resolve_location_leaves_urls_alone():
    url = "https://example.org/x.csv"
    assert resolve_location(url) == url
