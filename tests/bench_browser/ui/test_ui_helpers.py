from __future__ import annotations

from bench_browser.core.record import Record
from bench_browser.core.record_store import RecordStore
from bench_browser.core.selection_state import SelectionState
from bench_browser.ui.callbacks.callbacks_display import root_class_name
from bench_browser.ui.helpers import (
    checklist_options,
    facet_title,
    option_caption,
    record_table_rows,
    results_header,
)


def test_record_table_rows_use_store_position_as_row_id():
    store = RecordStore(
        [
            Record(id="MNIST", task="Image Classification", year_published="1998",
                   source_page_url="https://paperswithcode.com/dataset/mnist"),
            Record(id="Plain"),
        ]
    )

    rows = record_table_rows(store, list(store))

    assert [row["id"] for row in rows] == [0, 1]
    assert rows[0]["name"] == "MNIST"
    assert rows[0]["source"] == "[Open](https://paperswithcode.com/dataset/mnist)"
    assert rows[0]["year_published"] == "1998"
    assert rows[1]["source"] == ""


def test_duplicate_and_blank_ids_resolve_to_their_own_rows():
    store = RecordStore(
        [
            Record(id="COCO", task="Detection"),
            Record(id="COCO", task="Captioning"),
            Record(id="", task="Segmentation"),
            Record(id="", task="Tracking"),
        ]
    )
    visible = store.filtered(SelectionState(query="i"))

    rows = record_table_rows(store, visible)

    assert [row["id"] for row in rows] == [0, 1, 2, 3]
    assert [store.at(row["id"]).task for row in rows] == [
        "Detection",
        "Captioning",
        "Segmentation",
        "Tracking",
    ]

    narrowed = record_table_rows(store, store.filtered(SelectionState(query="track")))
    assert [row["id"] for row in narrowed] == [3]


def test_labels_and_captions():
    assert results_header(3) == "Datasets (3)"
    assert facet_title("Task", 0) == "Task"
    assert facet_title("Task", 2) == "Task (2)"
    assert option_caption(50, 20, None, "tasks") == "Showing 20 of 50 tasks. Use search to find more."
    assert option_caption(50, 20, "seg", "tasks") == ""
    assert option_caption(10, 20, None, "tasks") == ""
    assert checklist_options(["a"]) == [{"label": "a", "value": "a"}]


def test_root_class_name_for_theme():
    assert root_class_name("dark") == "bb-root bb-theme-dark"
    assert root_class_name("light") == "bb-root"
