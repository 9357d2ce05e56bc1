from __future__ import annotations

from bench_browser.core.facets import build_facet_options, extract_facet, narrow_options
from bench_browser.core.record import Record


def _make_records():
    return [
        Record(id="a", task="Object Detection, Segmentation", modalities="Images,Text",
               area="Computer Vision", year_published="2019"),
        Record(id="b", task="Segmentation", modalities=" images , Images",
               area="Computer Vision, Graphics", year_published="2017"),
        Record(id="c", task="", modalities="", area="", year_published=""),
    ]


def test_extract_facet_sorted_deduplicated_case_sensitive():
    records = _make_records()

    assert extract_facet(records, "task") == ["Object Detection", "Segmentation"]
    # "Images" and "images" are distinct values; sort is ordinal (upper before lower)
    assert extract_facet(records, "modalities") == ["Images", "Text", "images"]


def test_extract_facet_has_no_empty_or_duplicate_atoms():
    values = extract_facet(_make_records(), "area")

    assert "" not in values
    assert len(values) == len(set(values))
    assert values == ["Computer Vision", "Graphics"]


def test_extract_facet_is_deterministic():
    records = _make_records()
    assert extract_facet(records, "task") == extract_facet(list(reversed(records)), "task")


def test_extract_facet_empty_store():
    assert extract_facet([], "task") == []


def test_extract_facet_coerces_non_string_values_from_rows():
    rows = [{"year_published": 2020}, {"year_published": "2019"}, {"year_published": None}]
    assert extract_facet(rows, "year_published") == ["2019", "2020"]


def test_build_facet_options_uses_full_store():
    options = build_facet_options(_make_records())

    assert options.tasks == ["Object Detection", "Segmentation"]
    assert options.years == ["2017", "2019"]
    assert options.for_category("modality") == options.modalities


def test_narrow_options_filters_caps_and_keeps_selected():
    options = [f"Task {i:02d}" for i in range(30)]

    assert narrow_options(options, limit=20) == options[:20]
    assert narrow_options(options, "task 0", limit=5) == options[:5]
    assert narrow_options(options, "TASK 1", selected=["Task 25"], limit=3) == [
        "Task 10", "Task 11", "Task 12", "Task 25",
    ]
    assert narrow_options(options, "nothing") == []
