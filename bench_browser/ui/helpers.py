from __future__ import annotations

from typing import Iterable, List, Sequence

from dash import dash_table

from bench_browser.core.record import Record
from bench_browser.core.record_store import RecordStore
from bench_browser.ui.ids import IDs

TABLE_COLUMNS = [
    {"name": "Name", "id": "name"},
    {"name": "Source", "id": "source", "presentation": "markdown"},
    {"name": "Task", "id": "task"},
    {"name": "Modalities", "id": "modalities"},
    {"name": "Area", "id": "area"},
    {"name": "License", "id": "license"},
    {"name": "Year", "id": "year_published"},
]

FONT_STACK = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def checklist_options(values: Iterable[str]) -> List[dict]:
    return [{"label": v, "value": v} for v in values]


def record_table_rows(store: RecordStore, records: Sequence[Record]) -> List[dict]:
    """
    Flatten records for the results DataTable. The "id" key is the DataTable
    row id and holds the record's position in the store, so a click resolves to
    that exact record even when dataset ids repeat or are blank.
    """
    rows: List[dict] = []
    for record in records:
        row = record.to_row()
        row.update(
            id=store.position(record),
            name=record.id,
            source=f"[Open]({record.source_page_url})" if record.source_page_url else "",
        )
        rows.append(row)
    return rows


def results_header(n_results: int) -> str:
    return f"Datasets ({n_results})"


def facet_title(label: str, n_selected: int) -> str:
    return f"{label} ({n_selected})" if n_selected else label


def option_caption(total: int, limit: int, search: str | None, noun: str) -> str:
    """Hint shown under a checklist that is capped at `limit` entries."""
    if search:
        return ""
    if total > limit:
        return f"Showing {limit} of {total} {noun}. Use search to find more."
    return ""


def results_table(page_size: int) -> dash_table.DataTable:
    return dash_table.DataTable(
        id=IDs.Control.RESULTS_TABLE,
        data=[],
        columns=TABLE_COLUMNS,
        page_action="native",
        page_size=page_size,
        page_current=0,
        sort_action="none",
        filter_action="none",
        markdown_options={"link_target": "_blank"},
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontFamily": FONT_STACK,
            "fontSize": "13px",
            "padding": "8px 16px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "320px",
            "whiteSpace": "normal",
            "cursor": "pointer",
        },
        style_cell_conditional=[
            {"if": {"column_id": "name"}, "fontWeight": "600"},
        ],
        style_header={
            "fontFamily": FONT_STACK,
            "fontSize": "13px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
    )
