from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from bench_browser.core.record import Record

NOT_AVAILABLE = "N/A"


def _badges(values: List[str], empty_text: str):
    if not values:
        return html.Small(empty_text, className="text-muted")
    return html.Div(
        [dbc.Badge(v, color="secondary", className="me-1 mb-1") for v in values],
        className="d-flex flex-wrap",
    )


def _fact(label: str, value: str, md: int = 6) -> dbc.Col:
    return dbc.Col(
        [
            html.Div(label, className="fw-semibold"),
            html.Div(value or NOT_AVAILABLE),
        ],
        md=md,
        className="mb-3",
    )


def _links(record: Record) -> List:
    links = []
    for label, url in (
        ("Homepage", record.homepage_url),
        ("Source page", record.source_page_url),
        ("Paper", record.paper_url),
    ):
        if url:
            links.append(
                dbc.Button(label, href=url, target="_blank", color="primary",
                           outline=True, size="sm", className="me-2")
            )
    return links


def build_record_detail(record: Record) -> List:
    """
    Body of the detail modal for one record.
    """
    task_badges = [dbc.Badge(record.task or NOT_AVAILABLE, color="primary", className="me-1")]
    if record.show_subtask:
        task_badges.append(dbc.Badge(record.subtask, color="info", className="me-1"))

    children = [
        html.H6("Task"),
        html.Div(task_badges, className="mb-3"),
        html.H6("Description"),
        html.P(record.description or "No description available"),
        html.Hr(),
        dbc.Row(
            [
                _fact("Area", record.area),
                _fact("Year Published", record.year_published),
                _fact("Dataset Size", record.dataset_size),
                _fact("License", record.license),
            ]
        ),
        html.Div("Modalities", className="fw-semibold"),
        _badges(record.atoms("modalities"), "No modalities available"),
        html.Div("Associated Tasks", className="fw-semibold mt-3"),
        _badges(record.atoms("associated_tasks"), "No associated tasks available"),
        dbc.Row([_fact("Languages", record.languages, md=12)], className="mt-3"),
    ]

    benchmarks = record.benchmark_links()
    if benchmarks:
        children += [
            html.Hr(),
            html.H6("Benchmarks"),
            html.Ul(
                [html.Li(html.A(b.name, href=b.url, target="_blank")) for b in benchmarks]
            ),
        ]

    links = _links(record)
    if links:
        children += [html.Hr(), html.Div(links)]

    return children
