from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from bench_browser.ui.helpers import results_header, results_table
from bench_browser.ui.ids import IDs


def build_results_panel(n_records: int, page_size: int) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.H5(results_header(n_records), id=IDs.Control.RESULTS_HEADER),
                results_table(page_size),
            ]
        ),
        className="bb-results",
    )


def build_detail_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.DETAIL_TITLE), close_button=True),
            dbc.ModalBody(id=IDs.Control.DETAIL_BODY),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="lg",
        scrollable=True,
    )
