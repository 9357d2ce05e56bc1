from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, exceptions

from bench_browser.core.selection_state import SelectionState
from bench_browser.ui.helpers import record_table_rows, results_header
from bench_browser.ui.ids import IDs

if TYPE_CHECKING:
    from bench_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.RESULTS_TABLE, "data"),
        Output(IDs.Control.RESULTS_TABLE, "page_current"),
        Output(IDs.Control.RESULTS_HEADER, "children"),
        Input(IDs.Store.SELECTION_STATE, "data"),
    )
    def render_results(data):
        store = ctx.store
        if store is None:
            raise exceptions.PreventUpdate

        state = SelectionState.from_dict(data)
        records = store.filtered(state)
        return record_table_rows(store, records), 0, results_header(len(records))
