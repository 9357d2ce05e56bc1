from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, exceptions

from bench_browser.ui.detail import build_record_detail
from bench_browser.ui.ids import IDs

if TYPE_CHECKING:
    from bench_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_detail_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.DETAIL_TITLE, "children"),
        Output(IDs.Control.DETAIL_BODY, "children"),
        Output(IDs.Control.RESULTS_TABLE, "active_cell"),
        Input(IDs.Control.RESULTS_TABLE, "active_cell"),
        prevent_initial_call=True,
    )
    def open_detail(active_cell):
        store = ctx.store
        if not active_cell or store is None:
            raise exceptions.PreventUpdate

        # Links in the Source column open in a new tab; don't pop the modal too
        if active_cell.get("column_id") == "source":
            return dash.no_update, dash.no_update, dash.no_update, None

        record = store.at(active_cell.get("row_id"))
        if record is None:
            logger.warning("Clicked row has no matching record", extra={"active_cell": active_cell})
            raise exceptions.PreventUpdate

        # Reset active_cell so clicking the same row again reopens the modal
        return True, record.id, build_record_detail(record), None
