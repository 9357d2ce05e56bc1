from __future__ import annotations

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from bench_browser.core.exceptions import LoadCancelledError, SourceUnavailableError
from bench_browser.ui.ids import IDs
from bench_browser.ui.layout.build_filter_panel import build_filter_panel
from bench_browser.ui.layout.build_navbar import build_navbar
from bench_browser.ui.layout.build_results_panel import build_detail_modal, build_results_panel

if TYPE_CHECKING:
    from bench_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _stores() -> list:
    return [
        dcc.Store(id=IDs.Store.SELECTION_STATE, storage_type="memory"),
        dcc.Store(id=IDs.Store.DISPLAY_PREFS, storage_type="local"),
    ]


def build_failure_layout(ctx: AppConfig, message: str) -> dbc.Container:
    return dbc.Container(
        fluid=True,
        id=IDs.Control.ROOT,
        className="bb-root",
        children=[
            build_navbar(ctx.global_config, 0),
            *_stores(),
            dbc.Alert(message, id=IDs.Control.LOAD_ALERT, color="danger", className="mt-3"),
        ],
    )


def build_layout(ctx: AppConfig) -> dbc.Container:
    """
    Page layout, built on each page load. Waits for the catalog load and falls
    back to a failure banner carrying the aggregate error when no data source
    produced records. Each page load after a failure retries the load.
    """
    try:
        store = ctx.catalog.result(timeout=ctx.load_wait_s)
    except SourceUnavailableError as e:
        logger.error("Rendering load-failure layout", extra={"error": str(e)})
        return build_failure_layout(ctx, str(e))
    except LoadCancelledError:
        return build_failure_layout(ctx, "Loading was interrupted. Please reload the page.")
    except FutureTimeoutError:
        return build_failure_layout(ctx, "Still loading datasets. Please reload the page shortly.")

    cfg = ctx.global_config

    return dbc.Container(
        fluid=True,
        id=IDs.Control.ROOT,
        className="bb-root",
        children=[
            build_navbar(cfg, len(store)),
            *_stores(),
            dbc.Row(
                [
                    dbc.Col(
                        build_filter_panel(cfg, store.facet_options()),
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        build_results_panel(len(store), cfg.page_size),
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
            build_detail_modal(),
        ],
    )
