from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from bench_browser.config.model import GlobalConfig
from bench_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, n_records: int) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Span(
                            f"{n_records} datasets",
                            id=IDs.Control.RECORD_COUNT,
                            className="me-4 text-muted",
                        ),
                        dbc.Switch(
                            id=IDs.Control.THEME_SWITCH,
                            label="Dark mode",
                            value=False,
                            className="mb-0",
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm bb-navbar",
    )
