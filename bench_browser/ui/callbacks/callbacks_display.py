from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from bench_browser.ui.ids import IDs

if TYPE_CHECKING:
    from bench_browser.ui.config import AppConfig

THEME_LIGHT = "light"
THEME_DARK = "dark"


def root_class_name(theme: str) -> str:
    return "bb-root bb-theme-dark" if theme == THEME_DARK else "bb-root"


def register_display_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # Display preference lives only in the browser (local storage)
    @app.callback(
        Output(IDs.Store.DISPLAY_PREFS, "data"),
        Output(IDs.Control.THEME_SWITCH, "value"),
        Output(IDs.Control.ROOT, "className"),
        Input(IDs.Control.THEME_SWITCH, "value"),
        Input(IDs.Store.DISPLAY_PREFS, "modified_timestamp"),
        State(IDs.Store.DISPLAY_PREFS, "data"),
    )
    def sync_theme(switch_on, _ts, prefs):
        if dash.ctx.triggered_id == IDs.Control.THEME_SWITCH:
            theme = THEME_DARK if switch_on else THEME_LIGHT
            return {"theme": theme}, dash.no_update, root_class_name(theme)

        theme = (prefs or {}).get("theme", THEME_LIGHT)
        return dash.no_update, theme == THEME_DARK, root_class_name(theme)
