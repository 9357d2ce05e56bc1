from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from bench_browser.core.facets import narrow_options
from bench_browser.core.selection_state import SelectionState
from bench_browser.ui.helpers import checklist_options, facet_title, option_caption
from bench_browser.ui.ids import FACET_CONTROLS, FacetControls, IDs

if TYPE_CHECKING:
    from bench_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _register_option_search(app: dash.Dash, ctx: AppConfig, controls: FacetControls) -> None:
    # Narrow the visible checklist options; checked values always stay listed
    @app.callback(
        Output(controls.checklist, "options"),
        Output(controls.caption, "children"),
        Input(controls.option_search, "value"),
        State(controls.checklist, "value"),
    )
    def update_options(search_value, selected):
        store = ctx.store
        if store is None:
            raise exceptions.PreventUpdate

        limit = ctx.global_config.max_visible_facet_items
        all_options = store.facet_options().for_category(controls.category)
        visible = narrow_options(all_options, search_value, selected, limit=limit)

        if search_value and not visible:
            caption = f"No matching {controls.noun}"
        else:
            caption = option_caption(len(all_options), limit, search_value, controls.noun)
        return checklist_options(visible), caption


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    for controls in FACET_CONTROLS:
        _register_option_search(app, ctx, controls)

    # ---------------------------------------------------------
    # Facet titles + "Clear all" button reflect the selection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TASK_TITLE, "title"),
        Output(IDs.Control.MODALITY_TITLE, "title"),
        Output(IDs.Control.AREA_TITLE, "title"),
        Output(IDs.Control.YEAR_TITLE, "title"),
        Output(IDs.Control.CLEAR_BTN, "children"),
        Output(IDs.Control.CLEAR_BTN, "style"),
        Input(IDs.Store.SELECTION_STATE, "data"),
    )
    def update_selection_summary(data):
        state = SelectionState.from_dict(data)
        titles = [
            facet_title(controls.label, len(state.selected(controls.category)))
            for controls in FACET_CONTROLS
        ]
        titles.append(facet_title("Year Published", len(state.year)))

        n_active = state.active_filter_count()
        show_clear = n_active > 0 or bool(state.query)
        label = f"Clear all ({n_active})" if n_active else "Clear all"
        return (*titles, label, {} if show_clear else {"display": "none"})
