from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable

import dash
from dash import Input, Output, State

from bench_browser.core.selection_state import SelectionState
from bench_browser.ui.ids import IDs

if TYPE_CHECKING:
    from bench_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

CHECKLIST_CATEGORIES = {
    IDs.Control.TASK_CHECKLIST: "task",
    IDs.Control.MODALITY_CHECKLIST: "modality",
    IDs.Control.AREA_CHECKLIST: "area",
}


def next_selection(
    state: SelectionState,
    triggered: Iterable[str],
    values: Dict[str, Any],
) -> SelectionState:
    """
    Pure helper: apply the UI controls that fired to the current selection.

    `triggered` holds the component ids that changed, `values` maps component
    id -> current control value. Clearing wins over anything else that fired
    alongside it.
    """
    triggered = list(triggered)
    if IDs.Control.CLEAR_BTN in triggered:
        return state.cleared()

    for component_id in triggered:
        value = values.get(component_id)
        if component_id == IDs.Control.SEARCH_INPUT:
            state = state.with_query(value or "")
        elif component_id == IDs.Control.YEAR_SELECT:
            state = state.with_years(value)
        elif component_id in CHECKLIST_CATEGORIES:
            state = state.apply_checklist(CHECKLIST_CATEGORIES[component_id], value)
    return state


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> SelectionState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTION_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.TASK_CHECKLIST, "value"),
        Input(IDs.Control.MODALITY_CHECKLIST, "value"),
        Input(IDs.Control.AREA_CHECKLIST, "value"),
        Input(IDs.Control.YEAR_SELECT, "value"),
        Input(IDs.Control.CLEAR_BTN, "n_clicks"),
        State(IDs.Store.SELECTION_STATE, "data"),
    )
    def sync_selection_from_ui(query, tasks, modalities, areas, years, _clear_clicks, data):
        state = SelectionState.from_dict(data)
        triggered = list(dash.ctx.triggered_prop_ids.values())

        values = {
            IDs.Control.SEARCH_INPUT: query,
            IDs.Control.TASK_CHECKLIST: tasks,
            IDs.Control.MODALITY_CHECKLIST: modalities,
            IDs.Control.AREA_CHECKLIST: areas,
            IDs.Control.YEAR_SELECT: years,
        }
        new_state = next_selection(state, triggered, values)
        logger.debug("Selection updated", extra={"selection": new_state.to_dict()})
        return new_state.to_dict()

    # ---------------------------------------------------------
    # Clear all: reset every control in one go
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.TASK_CHECKLIST, "value"),
        Output(IDs.Control.MODALITY_CHECKLIST, "value"),
        Output(IDs.Control.AREA_CHECKLIST, "value"),
        Output(IDs.Control.YEAR_SELECT, "value"),
        Output(IDs.Control.TASK_OPTION_SEARCH, "value"),
        Output(IDs.Control.MODALITY_OPTION_SEARCH, "value"),
        Output(IDs.Control.AREA_OPTION_SEARCH, "value"),
        Input(IDs.Control.CLEAR_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_controls(_n_clicks):
        return "", [], [], [], [], "", "", ""
