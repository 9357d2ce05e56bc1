from __future__ import annotations

from dataclasses import dataclass

__all__ = ["IDs", "FacetControls", "FACET_CONTROLS"]


class IDs:
    class Store:
        SELECTION_STATE = "selection-state"
        DISPLAY_PREFS = "display-prefs"

    class Control:
        ROOT = "bb-root"

        # Navbar
        RECORD_COUNT = "navbar-record-count"
        THEME_SWITCH = "theme-switch"

        # Search + facets
        SEARCH_INPUT = "search-input"
        CLEAR_BTN = "clear-filters-btn"
        FACET_ACCORDION = "facet-accordion"

        TASK_CHECKLIST = "task-checklist"
        TASK_OPTION_SEARCH = "task-option-search"
        TASK_OPTION_CAPTION = "task-option-caption"
        TASK_TITLE = "task-facet-title"

        MODALITY_CHECKLIST = "modality-checklist"
        MODALITY_OPTION_SEARCH = "modality-option-search"
        MODALITY_OPTION_CAPTION = "modality-option-caption"
        MODALITY_TITLE = "modality-facet-title"

        AREA_CHECKLIST = "area-checklist"
        AREA_OPTION_SEARCH = "area-option-search"
        AREA_OPTION_CAPTION = "area-option-caption"
        AREA_TITLE = "area-facet-title"

        YEAR_SELECT = "year-select"
        YEAR_TITLE = "year-facet-title"

        # Results
        RESULTS_HEADER = "results-header"
        RESULTS_TABLE = "results-table"

        # Detail modal
        DETAIL_MODAL = "detail-modal"
        DETAIL_TITLE = "detail-title"
        DETAIL_BODY = "detail-body"

        # Load failure
        LOAD_ALERT = "load-alert"


@dataclass(frozen=True)
class FacetControls:
    """IDs and labels for one checkbox facet section."""
    category: str
    label: str
    checklist: str
    option_search: str
    caption: str
    title: str
    noun: str


FACET_CONTROLS = (
    FacetControls(
        "task", "Task",
        IDs.Control.TASK_CHECKLIST, IDs.Control.TASK_OPTION_SEARCH,
        IDs.Control.TASK_OPTION_CAPTION, IDs.Control.TASK_TITLE, "tasks",
    ),
    FacetControls(
        "modality", "Modalities",
        IDs.Control.MODALITY_CHECKLIST, IDs.Control.MODALITY_OPTION_SEARCH,
        IDs.Control.MODALITY_OPTION_CAPTION, IDs.Control.MODALITY_TITLE, "modalities",
    ),
    FacetControls(
        "area", "Area",
        IDs.Control.AREA_CHECKLIST, IDs.Control.AREA_OPTION_SEARCH,
        IDs.Control.AREA_OPTION_CAPTION, IDs.Control.AREA_TITLE, "areas",
    ),
)
