from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from bench_browser.config.model import GlobalConfig
from bench_browser.core.facets import FacetOptions, narrow_options
from bench_browser.ui.helpers import checklist_options, option_caption
from bench_browser.ui.ids import FACET_CONTROLS, FacetControls, IDs


def _facet_section(controls: FacetControls, options: list[str], limit: int) -> dbc.AccordionItem:
    return dbc.AccordionItem(
        [
            dcc.Input(
                id=controls.option_search,
                type="search",
                value="",
                placeholder=f"Search {controls.noun}...",
                className="form-control form-control-sm mb-2",
            ),
            html.Div(
                dbc.Checklist(
                    id=controls.checklist,
                    options=checklist_options(narrow_options(options, limit=limit)),
                    value=[],
                ),
                className="bb-facet-list",
            ),
            html.Small(
                option_caption(len(options), limit, None, controls.noun),
                id=controls.caption,
                className="text-muted",
            ),
        ],
        title=controls.label,
        id=controls.title,
        item_id=controls.category,
    )


def build_filter_panel(global_config: GlobalConfig, facet_options: FacetOptions) -> dbc.Card:
    limit = global_config.max_visible_facet_items
    debounce = global_config.search_debounce_s or False

    sections = [
        _facet_section(controls, facet_options.for_category(controls.category), limit)
        for controls in FACET_CONTROLS
    ]
    sections.append(
        dbc.AccordionItem(
            dcc.Dropdown(
                id=IDs.Control.YEAR_SELECT,
                options=checklist_options(facet_options.years),
                value=[],
                multi=True,
                placeholder="Year",
            ),
            title="Year Published",
            id=IDs.Control.YEAR_TITLE,
            item_id="year",
        )
    )

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Span("Search & Filter", className="fw-semibold"),
                        dbc.Button(
                            "Clear all",
                            id=IDs.Control.CLEAR_BTN,
                            color="link",
                            size="sm",
                            style={"display": "none"},
                        ),
                    ],
                    className="d-flex justify-content-between align-items-center",
                )
            ),
            dbc.CardBody(
                [
                    dcc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="search",
                        value="",
                        debounce=debounce,
                        placeholder="Search datasets...",
                        className="form-control mb-3",
                    ),
                    dbc.Accordion(
                        sections,
                        id=IDs.Control.FACET_ACCORDION,
                        active_item="task",
                    ),
                ]
            ),
        ],
        className="bb-sidebar",
    )
