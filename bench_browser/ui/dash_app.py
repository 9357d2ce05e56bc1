from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from bench_browser.config.config_loader import load_global_config
from bench_browser.services.catalog_service import CatalogService
from bench_browser.ui.callbacks.callbacks_detail import register_detail_callbacks
from bench_browser.ui.callbacks.callbacks_display import register_display_callbacks
from bench_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from bench_browser.ui.callbacks.callbacks_render import register_render_callbacks
from bench_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from bench_browser.ui.config import AppConfig
from bench_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Start loading records in the background
    catalog = CatalogService(
        global_config.data_sources,
        config_root=config_root,
        timeout_s=global_config.timeout_s,
    )
    catalog.start_load()

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        catalog=catalog,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        # Layout is built per page load and may be the failure banner
        suppress_callback_exceptions=True,
    )

    app.title = global_config.ui_title
    def serve_layout():
        return build_layout(ctx)

    app.layout = serve_layout

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_detail_callbacks(app, ctx)
    register_display_callbacks(app, ctx)

    logger.info("Dash app created", extra={"config_root": str(config_root)})
    return app
