from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bench_browser.config.model import GlobalConfig
from bench_browser.core.record_store import RecordStore
from bench_browser.services.catalog_service import CatalogService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout and callback
    registration instead of module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    catalog: Optional[CatalogService] = None

    @property
    def store(self) -> Optional[RecordStore]:
        return self.catalog.store if self.catalog is not None else None

    @property
    def load_wait_s(self) -> float:
        """Upper bound for one full pass over the configured sources."""
        n_sources = max(1, len(self.global_config.data_sources))
        return self.global_config.timeout_s * n_sources + 5.0

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.catalog is None:
            raise RuntimeError("AppConfig.catalog must be initialized.")
