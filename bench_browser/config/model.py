from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DEFAULT_DATA_SOURCES = [
    "data/paperswithcode_datasets.csv",
    "../csv/paperswithcode_datasets.csv",
]


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    `data_sources` are tried in order; each entry is an http(s) URL or a
    filesystem path (relative paths resolve against `config_root`).
    """
    config_root: Path
    ui_title: str = "Benchmark Dataset Browser"
    subtitle: str = "Search and filter benchmark datasets"
    data_sources: List[str] = field(default_factory=lambda: list(DEFAULT_DATA_SOURCES))
    timeout_s: float = 10.0
    page_size: int = 25
    max_visible_facet_items: int = 20
    search_debounce_s: float = 0.3
