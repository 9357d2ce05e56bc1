from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from bench_browser.config.model import GlobalConfig
from bench_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _number(raw: Dict[str, Any], key: str, default: float, *, kind=float, allow_zero: bool = False):
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"global.json: '{key}' must be a number, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"global.json: '{key}' out of range: {value!r}")
    return kind(value)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load global.json from the config directory.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"global.json is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError("global.json must contain a JSON object")

    defaults = GlobalConfig(config_root=root)

    sources = raw.get("data_sources", defaults.data_sources)
    if isinstance(sources, str):
        sources = [sources]
    if not isinstance(sources, list) or not sources or not all(isinstance(s, str) and s for s in sources):
        raise ConfigError("global.json: 'data_sources' must be a list of non-empty strings")

    return GlobalConfig(
        config_root=root,
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
        data_sources=list(sources),
        timeout_s=_number(raw, "timeout_s", defaults.timeout_s),
        page_size=_number(raw, "page_size", defaults.page_size, kind=int),
        max_visible_facet_items=_number(
            raw, "max_visible_facet_items", defaults.max_visible_facet_items, kind=int
        ),
        search_debounce_s=_number(raw, "search_debounce_s", defaults.search_debounce_s, allow_zero=True),
    )
