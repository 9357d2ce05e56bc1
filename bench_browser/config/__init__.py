"""
Config package for bench_browser.

Responsible for:
- the GlobalConfig model
- loading global.json
"""

from .model import GlobalConfig
from .config_loader import load_global_config

__all__ = ["GlobalConfig", "load_global_config"]
