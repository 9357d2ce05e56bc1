from __future__ import annotations

from typing import List, Tuple


class BenchBrowserError(Exception):
    """Base exception for all bench_browser errors"""
    pass


class ConfigError(BenchBrowserError):
    """Invalid or inconsistent global.json"""
    pass


class SourceUnavailableError(BenchBrowserError):
    """
    Every candidate data source failed to fetch/parse or produced zero records.

    `attempts` holds one (location, reason) pair per candidate tried, in order.
    The most recent underlying error is chained as __cause__.
    """

    def __init__(self, attempts: List[Tuple[str, str]]):
        self.attempts = attempts
        if attempts:
            detail = "; ".join(f"{loc}: {reason}" for loc, reason in attempts)
        else:
            detail = "no data sources configured"
        super().__init__(f"Failed to load dataset records ({detail})")


class LoadCancelledError(BenchBrowserError):
    """The load was cancelled or superseded; its result must be discarded"""
    pass
