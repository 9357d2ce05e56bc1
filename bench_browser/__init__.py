"""
Top-level package for the benchmark dataset browser.

Most code should import from submodules such as:
    bench_browser.core
    bench_browser.services
    bench_browser.ui
"""

__all__: list[str] = []
