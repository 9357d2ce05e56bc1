from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Mapping, Tuple

BENCHMARK_URL_PREFIX = "https://paperswithcode.com/sota/"

# Record attribute -> CSV header names accepted for it (first present wins)
COLUMN_ALIASES: Dict[str, Tuple[str, ...]] = {
    "id": ("dataset_id", "id"),
    "task": ("task",),
    "subtask": ("subtask",),
    "description": ("description",),
    "area": ("area",),
    "modalities": ("modalities",),
    "associated_tasks": ("associated_tasks",),
    "year_published": ("year_published",),
    "dataset_size": ("dataset_size",),
    "license": ("license",),
    "languages": ("languages",),
    "homepage_url": ("homepage_url",),
    "source_page_url": ("source_page_url", "pwc_url"),
    "paper_url": ("paper_url",),
    "benchmark_urls": ("benchmark_urls",),
}


def split_atoms(raw: Any) -> List[str]:
    """
    Split a comma-joined multi-value string into trimmed, non-empty atoms.

    Non-string values are not split: they become a single atom (their str()),
    and None/NaN/empty give no atoms at all.
    """
    if _is_missing(raw):
        return []
    if not isinstance(raw, str):
        text = str(raw)
        return [text] if text else []
    return [piece.strip() for piece in raw.split(",") if piece.strip()]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value == ""


def _as_text(value: Any) -> str:
    if _is_missing(value):
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class BenchmarkLink:
    name: str
    url: str


@dataclass(frozen=True)
class Record:
    """
    One benchmark-dataset entry.

    Every field is a string; absent or malformed source values are stored as "".
    Multi-value fields (task, modalities, associated_tasks, benchmark_urls)
    keep their raw comma-joined form, use `atoms()` to enumerate them.
    """

    id: str
    task: str = ""
    subtask: str = ""
    description: str = ""
    area: str = ""
    modalities: str = ""
    associated_tasks: str = ""
    year_published: str = ""
    dataset_size: str = ""
    license: str = ""
    languages: str = ""
    homepage_url: str = ""
    source_page_url: str = ""
    paper_url: str = ""
    benchmark_urls: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Record:
        values: Dict[str, str] = {}
        for attr, columns in COLUMN_ALIASES.items():
            value = ""
            for col in columns:
                if col in row and not _is_missing(row[col]):
                    value = _as_text(row[col])
                    break
            values[attr] = value
        return cls(**values)

    def atoms(self, field_name: str) -> List[str]:
        return split_atoms(getattr(self, field_name, ""))

    @property
    def show_subtask(self) -> bool:
        return bool(self.subtask) and self.subtask != self.task

    def benchmark_links(self) -> List[BenchmarkLink]:
        links: List[BenchmarkLink] = []
        for slug in self.atoms("benchmark_urls"):
            name = slug.split("/")[-1] or slug
            links.append(BenchmarkLink(name=name, url=f"{BENCHMARK_URL_PREFIX}{slug}"))
        return links

    def to_row(self) -> Dict[str, str]:
        return asdict(self)
