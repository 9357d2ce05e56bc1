from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from bench_browser.core.record import split_atoms

logger = logging.getLogger(__name__)

MAX_VISIBLE_ITEMS = 20

# Facet category -> Record field the options are drawn from
FACET_FIELDS = {
    "task": "task",
    "modality": "modalities",
    "area": "area",
    "year": "year_published",
}


@dataclass(frozen=True)
class FacetOptions:
    """
    Option lists for the four filter facets, always derived from the full
    record store so they never shrink while the user filters.
    """
    tasks: List[str] = field(default_factory=list)
    modalities: List[str] = field(default_factory=list)
    areas: List[str] = field(default_factory=list)
    years: List[str] = field(default_factory=list)

    def for_category(self, category: str) -> List[str]:
        if category == "task":
            return self.tasks
        if category == "modality":
            return self.modalities
        if category == "area":
            return self.areas
        if category == "year":
            return self.years
        raise ValueError(f"Unknown facet category {category!r}")


def _raw_value(record: Any, field_name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field_name)
    return getattr(record, field_name, None)


def extract_facet(records: Iterable[Any], field_name: str) -> List[str]:
    """
    Return the sorted, de-duplicated atoms of `field_name` across `records`.

    Values are compared case-sensitively and sorted by ordinal string order.
    Records may be Record instances or plain row mappings.
    """
    values: set[str] = set()
    for record in records:
        values.update(split_atoms(_raw_value(record, field_name)))
    return sorted(values)


def build_facet_options(records: Sequence[Any]) -> FacetOptions:
    options = FacetOptions(
        tasks=extract_facet(records, FACET_FIELDS["task"]),
        modalities=extract_facet(records, FACET_FIELDS["modality"]),
        areas=extract_facet(records, FACET_FIELDS["area"]),
        years=extract_facet(records, FACET_FIELDS["year"]),
    )
    logger.debug(
        "Facet options built",
        extra={
            "n_records": len(records),
            "n_tasks": len(options.tasks),
            "n_modalities": len(options.modalities),
            "n_areas": len(options.areas),
            "n_years": len(options.years),
        },
    )
    return options


def narrow_options(
    options: Sequence[str],
    search: Optional[str] = None,
    selected: Optional[Iterable[str]] = None,
    limit: int = MAX_VISIBLE_ITEMS,
) -> List[str]:
    """
    Options to render for a facet checklist: case-insensitive substring match on
    `search`, capped at `limit`. Selected values stay visible even past the cap,
    so a checked box never disappears while its option list is narrowed.
    """
    needle = (search or "").lower()
    if needle:
        matches = [opt for opt in options if needle in opt.lower()]
    else:
        matches = list(options)

    visible = matches[:limit]
    chosen = set(selected or [])
    if chosen:
        shown = set(visible)
        visible += [opt for opt in options if opt in chosen and opt not in shown]
    return visible
