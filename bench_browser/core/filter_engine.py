from __future__ import annotations

import logging
import time
from typing import Callable, List, Sequence

from bench_browser.core.record import Record, split_atoms
from bench_browser.core.selection_state import SelectionState

logger = logging.getLogger(__name__)

# Fields searched by the free-text query
SEARCH_FIELDS = ("id", "task", "subtask", "description", "area")

Predicate = Callable[[Record], bool]


def _text_predicate(query: str) -> Predicate:
    needle = query.lower()

    def matches(record: Record) -> bool:
        for name in SEARCH_FIELDS:
            value = getattr(record, name, "")
            if value and needle in value.lower():
                return True
        return False

    return matches


def _atoms_predicate(field_name: str, wanted: frozenset) -> Predicate:
    # Multi-valued field: any atom in the selection is enough
    def matches(record: Record) -> bool:
        return any(atom in wanted for atom in split_atoms(getattr(record, field_name, "")))

    return matches


def _exact_predicate(field_name: str, wanted: frozenset) -> Predicate:
    # Single-valued field: the whole value must be selected, no splitting
    def matches(record: Record) -> bool:
        value = getattr(record, field_name, "")
        return bool(value) and value in wanted

    return matches


def build_predicates(selection: SelectionState) -> List[Predicate]:
    """One predicate per active filter category, cheapest first."""
    predicates: List[Predicate] = []
    if selection.area:
        predicates.append(_exact_predicate("area", selection.area))
    if selection.year:
        predicates.append(_exact_predicate("year_published", selection.year))
    if selection.task:
        predicates.append(_atoms_predicate("task", selection.task))
    if selection.modality:
        predicates.append(_atoms_predicate("modalities", selection.modality))
    if selection.query:
        predicates.append(_text_predicate(selection.query))
    return predicates


def filter_records(records: Sequence[Record], selection: SelectionState) -> Sequence[Record]:
    """
    Return the records matching every active category of `selection`, in their
    original order.

    With no query and no facet selections the input sequence itself is returned.
    """
    if selection.is_empty():
        return records

    started = time.perf_counter()
    predicates = build_predicates(selection)
    result = [r for r in records if all(p(r) for p in predicates)]

    logger.debug(
        "Filtered records",
        extra={
            "n_records": len(records),
            "n_matches": len(result),
            "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return result
