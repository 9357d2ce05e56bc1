from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

CATEGORIES: Tuple[str, ...] = ("task", "modality", "area", "year")

SelectionKey = Tuple[str, Tuple[str, ...], Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]


@dataclass(frozen=True)
class SelectionState:
    """
    Represents the current user query and facet selections.

    Fields:

    - query: free-text search, stored verbatim (case folding happens at match time)
    - task / modality / area / year: selected facet values per category

    An empty set means the category is inactive, not "match nothing".
    Instances are immutable: every transition returns a new SelectionState.
    """

    query: str = ""
    task: FrozenSet[str] = field(default_factory=frozenset)
    modality: FrozenSet[str] = field(default_factory=frozenset)
    area: FrozenSet[str] = field(default_factory=frozenset)
    year: FrozenSet[str] = field(default_factory=frozenset)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def selected(self, category: str) -> FrozenSet[str]:
        _check_category(category)
        return getattr(self, category)

    def is_empty(self) -> bool:
        return not self.query and not any(getattr(self, c) for c in CATEGORIES)

    def active_filter_count(self) -> int:
        return sum(len(getattr(self, c)) for c in CATEGORIES)

    def cache_key(self) -> SelectionKey:
        return (
            self.query,
            tuple(sorted(self.task)),
            tuple(sorted(self.modality)),
            tuple(sorted(self.area)),
            tuple(sorted(self.year)),
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def with_query(self, query: str) -> SelectionState:
        return replace(self, query=query)

    def toggle(self, category: str, value: str, included: bool) -> SelectionState:
        current = self.selected(category)
        if included:
            if value in current:
                return self
            updated = current | {value}
        else:
            if value not in current:
                return self
            updated = current - {value}
        return replace(self, **{category: frozenset(updated)})

    def with_years(self, values: Optional[Iterable[str]]) -> SelectionState:
        return replace(self, year=frozenset(values or ()))

    def cleared(self) -> SelectionState:
        return SelectionState()

    def apply_checklist(self, category: str, values: Optional[Iterable[str]]) -> SelectionState:
        """
        Reconcile a checkbox group reporting its full checked list: every newly
        checked value is toggled on and every unchecked one toggled off.
        """
        wanted = set(values or ())
        current = self.selected(category)
        state = self
        for value in sorted(wanted - current):
            state = state.toggle(category, value, True)
        for value in sorted(current - wanted):
            state = state.toggle(category, value, False)
        return state

    # ------------------------------------------------------------------
    # JSON form for dcc.Store
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"query": self.query}
        for category in CATEGORIES:
            data[category] = sorted(getattr(self, category))
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> SelectionState:
        if not data:
            return cls()
        return cls(
            query=str(data.get("query") or ""),
            task=frozenset(str(v) for v in data.get("task") or []),
            modality=frozenset(str(v) for v in data.get("modality") or []),
            area=frozenset(str(v) for v in data.get("area") or []),
            year=frozenset(str(v) for v in data.get("year") or []),
        )


def _check_category(category: str) -> None:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown facet category {category!r}")
