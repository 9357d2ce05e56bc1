from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Iterator, Optional, Sequence, overload

from bench_browser.core.facets import FacetOptions, build_facet_options
from bench_browser.core.filter_engine import filter_records
from bench_browser.core.record import Record
from bench_browser.core.selection_state import SelectionKey, SelectionState


class RecordStore(Sequence[Record]):
    """
    Immutable, ordered collection of the session's records.

    Includes:
    - Position lookup, so table rows map back to the exact record
    - Facet options computed once, on first use
    - Bounded cache of filtered views keyed by selection
    """

    MAX_FILTER_CACHE = 128

    def __init__(self, records: Iterable[Record], source: Optional[str] = None) -> None:
        self._records: tuple[Record, ...] = tuple(records)
        self.source = source

        # Keyed by object identity: filtered views hold the store's own records
        self._positions: dict[int, int] = {id(record): i for i, record in enumerate(self._records)}

        self._facet_options: Optional[FacetOptions] = None
        self._filter_cache: OrderedDict[SelectionKey, Sequence[Record]] = OrderedDict()

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Record]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def position(self, record: Record) -> int:
        """Index of `record` (an object taken from this store) in the store"""
        return self._positions[id(record)]

    def at(self, position: object) -> Optional[Record]:
        if isinstance(position, bool) or not isinstance(position, int):
            return None
        if 0 <= position < len(self._records):
            return self._records[position]
        return None

    def facet_options(self) -> FacetOptions:
        if self._facet_options is None:
            self._facet_options = build_facet_options(self._records)
        return self._facet_options

    def filtered(self, selection: SelectionState) -> Sequence[Record]:
        """
        Memoised `filter_records` over this store. The store never changes, so
        cached results never go stale; the oldest entry is evicted past the cap.
        """
        if selection.is_empty():
            return self._records

        key = selection.cache_key()
        cached = self._filter_cache.get(key)
        if cached is not None:
            self._filter_cache.move_to_end(key)
            return cached

        result = filter_records(self._records, selection)
        self._filter_cache[key] = result
        if len(self._filter_cache) > self.MAX_FILTER_CACHE:
            self._filter_cache.popitem(last=False)
        return result
