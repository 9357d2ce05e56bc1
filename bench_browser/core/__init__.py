"""
Core domain layer: records, facet extraction, selection state and the
filter engine.
"""

from .record import Record
from .record_store import RecordStore
from .selection_state import SelectionState
from .facets import FacetOptions, extract_facet
from .filter_engine import filter_records

__all__ = [
    "Record",
    "RecordStore",
    "SelectionState",
    "FacetOptions",
    "extract_facet",
    "filter_records",
]
