"""Application query – search, filter, sort and paginate in-memory records."""
from listquery.application.query.engine import ListQueryEngine, QueryView
from listquery.application.query.filters import (
    CUSTOM_FILTERS,
    SENTINEL_NULL,
    ExistsCheck,
    FilterValue,
    Membership,
    PassThrough,
    Range,
    Scalar,
    SentinelNull,
    coerce_filter,
)
from listquery.application.query.prefilters import vehicle_count_prefilter
from listquery.application.query.search import SearchSpec, build_predicate, filter_records, matches
from listquery.application.query.sorting import SortDirection, SortSpec, compare, sort_records

__all__ = [
    "CUSTOM_FILTERS",
    "SENTINEL_NULL",
    "ExistsCheck",
    "FilterValue",
    "ListQueryEngine",
    "Membership",
    "PassThrough",
    "QueryView",
    "Range",
    "Scalar",
    "SearchSpec",
    "SentinelNull",
    "SortDirection",
    "SortSpec",
    "build_predicate",
    "coerce_filter",
    "compare",
    "filter_records",
    "matches",
    "sort_records",
    "vehicle_count_prefilter",
]
