"""
Analysis modules for depviz.

- smart_filter: Deterministic symbol queries and their set combination
"""

from .smart_filter import (
    ComparisonOperator,
    MatchType,
    SetOperation,
    SmartFilter,
    combine,
    file_details,
    manifest_overview,
    symbol_details,
    symbols_by_file_pattern,
    symbols_by_metric,
    symbols_by_type,
    symbols_in_files_by_metric,
)

__all__ = [
    "ComparisonOperator",
    "MatchType",
    "SetOperation",
    "SmartFilter",
    "combine",
    "file_details",
    "manifest_overview",
    "symbol_details",
    "symbols_by_file_pattern",
    "symbols_by_metric",
    "symbols_by_type",
    "symbols_in_files_by_metric",
]
