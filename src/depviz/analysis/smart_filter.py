"""
Smart Filter.

Deterministic symbol queries over a dependency manifest. Each query returns a
frozenset of SymbolRef; results are combined step by step with set
operations and the final set feeds the explorer tree as its symbol filter.
"""

import logging
import operator
from collections import Counter
from enum import StrEnum
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional

from ..core.types import DependencyManifest, Metric, SymbolRef, SymbolType

logger = logging.getLogger(__name__)

SymbolSet = FrozenSet[SymbolRef]


class ComparisonOperator(StrEnum):
    LT = "<"
    LE = "<="
    EQ = "="
    GE = ">="
    GT = ">"


class MatchType(StrEnum):
    EXACT = "exact"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"


class SetOperation(StrEnum):
    REPLACE = "replace"
    UNION = "union"
    INTERSECTION = "intersection"
    SUBTRACTION = "subtraction"


_COMPARATORS: Dict[ComparisonOperator, Callable[[float, float], bool]] = {
    ComparisonOperator.LT: operator.lt,
    ComparisonOperator.LE: operator.le,
    ComparisonOperator.EQ: operator.eq,
    ComparisonOperator.GE: operator.ge,
    ComparisonOperator.GT: operator.gt,
}


def compare(value: float, op: ComparisonOperator, threshold: float) -> bool:
    return _COMPARATORS[ComparisonOperator(op)](value, threshold)


def _matches_pattern(path: str, pattern: str, match_type: MatchType) -> bool:
    path, pattern = path.lower(), pattern.lower()
    match MatchType(match_type):
        case MatchType.EXACT:
            return path == pattern
        case MatchType.CONTAINS:
            return pattern in path
        case MatchType.STARTS_WITH:
            return path.startswith(pattern)
        case MatchType.ENDS_WITH:
            return path.endswith(pattern)


def symbols_by_type(manifest: DependencyManifest, symbol_type: SymbolType) -> SymbolSet:
    """Every symbol of the given type."""
    return frozenset(
        SymbolRef(file_manifest.id, symbol.id)
        for file_manifest in manifest.values()
        for symbol in file_manifest.symbols.values()
        if symbol.type == symbol_type
    )


def symbols_by_metric(
    manifest: DependencyManifest,
    metric: Metric,
    op: ComparisonOperator,
    value: float,
) -> SymbolSet:
    """Symbols whose own metric satisfies the comparison. Missing metrics read as 0."""
    return frozenset(
        SymbolRef(file_manifest.id, symbol.id)
        for file_manifest in manifest.values()
        for symbol in file_manifest.symbols.values()
        if compare(symbol.metrics.get(metric, 0), op, value)
    )


def symbols_in_files_by_metric(
    manifest: DependencyManifest,
    metric: Metric,
    op: ComparisonOperator,
    value: float,
) -> SymbolSet:
    """All symbols of files whose file-level metric satisfies the comparison."""
    return frozenset(
        SymbolRef(file_manifest.id, symbol_id)
        for file_manifest in manifest.values()
        if compare(file_manifest.metric(metric), op, value)
        for symbol_id in file_manifest.symbols
    )


def symbols_by_file_pattern(
    manifest: DependencyManifest,
    pattern: str,
    match_type: MatchType = MatchType.CONTAINS,
) -> SymbolSet:
    """All symbols of files whose path matches the pattern (case-insensitive)."""
    return frozenset(
        SymbolRef(file_manifest.id, symbol_id)
        for file_manifest in manifest.values()
        if _matches_pattern(file_manifest.file_path or file_manifest.id, pattern, match_type)
        for symbol_id in file_manifest.symbols
    )


def combine(current: Optional[SymbolSet], new: Iterable[SymbolRef], operation: SetOperation) -> SymbolSet:
    """
    Merge a query result into the accumulated result.

    `current` is None before the first step; every operation then behaves
    like replace, except subtraction which yields an empty set.
    """
    new = frozenset(new)
    operation = SetOperation(operation)

    if current is None:
        return frozenset() if operation is SetOperation.SUBTRACTION else new

    if operation is SetOperation.REPLACE:
        return new
    if operation is SetOperation.UNION:
        return current | new
    if operation is SetOperation.INTERSECTION:
        return current & new
    return current - new


def manifest_overview(manifest: DependencyManifest) -> Dict[str, Any]:
    """High-level summary: counts, languages, symbol type breakdown."""
    files = list(manifest.values())
    type_counts = Counter(
        symbol.type.value for file_manifest in files for symbol in file_manifest.symbols.values()
    )
    languages: List[str] = []
    for file_manifest in files:
        if file_manifest.language and file_manifest.language not in languages:
            languages.append(file_manifest.language)

    return {
        "total_files": len(files),
        "total_symbols": sum(type_counts.values()),
        "languages": languages,
        "symbol_type_breakdown": dict(type_counts),
        "file_ids": list(manifest),
    }


def file_details(manifest: DependencyManifest, file_id: str) -> Optional[Dict[str, Any]]:
    file_manifest = manifest.get(file_id)
    if file_manifest is None:
        return None
    return {
        "file_id": file_id,
        "file_path": file_manifest.file_path,
        "language": file_manifest.language,
        "metrics": dict(file_manifest.metrics),
        "dependencies": sorted(file_manifest.dependencies),
        "dependents": sorted(file_manifest.dependents),
        "symbol_count": len(file_manifest.symbols),
        "symbols": list(file_manifest.symbols),
    }


def symbol_details(manifest: DependencyManifest, file_id: str, symbol_id: str) -> Optional[Dict[str, Any]]:
    file_manifest = manifest.get(file_id)
    if file_manifest is None:
        return None
    symbol = file_manifest.symbols.get(symbol_id)
    if symbol is None:
        return None
    return {
        "file_id": file_id,
        "file_path": file_manifest.file_path,
        "language": file_manifest.language,
        "symbol_id": symbol_id,
        "symbol_type": symbol.type.value,
        "metrics": dict(symbol.metrics),
        "dependencies": sorted(symbol.dependencies),
        "dependents": sorted(symbol.dependents),
    }


class SmartFilter:
    """
    Accumulates query results into a single symbol set.

    Each query method applies the given set operation to the running result
    and returns self, so steps can be chained:

        SmartFilter(manifest).by_type(SymbolType.CLASS).by_file_pattern(
            "tests/", MatchType.STARTS_WITH, SetOperation.SUBTRACTION
        ).result
    """

    def __init__(self, manifest: DependencyManifest):
        self.manifest = manifest
        self._result: Optional[SymbolSet] = None
        self.steps = 0

    @property
    def result(self) -> Optional[SymbolSet]:
        """The accumulated set, or None when no step has run (no filter)."""
        return self._result

    def apply(self, found: Iterable[SymbolRef], operation: SetOperation = SetOperation.REPLACE) -> "SmartFilter":
        found = frozenset(found)
        self._result = combine(self._result, found, operation)
        self.steps += 1
        logger.debug(
            f"Smart filter step {self.steps}: {operation} with {len(found)} symbols "
            f"-> {len(self._result)} symbols"
        )
        return self

    def by_type(self, symbol_type: SymbolType, operation: SetOperation = SetOperation.REPLACE) -> "SmartFilter":
        return self.apply(symbols_by_type(self.manifest, symbol_type), operation)

    def by_metric(
        self,
        metric: Metric,
        op: ComparisonOperator,
        value: float,
        operation: SetOperation = SetOperation.REPLACE,
    ) -> "SmartFilter":
        return self.apply(symbols_by_metric(self.manifest, metric, op, value), operation)

    def by_file_metric(
        self,
        metric: Metric,
        op: ComparisonOperator,
        value: float,
        operation: SetOperation = SetOperation.REPLACE,
    ) -> "SmartFilter":
        return self.apply(symbols_in_files_by_metric(self.manifest, metric, op, value), operation)

    def by_file_pattern(
        self,
        pattern: str,
        match_type: MatchType = MatchType.CONTAINS,
        operation: SetOperation = SetOperation.REPLACE,
    ) -> "SmartFilter":
        return self.apply(symbols_by_file_pattern(self.manifest, pattern, match_type), operation)

    def reset(self) -> None:
        self._result = None
        self.steps = 0
