"""
Manifest builders shared by the unit tests.

Each helper returns the frozen pydantic model the engine consumes, so tests
can describe small projects in a few lines.
"""

from typing import Dict, Iterable, Optional

from depviz.core.types import (
    AlertMessage,
    AuditAlert,
    DependencyManifest,
    DependencyRef,
    DependentRef,
    FileAudit,
    FileManifest,
    SymbolAudit,
    SymbolManifest,
    SymbolType,
)


def dep(file_id: str, *symbol_ids: str, external: bool = False) -> DependencyRef:
    return DependencyRef(
        id=file_id,
        is_external=external,
        symbols={symbol_id: symbol_id for symbol_id in symbol_ids},
    )


def used_by(file_id: str, *symbol_ids: str) -> DependentRef:
    return DependentRef(id=file_id, symbols={symbol_id: symbol_id for symbol_id in symbol_ids})


def sym(
    symbol_id: str,
    type: SymbolType = SymbolType.FUNCTION,
    dependencies: Iterable[DependencyRef] = (),
    dependents: Iterable[DependentRef] = (),
    metrics: Optional[Dict[str, float]] = None,
) -> SymbolManifest:
    return SymbolManifest(
        id=symbol_id,
        type=type,
        metrics=metrics or {},
        dependencies={ref.id: ref for ref in dependencies},
        dependents={ref.id: ref for ref in dependents},
    )


def file(
    file_id: str,
    symbols: Iterable[SymbolManifest] = (),
    dependencies: Iterable[DependencyRef] = (),
    dependents: Iterable[DependentRef] = (),
    metrics: Optional[Dict[str, float]] = None,
    language: str = "typescript",
) -> FileManifest:
    return FileManifest(
        id=file_id,
        file_path=file_id,
        language=language,
        metrics=metrics or {},
        dependencies={ref.id: ref for ref in dependencies},
        dependents={ref.id: ref for ref in dependents},
        symbols={symbol.id: symbol for symbol in symbols},
    )


def manifest(*files: FileManifest) -> DependencyManifest:
    return {file_manifest.id: file_manifest for file_manifest in files}


def alert(metric: str, severity: int, short: str = "Too big") -> AuditAlert:
    return AuditAlert(metric=metric, severity=severity, message=AlertMessage(short=short, long=short))


def symbol_audit(symbol_id: str, *alerts: AuditAlert) -> SymbolAudit:
    return SymbolAudit(id=symbol_id, alerts={a.metric: a for a in alerts})


def file_audit(file_id: str, *alerts: AuditAlert, symbols: Iterable[SymbolAudit] = ()) -> FileAudit:
    return FileAudit(
        id=file_id,
        alerts={a.metric: a for a in alerts},
        symbols={s.id: s for s in symbols},
    )
