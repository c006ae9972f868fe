"""
Core modules for depviz.

This package contains the fundamental building blocks:
- types: Manifest models, metrics and symbol types
- resolution: Internal / External / Unresolved reference lookup
- loader: Reading manifests from JSON files
- exceptions: Error hierarchy
"""

from .exceptions import ConfigError, DepvizError, ManifestLoadError, ManifestNotFoundError
from .loader import ManifestPair, load_audit_manifest, load_dependency_manifest, load_manifest_pair
from .resolution import External, FileResolution, Internal, Unresolved, resolve_file
from .types import (
    AuditManifest, DependencyManifest, FileAudit, FileManifest, Metric,
    SymbolAudit, SymbolManifest, SymbolRef, SymbolType, compute_node_id,
)

__all__ = [
    # Types
    "AuditManifest", "DependencyManifest", "FileAudit", "FileManifest",
    "Metric", "SymbolAudit", "SymbolManifest", "SymbolRef", "SymbolType",
    "compute_node_id",
    # Resolution
    "External", "FileResolution", "Internal", "Unresolved", "resolve_file",
    # Loading
    "ManifestPair", "load_audit_manifest", "load_dependency_manifest", "load_manifest_pair",
    # Errors
    "ConfigError", "DepvizError", "ManifestLoadError", "ManifestNotFoundError",
]
