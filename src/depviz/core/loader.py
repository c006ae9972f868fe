"""
Manifest loading.

Reads the dependency and audit manifests from JSON files and validates them
into the frozen models of core.types. Validation here is structural only;
schema versioning is the ingestion service's concern.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .exceptions import ManifestLoadError
from .types import AuditManifest, DependencyManifest

logger = logging.getLogger(__name__)

_dependency_adapter = TypeAdapter(DependencyManifest)
_audit_adapter = TypeAdapter(AuditManifest)


@dataclass(frozen=True)
class ManifestPair:
    """A dependency manifest with its matching audit manifest."""
    dependency_manifest: DependencyManifest
    audit_manifest: AuditManifest

    @classmethod
    def from_dict(cls, dependency_data: Any, audit_data: Any) -> "ManifestPair":
        return cls(
            dependency_manifest=_dependency_adapter.validate_python(dependency_data),
            audit_manifest=_audit_adapter.validate_python(audit_data),
        )


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise ManifestLoadError(path, f"invalid JSON: {e}") from e


def load_dependency_manifest(path: str | Path) -> DependencyManifest:
    """Load and validate a dependency manifest JSON file."""
    path = Path(path)
    data = _read_json(path)
    try:
        manifest = _dependency_adapter.validate_python(data)
    except ValidationError as e:
        raise ManifestLoadError(path, f"{e.error_count()} validation error(s)") from e
    logger.debug(f"Loaded dependency manifest {path} ({len(manifest)} files)")
    return manifest


def load_audit_manifest(path: str | Path) -> AuditManifest:
    """Load and validate an audit manifest JSON file."""
    path = Path(path)
    data = _read_json(path)
    try:
        manifest = _audit_adapter.validate_python(data)
    except ValidationError as e:
        raise ManifestLoadError(path, f"{e.error_count()} validation error(s)") from e
    logger.debug(f"Loaded audit manifest {path} ({len(manifest)} files)")
    return manifest


def load_manifest_pair(dependency_path: str | Path, audit_path: str | Path) -> ManifestPair:
    return ManifestPair(
        dependency_manifest=load_dependency_manifest(dependency_path),
        audit_manifest=load_audit_manifest(audit_path),
    )
