"""
Core type definitions for depviz.

Manifests arrive as camelCase JSON documents produced by the upstream
manifest-ingestion service. The models below accept that shape through
field aliases and expose snake_case attributes to the rest of the code.
All models are frozen: the graph engine reads manifests, it never edits them.
"""

from enum import StrEnum
from typing import Dict, NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Metric(StrEnum):
    """The seven metrics tracked per file and per symbol."""
    LINES_COUNT = "linesCount"
    CODE_LINE_COUNT = "codeLineCount"
    CHARACTER_COUNT = "characterCount"
    CODE_CHARACTER_COUNT = "codeCharacterCount"
    DEPENDENCY_COUNT = "dependencyCount"
    DEPENDENT_COUNT = "dependentCount"
    CYCLOMATIC_COMPLEXITY = "cyclomaticComplexity"


class SymbolType(StrEnum):
    """Kinds of declarations a symbol can be."""
    CLASS = "class"
    FUNCTION = "function"
    VARIABLE = "variable"
    STRUCT = "struct"
    ENUM = "enum"
    UNION = "union"
    TYPEDEF = "typedef"
    INTERFACE = "interface"
    RECORD = "record"
    DELEGATE = "delegate"


# Symbol type shown for neighbours whose owning file is outside the manifest.
UNKNOWN_SYMBOL_TYPE = "unknown"


class ManifestModel(BaseModel):
    """Base for every manifest model: camelCase aliases, frozen, lenient."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# =============================================================================
# Dependency manifest
# =============================================================================

class DependencyRef(ManifestModel):
    """A file referenced by a file or symbol, with the symbols it provides."""
    id: str
    is_external: bool = False
    symbols: Dict[str, str] = Field(default_factory=dict)


class DependentRef(ManifestModel):
    """A file that references a file or symbol, with the symbols using it."""
    id: str
    symbols: Dict[str, str] = Field(default_factory=dict)


class SymbolManifest(ManifestModel):
    id: str
    type: SymbolType
    metrics: Dict[str, float] = Field(default_factory=dict)
    dependencies: Dict[str, DependencyRef] = Field(default_factory=dict)
    dependents: Dict[str, DependentRef] = Field(default_factory=dict)


class FileManifest(ManifestModel):
    """
    Dependency information for one source file.

    `metrics` is keyed by Metric value; missing metrics read as 0.
    """
    id: str
    file_path: str
    language: str = ""
    metrics: Dict[str, float] = Field(default_factory=dict)
    dependencies: Dict[str, DependencyRef] = Field(default_factory=dict)
    dependents: Dict[str, DependentRef] = Field(default_factory=dict)
    symbols: Dict[str, SymbolManifest] = Field(default_factory=dict)

    def metric(self, metric: Metric) -> float:
        return self.metrics.get(metric, 0)


# =============================================================================
# Audit manifest
# =============================================================================

class AlertMessage(ManifestModel):
    short: str
    long: str = ""


class AuditAlert(ManifestModel):
    """A rule violation for one metric."""
    metric: str | None = None
    severity: int = Field(ge=0, le=5)
    message: AlertMessage


class SymbolAudit(ManifestModel):
    id: str
    alerts: Dict[str, AuditAlert] = Field(default_factory=dict)


class FileAudit(ManifestModel):
    id: str
    alerts: Dict[str, AuditAlert] = Field(default_factory=dict)
    symbols: Dict[str, SymbolAudit] = Field(default_factory=dict)


# file-id -> manifest entry
DependencyManifest = Dict[str, FileManifest]
AuditManifest = Dict[str, FileAudit]


class SymbolRef(NamedTuple):
    """Cross-file identity of a symbol."""
    file_id: str
    symbol_id: str


def compute_node_id(file_id: str, symbol_id: str | None = None) -> str:
    """Graph node id: the file id for file nodes, `file:symbol` for symbols."""
    if symbol_id is None:
        return file_id
    return f"{file_id}:{symbol_id}"
