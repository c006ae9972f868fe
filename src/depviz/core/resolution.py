"""
Reference resolution.

A dependency or dependent entry can point at a file that is part of the
analysed project, at a file flagged as external by the analyser, or at a file
id that simply is not in the manifest. The three outcomes are modelled as a
tagged union resolved once per lookup, so the builders never juggle
`None` checks.
"""

from dataclasses import dataclass
from typing import Union

from .types import DependencyManifest, FileManifest


@dataclass(frozen=True)
class Internal:
    """The referenced file is present in the dependency manifest."""
    file: FileManifest

    @property
    def file_id(self) -> str:
        return self.file.id

    def is_external(self) -> bool:
        return False


@dataclass(frozen=True)
class External:
    """The reference is flagged external by the analyser."""
    file_id: str

    def is_external(self) -> bool:
        return True


@dataclass(frozen=True)
class Unresolved:
    """The reference is not flagged external, but the file is absent."""
    file_id: str

    def is_external(self) -> bool:
        return True


FileResolution = Union[Internal, External, Unresolved]


def resolve_file(
    manifest: DependencyManifest,
    file_id: str,
    is_external: bool = False,
) -> FileResolution:
    """Resolve a referenced file id against the dependency manifest."""
    if is_external:
        return External(file_id)
    file = manifest.get(file_id)
    if file is None:
        return Unresolved(file_id)
    return Internal(file)
