"""
Exception hierarchy for depviz.

Only two conditions can occur while building views: a requested file or
symbol is missing from the dependency manifest, and a smart filter that
matches nothing. The first is raised as ManifestNotFoundError at lookup time
and handled at the builder boundary; the second is a return value (see
graph.explorer), not an exception.
"""

from pathlib import Path


class DepvizError(Exception):
    """Base class for all depviz errors."""


class ManifestNotFoundError(DepvizError):
    """A file or symbol is absent from the dependency manifest."""

    def __init__(self, file_id: str, symbol_id: str | None = None):
        self.file_id = file_id
        self.symbol_id = symbol_id
        if symbol_id is None:
            message = f"File manifest not found for {file_id}"
        else:
            message = f"Symbol manifest not found for {file_id}:{symbol_id}"
        super().__init__(message)


class ManifestLoadError(DepvizError):
    """A manifest document could not be read or validated."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load manifest {self.path}: {reason}")


class ConfigError(DepvizError):
    """The depviz configuration file holds an invalid value."""
