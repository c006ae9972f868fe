"""Manifest files shared by the CLI tests."""

import json

import pytest

DEPENDENCY_MANIFEST = {
    "src/app.ts": {
        "id": "src/app.ts",
        "filePath": "src/app.ts",
        "language": "typescript",
        "metrics": {"linesCount": 120},
        "dependencies": {
            "src/models/user.ts": {"id": "src/models/user.ts", "symbols": {"User": "User"}},
            "react": {"id": "react", "isExternal": True, "symbols": {"useState": "useState"}},
        },
        "symbols": {
            "main": {
                "id": "main",
                "type": "function",
                "metrics": {"linesCount": 40},
                "dependencies": {
                    "src/models/user.ts": {"id": "src/models/user.ts", "symbols": {"User": "User"}},
                    "react": {"id": "react", "isExternal": True, "symbols": {"useState": "useState"}},
                },
            },
        },
    },
    "src/models/user.ts": {
        "id": "src/models/user.ts",
        "filePath": "src/models/user.ts",
        "language": "typescript",
        "dependents": {"src/app.ts": {"id": "src/app.ts", "symbols": {"main": "main"}}},
        "symbols": {
            "User": {
                "id": "User",
                "type": "class",
                "metrics": {"linesCount": 80},
                "dependents": {"src/app.ts": {"id": "src/app.ts", "symbols": {"main": "main"}}},
            },
        },
    },
}

AUDIT_MANIFEST = {
    "src/app.ts": {
        "id": "src/app.ts",
        "alerts": {
            "linesCount": {"metric": "linesCount", "severity": 3, "message": {"short": "Long file"}},
        },
        "symbols": {},
    },
}


@pytest.fixture
def manifest_files(tmp_path):
    """Write both manifests to disk and return their paths as strings."""
    dependency_path = tmp_path / "deps.json"
    audit_path = tmp_path / "audit.json"
    dependency_path.write_text(json.dumps(DEPENDENCY_MANIFEST))
    audit_path.write_text(json.dumps(AUDIT_MANIFEST))
    return str(dependency_path), str(audit_path)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep config discovery away from the real working directory."""
    monkeypatch.chdir(tmp_path)
