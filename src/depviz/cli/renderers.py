"""
JSON output for CLI commands.

Every command that supports `--json` prints exactly one envelope:

    {"meta": {"command": ..., "status": "success"}, "data": ...}
    {"meta": {"command": ..., "status": "error"}, "error": {"type": ..., "message": ...}}
"""

import json
from typing import Any, Dict

import click
from pydantic import BaseModel


class JsonRenderer:
    def __init__(self, command: str):
        self.command = command

    def _meta(self, status: str) -> Dict[str, str]:
        return {"command": self.command, "status": status}

    def render_success(self, data: Any) -> None:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        envelope = {"meta": self._meta("success"), "data": data}
        click.echo(json.dumps(envelope, indent=2, ensure_ascii=False))

    def render_error(self, error: Exception) -> None:
        envelope = {
            "meta": self._meta("error"),
            "error": {"type": type(error).__name__, "message": str(error)},
        }
        click.echo(json.dumps(envelope, indent=2, ensure_ascii=False))
