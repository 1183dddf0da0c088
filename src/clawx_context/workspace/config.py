"""Parse openclaw.json into the few fields workspace discovery needs.

The gateway owns this document and its schema; only two fields are consumed:

    {
      "agents": {
        "defaults": {"workspace": "~/.openclaw/workspace"},
        "list": [{"id": "main", "workspace": "~/.openclaw/workspace-main"}]
      }
    }

Every lookup is tolerant. A missing key, a node of the wrong type, or a blank
string simply reads as absent.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class OpenClawConfig:
    """Workspace fields decoded from openclaw.json."""

    default_workspace: str | None = None
    agent_workspaces: list[str] = field(default_factory=list)

    def workspace_paths(self) -> list[str]:
        """All declared workspace paths, default first."""
        paths = [self.default_workspace] if self.default_workspace else []
        return paths + self.agent_workspaces


def read_openclaw_config(path: Path | str) -> OpenClawConfig:
    """Read and decode openclaw.json.

    Args:
        path: Path to openclaw.json.

    Returns:
        Decoded config record.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the JSON is malformed.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return decode_config(data)


def decode_config(data: object) -> OpenClawConfig:
    """Decode an already-parsed config document."""
    agents = _get(data, "agents")
    default_ws = _text(_get(_get(agents, "defaults"), "workspace"))

    agent_list = _get(agents, "list")
    workspaces: list[str] = []
    if isinstance(agent_list, list):
        for agent in agent_list:
            ws = _text(_get(agent, "workspace"))
            if ws:
                workspaces.append(ws)

    return OpenClawConfig(default_workspace=default_ws, agent_workspaces=workspaces)


def _get(node: object, key: str) -> object:
    if isinstance(node, dict):
        return node.get(key)
    return None


def _text(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None
