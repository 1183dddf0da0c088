"""Bundled context templates.

Each template is a ``<name>.clawx.md`` file under ``resources/context``;
its body is injected into ``<name>.md`` in every agent workspace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from clawx_context import DOCUMENT_SUFFIX, TEMPLATE_SUFFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContextTemplate:
    """One bundled section payload."""

    name: str
    path: Path
    body: str

    @property
    def target_name(self) -> str:
        return self.name + DOCUMENT_SUFFIX


def template_name(filename: str) -> str | None:
    """Logical name of a template file, or None if it isn't one."""
    if not filename.endswith(TEMPLATE_SUFFIX):
        return None
    name = filename[: -len(TEMPLATE_SUFFIX)]
    return name or None


def load_templates(context_dir: Path | str | None) -> list[ContextTemplate]:
    """Load every *.clawx.md template, sorted by filename.

    Args:
        context_dir: Directory holding the templates.

    Returns:
        Loaded templates; empty if the directory is missing. Unreadable
        templates are logged and left out.
    """
    if context_dir is None:
        return []
    root = Path(context_dir)
    try:
        if not root.is_dir():
            return []
    except OSError:
        return []

    templates = []
    for path in sorted(root.iterdir()):
        name = template_name(path.name)
        if name is None:
            continue
        try:
            if not path.is_file():
                continue
            body = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable context template %s: %s", path, e)
            continue
        templates.append(ContextTemplate(name=name, path=path, body=body))
    return templates
