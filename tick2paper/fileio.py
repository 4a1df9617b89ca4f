"""Reading backups and settings, writing outlines."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from tick2paper.errors import PathError

log = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """Read a backup file. Raises PathError if it is missing or unreadable.

    Undecodable bytes are replaced with U+FFFD.
    """
    try:
        # utf-8-sig drops the BOM some exports start with
        return path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as e:
        raise PathError(str(path)) from e


def read_yaml(path: Path) -> dict[str, Any]:
    """Settings mapping from *path*; {} when the file is missing, empty or not a mapping."""
    if not path.exists():
        return {}
    result = yaml.safe_load(path.read_text(encoding="utf-8"))
    return result if isinstance(result, dict) else {}


def write_text_atomic(path: Path, content: str) -> None:
    """Write through a sibling temp file, then rename over *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(temp_path, path)
    except BaseException:
        os.unlink(temp_path)
        raise
    log.debug("Wrote %d chars to %s", len(content), path)
