"""Settings file and defaults for tick2paper."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from tick2paper.fileio import read_yaml

log = logging.getLogger(__name__)

OUTPUTS = {"clipboard", "stdout", "file"}


def config_path() -> Path:
    """Settings file location; override with TICK2PAPER_CONFIG."""
    return Path(
        os.environ.get("TICK2PAPER_CONFIG", str(Path.home() / ".config" / "tick2paper" / "config.yaml"))
    ).expanduser().resolve()


@dataclass
class Settings:
    default_timezone: str | None = None  # used when a row's zone is unknown
    output: str = "clipboard"  # clipboard, stdout, file
    output_path: str = ""
    strict_header: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        output = str(d.get("output", "clipboard")).strip().lower()
        return cls(
            default_timezone=d.get("default_timezone") or None,
            output=output if output in OUTPUTS else "clipboard",
            output_path=str(d.get("output_path", "") or ""),
            strict_header=bool(d.get("strict_header", False)),
            log_level=str(d.get("log_level", "WARNING")).upper(),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "output": self.output,
            "strict_header": self.strict_header,
            "log_level": self.log_level,
        }
        if self.default_timezone:
            d["default_timezone"] = self.default_timezone
        if self.output_path:
            d["output_path"] = self.output_path
        return d


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from YAML, defaulting everything that is missing."""
    if path is None:
        path = config_path()
    try:
        data = read_yaml(path)
    except yaml.YAMLError as e:
        log.warning("Ignoring malformed settings file %s: %s", path, e)
        return Settings()
    return Settings.from_dict(data)
