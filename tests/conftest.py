"""Shared test fixtures for tick2paper tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml

from tick2paper.models import FIELD_NAMES

HEADER_LABELS = [
    "Folder Name",
    "List Name",
    "Title",
    "Tags",
    "Content",
    "Is Check list",
    "Start Date",
    "Due Date",
    "Reminder",
    "Repeat",
    "Priority",
    "Status",
    "Created Time",
    "Completed Time",
    "Order",
    "Timezone",
    "Is All Day",
    "Is Floating",
    "Column Name",
    "Column Order",
    "View Mode",
]

PREAMBLE = '''"Date: 2024-03-20+0000"
"Version: 7.1"
"Status:
0 Normal
1 Completed
2 Archived"
'''

BACKUP_CSV = PREAMBLE + ",".join(f'"{label}"' for label in HEADER_LABELS) + "\n" + """\
"Work","Admin","Pay rent","bills","- call landlord","N","","2024-03-15T00:00:00.000+0000","","","1","0","2024-03-01T12:00:00.000+0000","","0","America/New_York","false","false","","0","list"
"","Inbox","Buy milk","","","N","","","","","0","0","2024-03-02T08:30:00.000+0000","","1","UTC","false","false","","0","list"
"Work","Admin","File taxes","","▪receipts
▪forms","Y","","","","RRULE:FREQ=YEARLY;INTERVAL=1","0","2","2024-02-01T09:00:00.000+0000","2024-03-10T15:45:30.000+0000","2","UTC","false","false","","0","list"
"Home","","Water plants","garden,weekly","","N","","","","","5","0","2024-01-15T18:00:00.000+0000","","3","Not/AZone","false","false","","0","list"
"""


@pytest.fixture
def make_row():
    """Build a raw backup row; every field defaults to an empty string."""

    def _make(**fields: str) -> dict[str, str]:
        row = {name: "" for name in FIELD_NAMES}
        row.update(fields)
        return row

    return _make


@pytest.fixture
def header_row() -> dict[str, str]:
    return dict(zip(FIELD_NAMES, HEADER_LABELS))


@pytest.fixture
def backup_text() -> str:
    return BACKUP_CSV


@pytest.fixture
def backup_file(tmp_path: Path) -> Path:
    path = tmp_path / "TickTick-backup.csv"
    path.write_text(BACKUP_CSV, encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path):
    """Write a settings file and point TICK2PAPER_CONFIG at it."""
    path = tmp_path / "config.yaml"
    settings = {
        "default_timezone": "UTC",
        "output": "stdout",
        "strict_header": False,
        "log_level": "info",
    }
    path.write_text(yaml.dump(settings, default_flow_style=False), encoding="utf-8")
    os.environ["TICK2PAPER_CONFIG"] = str(path)
    yield path
    if "TICK2PAPER_CONFIG" in os.environ:
        del os.environ["TICK2PAPER_CONFIG"]
