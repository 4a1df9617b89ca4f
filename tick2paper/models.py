"""Typed dataclasses for the TickTick backup data model.

A backup row arrives as a plain dict of strings keyed by the camelCase
column names in FIELD_NAMES. TaskRecord.from_dict trims every value and
applies per-field fallbacks; camelCase keys map to snake_case attributes.
Missing keys are treated as empty; normalization never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Column order of a TickTick backup CSV.
FIELD_NAMES: tuple[str, ...] = (
    "folderName",
    "listName",
    "title",
    "tags",
    "content",
    "isCheckList",
    "startDate",
    "dueDate",
    "reminder",
    "repeat",
    "priority",
    "status",
    "createdTime",
    "completedTime",
    "order",
    "timezone",
    "isAllDay",
    "isFloating",
    "columnName",
    "columnOrder",
    "viewMode",
)

RawRecord = dict[str, str]


def clean_string(value: Any) -> str:
    """Trim *value*; None becomes ""."""
    if value is None:
        return ""
    return str(value).strip()


def clean_optional(value: Any) -> str | None:
    """Like clean_string, but nothing left after trimming means None."""
    return clean_string(value) or None


def _int_or_zero(value: Any) -> int:
    try:
        return int(clean_string(value))
    except (TypeError, ValueError):
        return 0


# ── Task ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class TaskRecord:
    folder_name: str = ""
    list_name: str = ""
    title: str = ""
    tags: str = ""  # comma-joined
    content: str = ""
    is_check_list: str = ""
    start_date: str = ""
    due_date: str = ""  # ISO-8601, UTC
    reminder: str = ""
    repeat: str | None = None  # RRULE text; None means no repeat
    priority: int = 0  # 0 none, 1 low, 3 medium, 5 high
    status: int = 0  # non-zero means completed
    created_time: str = ""
    completed_time: str = ""
    order: str = ""
    timezone: str = ""  # IANA zone name, may be invalid
    is_all_day: str = ""
    is_floating: str = ""
    column_name: str = ""
    column_order: str = ""
    view_mode: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TaskRecord:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            folder_name=clean_string(d.get("folderName")),
            list_name=clean_string(d.get("listName")),
            title=clean_string(d.get("title")),
            tags=clean_string(d.get("tags")),
            content=clean_string(d.get("content")),
            is_check_list=clean_string(d.get("isCheckList")),
            start_date=clean_string(d.get("startDate")),
            due_date=clean_string(d.get("dueDate")),
            reminder=clean_string(d.get("reminder")),
            repeat=clean_optional(d.get("repeat")),
            priority=max(0, _int_or_zero(d.get("priority"))),
            status=_int_or_zero(d.get("status")),
            created_time=clean_string(d.get("createdTime")),
            completed_time=clean_string(d.get("completedTime")),
            order=clean_string(d.get("order")),
            timezone=clean_string(d.get("timezone")),
            is_all_day=clean_string(d.get("isAllDay")),
            is_floating=clean_string(d.get("isFloating")),
            column_name=clean_string(d.get("columnName")),
            column_order=clean_string(d.get("columnOrder")),
            view_mode=clean_string(d.get("viewMode")),
        )

    @property
    def completed(self) -> bool:
        return self.status != 0

    @property
    def project(self) -> str:
        """Grouping key: folder and list name joined by a space."""
        return " ".join(p for p in (self.folder_name, self.list_name) if p)


def normalize(raw: dict[str, Any]) -> TaskRecord:
    """Build the canonical TaskRecord for one backup row."""
    return TaskRecord.from_dict(raw)
